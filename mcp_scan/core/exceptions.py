# Copyright 2026 Cisco Systems, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""MCP Scan exceptions.

The detection engine itself never raises: malformed or absent fields simply
produce no findings. These exceptions belong to the collaborators around it
(loading configuration files, writing reports). All of them inherit from
McpScanError for easy catching.

Example:
    >>> from mcp_scan.core.scanner import McpScanner
    >>> from mcp_scan.core.exceptions import ConfigLoadError
    >>>
    >>> scanner = McpScanner()
    >>>
    >>> try:
    ...     result = scanner.scan_file("path/to/mcp.json")
    ... except ConfigLoadError as e:
    ...     print(f"Failed to load config: {e}")
"""


class McpScanError(Exception):
    """Base exception for all MCP Scan errors."""

    pass


class ConfigLoadError(McpScanError):
    """Raised when unable to load an MCP configuration file.

    This can indicate:
    - Missing or unreadable file
    - Invalid JSON or YAML syntax
    - A top-level document that is not a mapping
    """

    pass


class ReportWriteError(McpScanError):
    """Raised when a generated report cannot be written to its destination."""

    pass

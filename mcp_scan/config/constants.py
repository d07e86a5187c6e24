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

"""
Constants for MCP Scan.
"""

from .._version import __version__ as PACKAGE_VERSION


class McpScanConstants:
    """Constants used throughout the scanner."""

    VERSION = PACKAGE_VERSION
    TOOL_NAME = "mcp-scan"
    SCANNER_NAME = "MCP Security Scanner"

    # Discovery
    DEFAULT_DEMO_DIR = "./demos"
    LOCAL_CONFIG_PATHS = (
        "./mcp.json",
        "./config/mcp.json",
        "./.mcp/config.json",
    )
    # Relative to the user's home directory
    HOME_CONFIG_PATHS = (
        (".mcp", "config.json"),
        (".config", "mcp", "config.json"),
        ("Library", "Application Support", "Claude", "claude_desktop_config.json"),
    )
    CONFIG_EXTENSIONS = (".json", ".yaml", ".yml")

    # Files whose path contains one of these are credential fixtures: every
    # secret pattern match is reported without placeholder/context filtering.
    DEFAULT_FIXTURE_PATH_MARKERS = ("credentials-test", "test-credentials")

    # Thresholds
    MAX_TIMEOUT_MS = 300_000  # 5 minutes

    # Output
    OUTPUT_FORMATS = ("console", "json", "markdown", "sarif")
    DEFAULT_OUTPUT_FORMAT = "console"
    DEFAULT_LOG_LEVEL = "WARNING"

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
MCP Scan - Security scanner for MCP server configurations.
"""

from ._version import __version__

__author__ = "Cisco Systems, Inc."


def __getattr__(name: str):
    """Lazy-load public API symbols on first access.

    Keeps ``python -m mcp_scan.cli.cli`` from importing the reporters and
    the YAML loader before argument parsing.
    """
    _lazy_map = {
        "Config": (".config.config", "Config"),
        "McpScanConstants": (".config.constants", "McpScanConstants"),
        "ConfigLoader": (".core.loader", "ConfigLoader"),
        "load_config": (".core.loader", "load_config"),
        "discover_configs": (".core.discovery", "discover_configs"),
        "Finding": (".core.models", "Finding"),
        "McpConfig": (".core.models", "McpConfig"),
        "Report": (".core.models", "Report"),
        "ScanResult": (".core.models", "ScanResult"),
        "ServerEntry": (".core.models", "ServerEntry"),
        "Severity": (".core.models", "Severity"),
        "McpScanner": (".core.scanner", "McpScanner"),
        "scan_config": (".core.scanner", "scan_config"),
        "scan_paths": (".core.scanner", "scan_paths"),
        "mask_secret": (".core.redaction", "mask_secret"),
    }
    if name in _lazy_map:
        module_path, attr = _lazy_map[name]
        import importlib

        mod = importlib.import_module(module_path, __package__)
        val = getattr(mod, attr)
        # Cache on the module so __getattr__ is only called once per symbol
        globals()[name] = val
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "McpScanner",
    "scan_config",
    "scan_paths",
    "McpConfig",
    "ServerEntry",
    "Finding",
    "ScanResult",
    "Report",
    "Severity",
    "ConfigLoader",
    "load_config",
    "discover_configs",
    "mask_secret",
    "Config",
    "McpScanConstants",
]

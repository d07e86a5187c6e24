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
Configuration class for MCP Scan.

Values come from keyword arguments first, then ``MCP_SCAN_*`` environment
variables, then the defaults below. The CLI applies its flags on top.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .constants import McpScanConstants

_TRUE_VALUES = ("true", "1", "yes")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in _TRUE_VALUES


@dataclass
class Config:
    """
    Configuration for MCP Scan.
    """

    # Scanning Options
    mask_secrets: bool = False
    config_paths: list[str] = field(default_factory=list)
    demo_dir: str = McpScanConstants.DEFAULT_DEMO_DIR
    max_workers: int = 1
    fixture_path_markers: tuple[str, ...] = McpScanConstants.DEFAULT_FIXTURE_PATH_MARKERS

    # Output Options
    output_format: str = McpScanConstants.DEFAULT_OUTPUT_FORMAT
    output_file: str | None = None
    verbose: bool = False
    compact: bool = False

    # Logging
    log_level: str = McpScanConstants.DEFAULT_LOG_LEVEL

    # Environment values that could not be parsed
    env_errors: list[str] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        """Load configuration from environment variables if not provided."""

        if _env_flag("MCP_SCAN_MASK_SECRETS"):
            self.mask_secrets = True

        if _env_flag("MCP_SCAN_VERBOSE"):
            self.verbose = True

        if _env_flag("MCP_SCAN_COMPACT"):
            self.compact = True

        if not self.config_paths:
            if env_paths := os.getenv("MCP_SCAN_CONFIG_PATHS"):
                self.config_paths = [p for p in env_paths.split(os.pathsep) if p]

        # Format, output and log level only from environment when still at default
        if self.output_format == McpScanConstants.DEFAULT_OUTPUT_FORMAT:
            if env_format := os.getenv("MCP_SCAN_FORMAT"):
                self.output_format = env_format.lower()

        if self.output_file is None:
            self.output_file = os.getenv("MCP_SCAN_OUTPUT") or None

        if self.max_workers == 1:
            if env_workers := os.getenv("MCP_SCAN_MAX_WORKERS"):
                try:
                    self.max_workers = max(1, int(env_workers))
                except ValueError:
                    self.env_errors.append(f"MCP_SCAN_MAX_WORKERS must be an integer, got {env_workers!r}")

        if self.log_level == McpScanConstants.DEFAULT_LOG_LEVEL:
            if env_level := os.getenv("MCP_SCAN_LOG_LEVEL"):
                self.log_level = env_level.upper()

    def validate(self) -> None:
        """
        Check the output settings and any malformed environment values.

        The scanner itself runs with whatever it is given; the CLI calls this
        after applying its flags.

        Raises:
            ValueError: If a setting cannot be used
        """
        if self.env_errors:
            raise ValueError("; ".join(self.env_errors))

        if self.output_format not in McpScanConstants.OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported output format {self.output_format!r}; "
                f"expected one of {', '.join(McpScanConstants.OUTPUT_FORMATS)}"
            )

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create configuration from environment variables.

        Returns:
            Config instance with values from environment
        """
        return cls()

    @classmethod
    def from_file(cls, config_file: Path) -> "Config":
        """
        Load configuration from a .env file.

        Variables already set in the process environment take precedence
        over the file.

        Args:
            config_file: Path to .env file

        Returns:
            Config instance
        """
        if Path(config_file).exists():
            load_dotenv(config_file, override=False)

        return cls.from_env()

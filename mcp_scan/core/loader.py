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
MCP configuration file loader.
"""

import json
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigLoadError
from .models import McpConfig


class ConfigLoader:
    """Loads MCP configuration documents from JSON or YAML files.

    The format is chosen by extension: ``.yaml``/``.yml`` are parsed as YAML,
    everything else as JSON (Claude Desktop and most MCP clients write JSON
    without a fixed file name).
    """

    YAML_EXTENSIONS = {".yaml", ".yml"}

    def load(self, config_path: str | Path) -> McpConfig:
        """
        Load an MCP configuration file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Parsed McpConfig

        Raises:
            ConfigLoadError: If the file cannot be read or parsed
        """
        if not isinstance(config_path, Path):
            config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigLoadError(f"Config file does not exist: {config_path}")

        if not config_path.is_file():
            raise ConfigLoadError(f"Path is not a file: {config_path}")

        try:
            with open(config_path, encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigLoadError(f"Failed to read {config_path}: {e}") from e

        data = self._parse(content, config_path)
        if data is None:
            # Empty file: nothing configured
            return McpConfig()
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Expected a mapping at the top level of {config_path}, got {type(data).__name__}")

        return McpConfig.from_dict(data)

    def _parse(self, content: str, config_path: Path) -> Any:
        if config_path.suffix.lower() in self.YAML_EXTENSIONS:
            try:
                return yaml.safe_load(content)
            except yaml.YAMLError as e:
                raise ConfigLoadError(f"Invalid YAML in {config_path}: {e}") from e

        if not content.strip():
            return None
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(f"Invalid JSON in {config_path}: {e}") from e


def load_config(config_path: str | Path) -> McpConfig:
    """
    Convenience function to load an MCP configuration file.

    Args:
        config_path: Path to the configuration file

    Returns:
        Parsed McpConfig
    """
    return ConfigLoader().load(config_path)

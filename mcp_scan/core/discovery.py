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
Discovery of MCP configuration files to scan.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from ..config.constants import McpScanConstants

logger = logging.getLogger(__name__)


def default_config_locations(home: Path | None = None) -> list[Path]:
    """Well-known places MCP clients keep their configuration."""
    home = home if home is not None else Path.home()
    locations = [Path(p) for p in McpScanConstants.LOCAL_CONFIG_PATHS]
    locations.extend(home.joinpath(*parts) for parts in McpScanConstants.HOME_CONFIG_PATHS)
    return locations


def _expand_directory(directory: Path, extensions: Iterable[str]) -> list[Path]:
    return sorted(p for p in directory.rglob("*") if p.is_file() and p.suffix.lower() in extensions)


def discover_configs(
    config_paths: Iterable[str | Path] | None = None,
    demo_dir: str | Path | None = McpScanConstants.DEFAULT_DEMO_DIR,
    home: Path | None = None,
) -> list[Path]:
    """
    Build the list of configuration files to scan.

    Explicit paths win: when any are given, only those are used (directories
    are expanded to the JSON/YAML files beneath them). Otherwise the default
    client locations are checked and *demo_dir* is walked for ``*.json`` files.

    Args:
        config_paths: Files or directories named by the user
        demo_dir: Directory of demo configurations used when nothing is named
        home: Home directory override for the default locations

    Returns:
        Existing files, de-duplicated, in discovery order
    """
    candidates: list[Path] = []
    explicit = [Path(p) for p in (config_paths or [])]

    if explicit:
        for path in explicit:
            if path.is_dir():
                candidates.extend(_expand_directory(path, McpScanConstants.CONFIG_EXTENSIONS))
            else:
                candidates.append(path)
    else:
        candidates.extend(p for p in default_config_locations(home) if p.is_file())
        if demo_dir is not None and Path(demo_dir).is_dir():
            candidates.extend(_expand_directory(Path(demo_dir), (".json",)))
        else:
            logger.debug("Demo directory not found: %s", demo_dir)

    configs: list[Path] = []
    seen: set[Path] = set()
    for path in candidates:
        if path in seen:
            continue
        seen.add(path)
        if path.is_file():
            configs.append(path)
        else:
            logger.warning("Skipping missing config path: %s", path)

    return configs

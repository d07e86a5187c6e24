# Copyright 2026 Cisco Systems, Inc. and its affiliates
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
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest before running tests.
All fixtures defined here are available to every test module without
explicit imports.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import pytest
import yaml
from dotenv import load_dotenv

from mcp_scan.config.config import Config
from mcp_scan.core.models import McpConfig, ServerEntry
from mcp_scan.core.scanner import McpScanner

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

project_root = Path(__file__).parent.parent
env_file = project_root / ".env"

if env_file.exists():
    load_dotenv(env_file)


@pytest.fixture(autouse=True)
def _clean_scan_env(monkeypatch):
    """Keep MCP_SCAN_* variables from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("MCP_SCAN_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def scanner() -> McpScanner:
    """Scanner with default settings."""
    return McpScanner(config=Config())


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_server():
    """Factory fixture for :class:`ServerEntry` objects.

    Usage::

        server = make_server(command="rm", args=["-rf", "/"])
    """

    def _make(**fields: Any) -> ServerEntry:
        return ServerEntry(**fields)

    return _make


@pytest.fixture
def make_config():
    """Factory fixture for :class:`McpConfig` built from raw document mappings.

    Usage::

        config = make_config({"files": {"command": "npx"}}, defaults={"env": {...}})
    """

    def _make(servers: dict[str, Any] | None = None, defaults: dict[str, Any] | None = None) -> McpConfig:
        document: dict[str, Any] = {"mcpServers": servers or {}}
        if defaults is not None:
            document["defaults"] = defaults
        return McpConfig.from_dict(document)

    return _make


@pytest.fixture
def write_config(tmp_path: Path):
    """Factory fixture that writes a configuration document to disk.

    Usage::

        path = write_config({"mcpServers": {...}})
        path = write_config({"mcpServers": {...}}, name="claude.yaml")
        path = write_config("{not json", name="broken.json")

    Dictionaries are serialized as JSON or YAML according to *name*; strings
    are written verbatim.
    """
    _counter = [0]

    def _make(document: dict[str, Any] | str, name: str | None = None) -> Path:
        _counter[0] += 1
        path = tmp_path / (name or f"config-{_counter[0]}.json")
        path.parent.mkdir(parents=True, exist_ok=True)

        if isinstance(document, str):
            content = document
        elif path.suffix in (".yaml", ".yml"):
            content = yaml.safe_dump(document)
        else:
            content = json.dumps(document, indent=2)

        path.write_text(content, encoding="utf-8")
        return path

    return _make

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
Core scanner engine for orchestrating MCP configuration analysis.
"""

from __future__ import annotations

import concurrent.futures
import logging
from collections.abc import Iterable
from pathlib import Path

from ..config.config import Config
from .analyzers.base import BaseAnalyzer
from .analyzers.command_analyzer import CommandAnalyzer
from .analyzers.config_analyzer import ConfigAnalyzer
from .analyzers.filesystem_analyzer import FilesystemAnalyzer
from .analyzers.secret_analyzer import SecretAnalyzer
from .exceptions import ConfigLoadError
from .loader import ConfigLoader
from .models import Finding, McpConfig, Report, ScanResult

logger = logging.getLogger(__name__)

SERVERS_PREFIX = "mcpServers"
DEFAULTS_PREFIX = "defaults"


def build_risk_analyzers() -> list[BaseAnalyzer]:
    """Risk heuristics run against every server entry, in reporting order."""
    return [FilesystemAnalyzer(), CommandAnalyzer(), ConfigAnalyzer()]


class McpScanner:
    """Main scanner that orchestrates MCP configuration analysis."""

    def __init__(
        self,
        config: Config | None = None,
        analyzers: list[BaseAnalyzer] | None = None,
    ):
        """
        Initialize scanner.

        Args:
            config: Scanner configuration. If None, loads from environment.
            analyzers: Risk analyzers to run per server entry. If None, uses
                the filesystem, command and config analyzers.
        """
        self.config = config or Config.from_env()
        self.analyzers = analyzers if analyzers is not None else build_risk_analyzers()
        self.secret_analyzer = SecretAnalyzer(
            mask_secrets=self.config.mask_secrets, fixture_markers=self.config.fixture_path_markers
        )
        self.loader = ConfigLoader()

    def is_fixture_path(self, file_path: str) -> bool:
        """Check whether *file_path* names a credential fixture that forces detection."""
        return any(marker in file_path for marker in self.config.fixture_path_markers)

    def scan_config(
        self,
        file_path: str,
        config: McpConfig,
        mask_secrets: bool | None = None,
        force_detection: bool | None = None,
    ) -> ScanResult:
        """
        Scan an already-loaded configuration document.

        Args:
            file_path: Path the document came from; used as the result key
            config: Parsed configuration
            mask_secrets: Override ``Config.mask_secrets`` for this call
            force_detection: Report every secret pattern match without
                filtering. Defaults to whether *file_path* is a credential fixture.

        Returns:
            ScanResult with findings in discovery order
        """
        if force_detection is None:
            force_detection = self.is_fixture_path(file_path)

        secrets = self.secret_analyzer
        if mask_secrets is not None and mask_secrets != secrets.mask_secrets:
            secrets = SecretAnalyzer(mask_secrets=mask_secrets, fixture_markers=secrets.fixture_markers)

        findings: list[Finding] = []

        for server_name, server in config.mcp_servers.items():
            location = f"{SERVERS_PREFIX}.{server_name}"
            findings.extend(secrets.analyze(server, location, force=force_detection))
            for analyzer in self.analyzers:
                findings.extend(analyzer.analyze(server, location))

        # Defaults carry no command, args or working directory to assess
        if config.defaults is not None:
            findings.extend(
                secrets.scan_values(
                    config.defaults.env, config.defaults.settings, DEFAULTS_PREFIX, force=force_detection
                )
            )

        logger.debug("Scanned %s: %d findings", file_path, len(findings))
        return ScanResult(file_path=file_path, findings=findings)

    def scan_file(self, config_path: str | Path) -> ScanResult:
        """
        Load and scan a single configuration file.

        Raises:
            ConfigLoadError: If the file cannot be loaded
        """
        config = self.loader.load(config_path)
        return self.scan_config(str(config_path), config)

    def scan_paths(self, config_paths: Iterable[str | Path]) -> Report:
        """
        Scan several configuration files into one report.

        Files that fail to load are logged, recorded in ``Report.errors`` and
        skipped. With ``Config.max_workers > 1`` files are scanned in parallel;
        the report keeps the input order either way.

        Args:
            config_paths: Files to scan

        Returns:
            Report with one ScanResult per loadable file
        """
        paths = [Path(p) for p in config_paths]
        report = Report()
        if not paths:
            return report

        if self.config.max_workers > 1 and len(paths) > 1:
            with concurrent.futures.ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                outcomes = list(executor.map(self._scan_file_safe, paths))
        else:
            outcomes = [self._scan_file_safe(p) for p in paths]

        for path, outcome in zip(paths, outcomes):
            if isinstance(outcome, ScanResult):
                report.add_scan_result(outcome)
            else:
                report.errors[str(path)] = outcome

        return report

    def _scan_file_safe(self, config_path: Path) -> ScanResult | str:
        try:
            return self.scan_file(config_path)
        except ConfigLoadError as e:
            logger.warning("Skipping %s: %s", config_path, e)
            return str(e)


def scan_config(file_path: str, config: McpConfig, mask_secrets: bool = False) -> ScanResult:
    """
    Convenience function to scan a loaded configuration.

    Args:
        file_path: Path the configuration came from
        config: Parsed configuration
        mask_secrets: Redact secret values shown in findings

    Returns:
        ScanResult with findings
    """
    scanner = McpScanner(config=Config(mask_secrets=mask_secrets))
    return scanner.scan_config(file_path, config, mask_secrets=mask_secrets)


def scan_paths(config_paths: Iterable[str | Path], config: Config | None = None) -> Report:
    """
    Convenience function to scan configuration files.

    Args:
        config_paths: Files to scan
        config: Scanner configuration

    Returns:
        Report with results for every loadable file
    """
    return McpScanner(config=config).scan_paths(config_paths)

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
Data models for MCP configurations and security findings.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Severity levels for security findings."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Ordinal rank, higher is more severe."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.CRITICAL: 4,
    Severity.HIGH: 3,
    Severity.MEDIUM: 2,
    Severity.LOW: 1,
}

# Highest to lowest, the order reporters group findings in.
SEVERITY_ORDER = [Severity.CRITICAL, Severity.HIGH, Severity.MEDIUM, Severity.LOW]


def _as_str(value: Any) -> str:
    """Normalize a scalar from a parsed document to the string form the engine inspects."""
    if value is None:
        return ""
    if isinstance(value, bool):
        # YAML turns `DEBUG: true` into a bool; keep the spelling a JSON document would have
        return "true" if value else "false"
    return str(value)


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _as_str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [_as_str(v) for v in value]


def _as_str_map(value: Any) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(k): _as_str(v) for k, v in value.items()}


def _as_settings(value: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        return {}
    return {str(k): v for k, v in value.items()}


@dataclass
class ServerEntry:
    """One configured MCP server process.

    Every field is optional in the source document; absent fields mean there
    is nothing to check for that part of the entry.
    """

    command: str = ""
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)
    settings: dict[str, Any] = field(default_factory=dict)
    timeout: int = 0  # milliseconds
    disabled: bool = False
    working_dir: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ServerEntry":
        """Build an entry from a parsed ``mcpServers.<name>`` mapping."""
        if not isinstance(data, dict):
            return cls()
        return cls(
            command=_as_str(data.get("command")),
            args=_as_str_list(data.get("args")),
            env=_as_str_map(data.get("env")),
            settings=_as_settings(data.get("settings")),
            timeout=_as_int(data.get("timeout")),
            disabled=data.get("disabled") is True,
            working_dir=_as_str(data.get("workingDir")),
        )


@dataclass
class DefaultsEntry:
    """Shared defaults applied to every server (no command or working directory)."""

    timeout: int = 0
    env: dict[str, str] = field(default_factory=dict)
    args: list[str] = field(default_factory=list)
    settings: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "DefaultsEntry":
        if not isinstance(data, dict):
            return cls()
        return cls(
            timeout=_as_int(data.get("timeout")),
            env=_as_str_map(data.get("env")),
            args=_as_str_list(data.get("args")),
            settings=_as_settings(data.get("settings")),
        )


@dataclass
class McpConfig:
    """A parsed MCP configuration document."""

    mcp_servers: dict[str, ServerEntry] = field(default_factory=dict)
    defaults: DefaultsEntry | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "McpConfig":
        """Build a configuration from the top-level document mapping.

        Unknown keys are ignored. A ``defaults`` key that is present but not a
        mapping is treated as absent.
        """
        servers_data = data.get("mcpServers") or {}
        servers = {}
        if isinstance(servers_data, dict):
            servers = {str(name): ServerEntry.from_dict(entry) for name, entry in servers_data.items()}

        defaults = None
        if isinstance(data.get("defaults"), dict):
            defaults = DefaultsEntry.from_dict(data["defaults"])

        return cls(mcp_servers=servers, defaults=defaults)


@dataclass(frozen=True)
class Finding:
    """A security issue discovered in an MCP configuration."""

    severity: Severity
    title: str
    description: str
    recommendation: str
    location: str  # Dotted path into the document, e.g. "mcpServers.foo.env.API_KEY"

    def to_dict(self) -> dict[str, str]:
        """Convert finding to dictionary."""
        return {
            "severity": self.severity.value,
            "title": self.title,
            "description": self.description,
            "recommendation": self.recommendation,
            "location": self.location,
        }


@dataclass
class ScanResult:
    """Findings for a single configuration file, in discovery order."""

    file_path: str
    findings: list[Finding] = field(default_factory=list)

    @property
    def has_findings(self) -> bool:
        return bool(self.findings)

    @property
    def max_severity(self) -> Severity | None:
        """Get the highest severity level found, or None for a clean file."""
        if not self.findings:
            return None
        return max((f.severity for f in self.findings), key=lambda s: s.rank)

    def get_findings_by_severity(self, severity: Severity) -> list[Finding]:
        """Get all findings of a specific severity."""
        return [f for f in self.findings if f.severity == severity]

    def to_dict(self) -> dict[str, Any]:
        """Convert scan result to dictionary.

        Field names follow the report format consumed by existing tooling
        (``filePath`` / ``issues``).
        """
        return {
            "filePath": self.file_path,
            "issues": [f.to_dict() for f in self.findings],
        }


@dataclass
class Report:
    """Aggregated report from scanning one or more configuration files."""

    scan_results: list[ScanResult] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)  # file path -> load error
    total_configs: int = 0
    total_findings: int = 0
    critical_count: int = 0
    high_count: int = 0
    medium_count: int = 0
    low_count: int = 0
    timestamp: datetime = field(default_factory=datetime.now)

    def add_scan_result(self, result: ScanResult):
        """Add a scan result and update counters."""
        self.scan_results.append(result)
        self.total_configs += 1
        self.total_findings += len(result.findings)

        for finding in result.findings:
            if finding.severity == Severity.CRITICAL:
                self.critical_count += 1
            elif finding.severity == Severity.HIGH:
                self.high_count += 1
            elif finding.severity == Severity.MEDIUM:
                self.medium_count += 1
            elif finding.severity == Severity.LOW:
                self.low_count += 1

    @property
    def configs_with_issues(self) -> int:
        return sum(1 for r in self.scan_results if r.findings)

    @property
    def findings_by_severity(self) -> dict[str, int]:
        return {
            Severity.CRITICAL.value: self.critical_count,
            Severity.HIGH.value: self.high_count,
            Severity.MEDIUM.value: self.medium_count,
            Severity.LOW.value: self.low_count,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary."""
        return {
            "summary": {
                "totalConfigs": self.total_configs,
                "totalIssues": self.total_findings,
                "issuesBySeverity": self.findings_by_severity,
                "configsWithIssues": self.configs_with_issues,
            },
            "results": [result.to_dict() for result in self.scan_results],
        }

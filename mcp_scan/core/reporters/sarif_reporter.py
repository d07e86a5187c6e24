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
SARIF format reporter for scan results.

SARIF (Static Analysis Results Interchange Format) is consumed by GitHub Code
Scanning and most CI security dashboards. Findings carry no line numbers, so
each result points at the configuration file and names the offending field
as a logical location.
https://docs.oasis-open.org/sarif/sarif/v2.1.0/sarif-v2.1.0.html
"""

import hashlib
import json
import re
from typing import Any

from ...config.constants import McpScanConstants
from ..exceptions import ReportWriteError
from ..models import Finding, Report, ScanResult, Severity

_NON_WORD_RE = re.compile(r"[^a-z0-9]+")


def rule_id_for(finding: Finding) -> str:
    """Stable rule identifier derived from a finding title."""
    return _NON_WORD_RE.sub("-", finding.title.lower()).strip("-")


class SARIFReporter:
    """Generates SARIF 2.1.0 format reports for GitHub Code Scanning."""

    SARIF_VERSION = "2.1.0"
    SARIF_SCHEMA = "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/Schemata/sarif-schema-2.1.0.json"

    # Map severity to SARIF levels
    SEVERITY_TO_LEVEL = {
        Severity.CRITICAL: "error",
        Severity.HIGH: "error",
        Severity.MEDIUM: "warning",
        Severity.LOW: "note",
    }

    def __init__(
        self,
        tool_name: str = McpScanConstants.TOOL_NAME,
        tool_version: str = McpScanConstants.VERSION,
    ):
        """
        Initialize SARIF reporter.

        Args:
            tool_name: Name of the scanning tool
            tool_version: Version of the scanning tool
        """
        self.tool_name = tool_name
        self.tool_version = tool_version

    def generate_report(self, data: ScanResult | Report) -> str:
        """
        Generate SARIF report.

        Args:
            data: ScanResult or Report object

        Returns:
            SARIF JSON string
        """
        if isinstance(data, ScanResult):
            report = Report()
            report.add_scan_result(data)
            data = report

        return json.dumps(self._generate_from_report(data), indent=2)

    def _generate_from_report(self, report: Report) -> dict[str, Any]:
        all_findings = [f for scan_result in report.scan_results for f in scan_result.findings]
        rules = self._extract_rules(all_findings)

        all_results = []
        for scan_result in report.scan_results:
            all_results.extend(self._convert_findings(scan_result.findings, scan_result.file_path))

        return {
            "$schema": self.SARIF_SCHEMA,
            "version": self.SARIF_VERSION,
            "runs": [
                {
                    "tool": self._create_tool_component(rules),
                    "results": all_results,
                    "invocations": [
                        {
                            "executionSuccessful": not report.errors,
                            "endTimeUtc": report.timestamp.isoformat() + "Z",
                        }
                    ],
                }
            ],
        }

    def _create_tool_component(self, rules: list[dict[str, Any]]) -> dict[str, Any]:
        return {
            "driver": {
                "name": self.tool_name,
                "version": self.tool_version,
                "rules": rules,
            }
        }

    def _extract_rules(self, findings: list[Finding]) -> list[dict[str, Any]]:
        """Extract unique rules from findings."""
        seen_rules: set[str] = set()
        rules = []

        for finding in findings:
            rule_id = rule_id_for(finding)
            if rule_id in seen_rules:
                continue
            seen_rules.add(rule_id)

            rules.append(
                {
                    "id": rule_id,
                    "name": finding.title,
                    "shortDescription": {"text": finding.title},
                    "fullDescription": {"text": finding.description},
                    "defaultConfiguration": {"level": self.SEVERITY_TO_LEVEL[finding.severity]},
                    "help": {
                        "text": finding.recommendation,
                        "markdown": f"**Recommendation**: {finding.recommendation}",
                    },
                    "properties": {
                        "severity": finding.severity.value,
                        "tags": ["security", "mcp"],
                    },
                }
            )

        return rules

    def _convert_findings(self, findings: list[Finding], file_path: str) -> list[dict[str, Any]]:
        """Convert findings to SARIF results."""
        results = []

        for finding in findings:
            fingerprint = hashlib.sha256(f"{file_path}:{finding.location}:{finding.title}".encode()).hexdigest()[:16]
            results.append(
                {
                    "ruleId": rule_id_for(finding),
                    "level": self.SEVERITY_TO_LEVEL[finding.severity],
                    "message": {"text": finding.description},
                    "locations": [
                        {
                            "physicalLocation": {
                                "artifactLocation": {"uri": file_path, "uriBaseId": "%SRCROOT%"},
                            },
                            "logicalLocations": [{"fullyQualifiedName": finding.location}],
                        }
                    ],
                    "fingerprints": {"mcpScanLocationHash": fingerprint},
                    "properties": {"severity": finding.severity.value},
                }
            )

        return results

    def save_report(self, data: ScanResult | Report, output_path: str):
        """
        Save SARIF report to file.

        Args:
            data: ScanResult or Report object
            output_path: Path to save file

        Raises:
            ReportWriteError: If the file cannot be written
        """
        report_json = self.generate_report(data)
        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(report_json)
        except OSError as e:
            raise ReportWriteError(f"Failed to write report to {output_path}: {e}") from e

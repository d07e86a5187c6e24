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
Markdown format reporter for scan results.
"""

from ..exceptions import ReportWriteError
from ..models import SEVERITY_ORDER, Finding, Report, ScanResult


class MarkdownReporter:
    """Generates Markdown format reports."""

    def __init__(self, detailed: bool = True):
        """
        Initialize Markdown reporter.

        Args:
            detailed: If True, include recommendations and locations
        """
        self.detailed = detailed

    def generate_report(self, data: ScanResult | Report) -> str:
        """
        Generate Markdown report.

        Args:
            data: ScanResult or Report object

        Returns:
            Markdown string
        """
        if isinstance(data, ScanResult):
            report = Report()
            report.add_scan_result(data)
            data = report
        return self._generate_report(data)

    def _generate_report(self, report: Report) -> str:
        lines = []

        # Header
        lines.append("# MCP Configuration Security Scan Report")
        lines.append("")
        lines.append(f"**Timestamp:** {report.timestamp.isoformat()}")
        lines.append("")

        # Summary
        lines.append("## Summary")
        lines.append("")
        lines.append(f"- **Configurations Scanned:** {report.total_configs}")
        lines.append(f"- **Configurations With Issues:** {report.configs_with_issues}")
        lines.append(f"- **Total Issues:** {report.total_findings}")
        lines.append("")
        lines.append("### Issues by Severity")
        lines.append("")
        lines.append(f"- **Critical:** {report.critical_count}")
        lines.append(f"- **High:** {report.high_count}")
        lines.append(f"- **Medium:** {report.medium_count}")
        lines.append(f"- **Low:** {report.low_count}")
        lines.append("")

        if report.errors:
            lines.append("### Files Not Scanned")
            lines.append("")
            for path, error in report.errors.items():
                lines.append(f"- `{path}`: {error}")
            lines.append("")

        lines.append("## Results")
        lines.append("")

        for result in report.scan_results:
            lines.append("\n---\n")
            status_icon = "[FAIL]" if result.has_findings else "[OK]"
            lines.append(f"### {status_icon} {result.file_path}")
            lines.append("")

            if not result.has_findings:
                lines.append("No security issues found.")
                lines.append("")
                continue

            lines.append(f"- **Max Severity:** {result.max_severity.value}")
            lines.append("")

            for severity in SEVERITY_ORDER:
                for finding in result.get_findings_by_severity(severity):
                    lines.extend(self._format_finding(finding))
                    lines.append("")

        return "\n".join(lines)

    def _format_finding(self, finding: Finding) -> list:
        """Format a single finding as markdown lines."""
        lines = []

        lines.append(f"#### [{finding.severity.value.upper()}] {finding.title}")
        lines.append("")
        lines.append(f"**Description:** {finding.description}")

        if self.detailed:
            lines.append("")
            lines.append(f"**Location:** `{finding.location}`")
            lines.append("")
            lines.append(f"**Recommendation:** {finding.recommendation}")

        return lines

    def save_report(self, data: ScanResult | Report, output_path: str):
        """
        Save Markdown report to file.

        Args:
            data: ScanResult or Report object
            output_path: Path to save file

        Raises:
            ReportWriteError: If the file cannot be written
        """
        report_md = self.generate_report(data)
        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(report_md)
        except OSError as e:
            raise ReportWriteError(f"Failed to write report to {output_path}: {e}") from e

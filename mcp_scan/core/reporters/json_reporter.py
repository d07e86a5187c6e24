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
JSON format reporter for scan results.

Layout::

    {
      "metadata": {"tool", "version", "timestamp", "scanner"},
      "summary": {"totalConfigs", "totalIssues", "issuesBySeverity", "configsWithIssues"},
      "results": [{"filePath", "issues": [...]}]
    }
"""

import json
from typing import Any

from ...config.constants import McpScanConstants
from ..exceptions import ReportWriteError
from ..models import Report, ScanResult


class JSONReporter:
    """Generates JSON format reports."""

    def __init__(self, pretty: bool = True):
        """
        Initialize JSON reporter.

        Args:
            pretty: Indent the output for human readers
        """
        self.pretty = pretty

    def build(self, data: ScanResult | Report) -> dict[str, Any]:
        """Build the report document as a dictionary."""
        if isinstance(data, ScanResult):
            report = Report()
            report.add_scan_result(data)
        else:
            report = data

        body = report.to_dict()
        return {
            "metadata": {
                "tool": McpScanConstants.TOOL_NAME,
                "version": McpScanConstants.VERSION,
                "timestamp": report.timestamp.isoformat(),
                "scanner": McpScanConstants.SCANNER_NAME,
            },
            "summary": body["summary"],
            "results": body["results"],
        }

    def generate_report(self, data: ScanResult | Report) -> str:
        """
        Generate JSON report.

        Args:
            data: ScanResult or Report object

        Returns:
            JSON string
        """
        if self.pretty:
            return json.dumps(self.build(data), indent=2)
        return json.dumps(self.build(data))

    def save_report(self, data: ScanResult | Report, output_path: str):
        """
        Save JSON report to file.

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

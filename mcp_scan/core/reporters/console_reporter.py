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
Terminal reporter for scan results, rendered with rich.
"""

import io
import socket
from datetime import datetime

from rich.console import Console
from rich.markup import escape

from ...config.constants import McpScanConstants
from ..exceptions import ReportWriteError
from ..models import SEVERITY_ORDER, Finding, Report, ScanResult, Severity

SEVERITY_STYLES = {
    Severity.CRITICAL: "bold magenta",
    Severity.HIGH: "bold red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "blue",
}

SEVERITY_SYMBOLS = {
    Severity.CRITICAL: "🔴",
    Severity.HIGH: "🟠",
    Severity.MEDIUM: "🟡",
    Severity.LOW: "🔵",
}

SEVERITY_LEGEND = {
    Severity.CRITICAL: "Immediate security risk, requires urgent attention",
    Severity.HIGH: "Serious security vulnerability",
    Severity.MEDIUM: "Moderate security issue",
    Severity.LOW: "Minor security concern",
}

COMPACT_LIMIT = 3
MAX_BAR_WIDTH = 20
DIVIDER = "═" * 64


class ConsoleReporter:
    """Renders a report as a human-readable terminal summary."""

    def __init__(self, verbose: bool = False, compact: bool = False, show_banner: bool = True):
        """
        Initialize console reporter.

        Args:
            verbose: Show descriptions, recommendations and locations
            compact: Text-focused output with at most three findings per severity
            show_banner: Print the banner before the results
        """
        self.verbose = verbose
        self.compact = compact
        self.show_banner = show_banner

    def print_report(self, data: ScanResult | Report, console: Console | None = None):
        """Render *data* to *console* (stdout when omitted)."""
        console = console or Console()
        report = self._as_report(data)

        if self.show_banner:
            self._print_banner(console)
        if self.verbose and not self.compact:
            self._print_legend(console)

        for path, error in report.errors.items():
            console.print(f"[red]❌ Error loading {escape(path)}: {escape(error)}[/red]")

        for result in report.scan_results:
            self._print_result(console, result)

        self._print_summary(console, report)
        if not self.compact and report.total_findings > 0:
            self._print_help(console)

    def generate_report(self, data: ScanResult | Report) -> str:
        """
        Generate the console report as plain text.

        Args:
            data: ScanResult or Report object

        Returns:
            Report text without terminal styling
        """
        buffer = io.StringIO()
        console = Console(file=buffer, no_color=True, highlight=False, soft_wrap=True, width=120)
        self.print_report(data, console)
        return buffer.getvalue()

    def save_report(self, data: ScanResult | Report, output_path: str):
        """
        Save the plain-text console report to file.

        Raises:
            ReportWriteError: If the file cannot be written
        """
        report_text = self.generate_report(data)
        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(report_text)
        except OSError as e:
            raise ReportWriteError(f"Failed to write report to {output_path}: {e}") from e

    @staticmethod
    def _as_report(data: ScanResult | Report) -> Report:
        if isinstance(data, ScanResult):
            report = Report()
            report.add_scan_result(data)
            return report
        return data

    def _print_banner(self, console: Console):
        version = f"v{McpScanConstants.VERSION}"
        if self.compact:
            console.print(f"MCP SCAN {version} - Security Scanner for MCP Configurations")
            return

        console.print("[bold cyan]╔═══════════════════════════════════════════════════════════════╗[/bold cyan]")
        console.print(f"[bold cyan]║{f'MCP SCAN {version}':^63}║[/bold cyan]")
        console.print(f"[bold cyan]║{'Security Scanner for MCP Configurations':^63}║[/bold cyan]")
        console.print("[bold cyan]╚═══════════════════════════════════════════════════════════════╝[/bold cyan]")
        scan_date = datetime.now().strftime("%B %d, %Y")
        hostname = socket.gethostname() or "unknown"
        console.print(f"🔒 Secure MCP Scanner | Date: {scan_date} | Host: {escape(hostname)}")
        console.print("🔍 Scanning for credentials, command injection, and filesystem risks")
        console.print()

    def _print_legend(self, console: Console):
        console.print("🎨 COLOR LEGEND:")
        for severity in SEVERITY_ORDER:
            style = SEVERITY_STYLES[severity]
            label = f"{SEVERITY_SYMBOLS[severity]} {severity.value.upper():<8}"
            console.print(f"   [{style}]{label}[/{style}] - {SEVERITY_LEGEND[severity]}")
        console.print()

    def _print_result(self, console: Console, result: ScanResult):
        path = escape(result.file_path)
        if not result.has_findings:
            console.print(f"[green]✅ {path} - No security issues found[/green]")
            return

        grouped = {severity: result.get_findings_by_severity(severity) for severity in SEVERITY_ORDER}
        counts = {severity: len(findings) for severity, findings in grouped.items()}

        if self.compact:
            breakdown = escape(
                f"[Critical: {counts[Severity.CRITICAL]}, High: {counts[Severity.HIGH]}, "
                f"Medium: {counts[Severity.MEDIUM]}, Low: {counts[Severity.LOW]}]"
            )
            console.print(f"[bold red]❌ {path}: {len(result.findings)} issues[/bold red] {breakdown}")
            self._print_compact(console, Severity.CRITICAL, grouped[Severity.CRITICAL])
            self._print_compact(console, Severity.HIGH, grouped[Severity.HIGH])
            minor = counts[Severity.MEDIUM] + counts[Severity.LOW]
            if self.verbose:
                self._print_compact(console, Severity.MEDIUM, grouped[Severity.MEDIUM])
                self._print_compact(console, Severity.LOW, grouped[Severity.LOW])
            elif minor:
                console.print(f"   ... and {minor} more medium/low issues (use --verbose to see all)")
            console.print()
            return

        breakdown = " ".join(
            f"[{SEVERITY_STYLES[severity]}]{severity.value.capitalize()}: {counts[severity]}[/{SEVERITY_STYLES[severity]}]"
            for severity in SEVERITY_ORDER
            if counts[severity]
        )
        console.print(f"[bold red]❌ {path} - {len(result.findings)} issues found[/bold red] ({breakdown})")
        console.print("   " + "─" * 57)

        for severity in SEVERITY_ORDER:
            findings = grouped[severity]
            if not findings:
                continue
            style = SEVERITY_STYLES[severity]
            console.print(
                f"[{style}]   {SEVERITY_SYMBOLS[severity]} {severity.value.upper()} ({len(findings)} issues)[/{style}]"
            )
            for index, finding in enumerate(findings):
                last = index == len(findings) - 1
                self._print_tree_finding(console, finding, style, last)
            console.print()

    def _print_tree_finding(self, console: Console, finding: Finding, style: str, last: bool):
        prefix = "   └── " if last else "   ├── "
        console.print(f"[{style}]{prefix}{escape(finding.title)}[/{style}]")
        if not self.verbose:
            return

        indent = "       " if last else "   │   "
        console.print(f"{indent}{escape(finding.description)}")
        if finding.recommendation:
            console.print(f"[blue]{indent}💡 {escape(finding.recommendation)}[/blue]")
        if finding.location:
            console.print(f"[cyan]{indent}🔍 {escape(finding.location)}[/cyan]")

    def _print_compact(self, console: Console, severity: Severity, findings: list[Finding]):
        if not findings:
            return

        style = SEVERITY_STYLES[severity]
        shown = findings if self.verbose else findings[:COMPACT_LIMIT]
        label = escape(f"[{severity.value.upper()}]")
        for finding in shown:
            console.print(f"[{style}]   {label} {escape(finding.title)}[/{style}]")
            if self.verbose and finding.location:
                console.print(f"[cyan]      Location: {escape(finding.location)}[/cyan]")

        remaining = len(findings) - len(shown)
        if remaining:
            console.print(f"[{style}]   ... and {remaining} more {severity.value} issues[/{style}]")

    def _print_summary(self, console: Console, report: Report):
        counts = report.findings_by_severity
        total = report.total_findings

        if self.compact:
            console.print(DIVIDER)
            console.print(
                f"[cyan]SUMMARY: Scanned {report.total_configs} configs, found {total} issues[/cyan]"
            )
            if total:
                console.print(
                    f"Critical: {counts['critical']}, High: {counts['high']}, "
                    f"Medium: {counts['medium']}, Low: {counts['low']}"
                )
                if counts["critical"]:
                    console.print("[bold magenta]CRITICAL SECURITY ISSUES DETECTED - ACTION REQUIRED[/bold magenta]")
            else:
                console.print("[green]No security issues found - All configurations are secure![/green]")
            console.print(DIVIDER)
            return

        console.print(DIVIDER)
        console.print("[bold cyan]📊 SCAN SUMMARY[/bold cyan]")
        console.print(f"   Configurations scanned: {report.total_configs}")

        if total == 0:
            console.print(f"[green]   Security issues found: {total} ✅[/green]")
            console.print("[green]   🎉 All configurations are secure![/green]")
            console.print(DIVIDER)
            return

        console.print(f"[red]   Security issues found: {total} ❌[/red]")
        for severity in SEVERITY_ORDER:
            count = counts[severity.value]
            if not count:
                continue
            style = SEVERITY_STYLES[severity]
            label = f"{severity.value.capitalize()}:"
            bar = "█" * min(count, MAX_BAR_WIDTH)
            console.print(f"[{style}]   {SEVERITY_SYMBOLS[severity]} {label:<9} {count} {bar}[/{style}]")

        console.print()
        if counts["critical"]:
            console.print(
                "[bold magenta]   ⚠️  CRITICAL SECURITY ISSUES DETECTED - IMMEDIATE ACTION REQUIRED![/bold magenta]"
            )
        elif counts["high"]:
            console.print("[bold red]   ⚠️  High severity issues detected - prompt action recommended[/bold red]")
        else:
            console.print("[yellow]   ⚠️  Please review and address the security findings above[/yellow]")
        console.print(f"   Scan completed: {report.timestamp.strftime('%Y-%m-%d %H:%M:%S')}")
        console.print(DIVIDER)

        console.print()
        console.print("💡 To generate a detailed JSON report:")
        console.print(f"[cyan]   {McpScanConstants.TOOL_NAME} -f json -o security-report.json[/cyan]")
        console.print()

    @staticmethod
    def _print_help(console: Console):
        console.print("💡 ADDITIONAL OPTIONS:")
        console.print("   --verbose, -v      Show detailed descriptions and recommendations")
        console.print("   --compact, -q      Display results in a compact format")
        console.print("   --mask-secrets, -m Mask/redact sensitive values in output")
        console.print("   --format, -f       Output format (console, json, markdown, sarif)")
        console.print("   --output, -o       Save results to a file")
        console.print()

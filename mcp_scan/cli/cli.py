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

"""Command-line interface for MCP Scan."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from rich.console import Console

from ..config.config import Config
from ..config.constants import McpScanConstants
from ..core.discovery import discover_configs
from ..core.exceptions import McpScanError
from ..core.models import Report
from ..core.reporters.console_reporter import ConsoleReporter
from ..core.reporters.json_reporter import JSONReporter
from ..core.reporters.markdown_reporter import MarkdownReporter
from ..core.reporters.sarif_reporter import SARIFReporter
from ..core.scanner import McpScanner

logger = logging.getLogger("mcp_scan.cli")

COMMANDS = ("scan", "demo", "version")

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_USAGE = 2


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _configure_logging(level_name: str | None) -> None:
    """Send log records to stderr at the requested level."""
    level_name = (level_name or os.getenv("MCP_SCAN_LOG_LEVEL") or McpScanConstants.DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        print(f"Warning: unknown log level {level_name!r}, using WARNING", file=sys.stderr)
        level = logging.WARNING
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def _build_config(args: argparse.Namespace) -> Config:
    """Build the scan configuration from the environment, then apply CLI flags."""
    env_file = getattr(args, "env_file", None)
    config = Config.from_file(Path(env_file)) if env_file else Config.from_env()

    if getattr(args, "mask_secrets", False):
        config.mask_secrets = True
    if getattr(args, "verbose", False):
        config.verbose = True
    if getattr(args, "compact", False):
        config.compact = True
    if getattr(args, "format", None):
        config.output_format = args.format
    if getattr(args, "output", None):
        config.output_file = args.output
    if getattr(args, "workers", None) is not None:
        config.max_workers = max(1, args.workers)

    explicit = list(getattr(args, "paths", None) or []) + list(getattr(args, "config", None) or [])
    if explicit:
        config.config_paths = explicit

    config.validate()
    return config


def _make_reporter(config: Config):
    fmt = config.output_format
    if fmt == "json":
        return JSONReporter()
    if fmt == "markdown":
        return MarkdownReporter(detailed=True)
    if fmt == "sarif":
        return SARIFReporter()
    return ConsoleReporter(verbose=config.verbose, compact=config.compact)


def _status(config: Config, message: str) -> None:
    """Progress messages go to stderr unless the report itself is console text."""
    stream = sys.stdout if config.output_format == "console" and not config.output_file else sys.stderr
    print(message, file=stream)


def _write_output(config: Config, report: Report) -> None:
    """
    Write *report* to ``config.output_file`` or stdout.

    Raises:
        ReportWriteError: If the output file cannot be written
    """
    reporter = _make_reporter(config)
    if config.output_file:
        reporter.save_report(report, config.output_file)
        print(f"Report saved to: {config.output_file}", file=sys.stderr)
    elif isinstance(reporter, ConsoleReporter):
        reporter.print_report(report, Console())
    else:
        print(reporter.generate_report(report))


def _run_scan(config: Config) -> int:
    """Discover, scan and report. Returns the process exit code."""
    configs = discover_configs(config.config_paths, demo_dir=config.demo_dir)
    if not configs:
        print("Warning: No MCP configuration files found", file=sys.stderr)
        print("Try specifying paths with --config or create some demo configs", file=sys.stderr)
        return EXIT_CLEAN

    logger.info("Scanning %d configuration files", len(configs))
    scanner = McpScanner(config=config)
    report = scanner.scan_paths(configs)

    try:
        _write_output(config, report)
    except McpScanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    return EXIT_FINDINGS if report.total_findings > 0 else EXIT_CLEAN


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def scan_command(args: argparse.Namespace) -> int:
    """Handle the ``scan`` command."""
    try:
        config = _build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    return _run_scan(config)


def demo_command(args: argparse.Namespace) -> int:
    """Handle the ``demo`` command: scan the bundled demo configurations verbosely."""
    try:
        config = _build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    demo_dir = Path(args.demo_dir or config.demo_dir)
    if not demo_dir.is_dir():
        print(f"Error: Demo directory not found: {demo_dir}", file=sys.stderr)
        print("Make sure you're running from the project root directory", file=sys.stderr)
        return EXIT_FINDINGS

    files = sorted(demo_dir.glob("*.json"))
    if not files:
        print(f"Warning: No demo configuration files found in {demo_dir}", file=sys.stderr)
        return EXIT_CLEAN

    config.config_paths = [str(f) for f in files]
    config.verbose = True

    _status(config, "MCP SCAN DEMO MODE")
    _status(config, f"Found {len(files)} demo configurations")
    exit_code = _run_scan(config)

    _status(config, "")
    _status(config, "DEMO COMPLETE")
    _status(config, "This demo showed various MCP security issues including:")
    _status(config, "  • Exposed API keys and secrets")
    _status(config, "  • Dangerous filesystem access patterns")
    _status(config, "  • Command injection vulnerabilities")
    _status(config, "  • Insecure configuration settings")
    return exit_code


def version_command(_args: argparse.Namespace) -> int:
    """Handle the ``version`` command."""
    print(f"MCP Scan v{McpScanConstants.VERSION}")
    print(f"Scanner: {McpScanConstants.SCANNER_NAME}")
    return EXIT_CLEAN


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _add_common_scan_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        "-c",
        action="append",
        default=[],
        metavar="PATH",
        help="Config file or directory to scan (repeatable)",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=list(McpScanConstants.OUTPUT_FORMATS),
        default=None,
        help="Output format (default: console, or MCP_SCAN_FORMAT)",
    )
    parser.add_argument("--output", "-o", help="Output file path (default: stdout)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show detailed explanations for each finding")
    parser.add_argument("--compact", "-q", action="store_true", help="Compact, text-focused console output")
    parser.add_argument("--mask-secrets", "-m", action="store_true", help="Mask sensitive values in output")
    parser.add_argument("--workers", type=int, default=None, help="Scan files in parallel with N threads")
    parser.add_argument("--env-file", help="Load MCP_SCAN_* settings from a .env file")
    parser.add_argument("--log-level", help="Logging level (default: WARNING, or MCP_SCAN_LOG_LEVEL)")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=McpScanConstants.TOOL_NAME,
        description="MCP Scan - Security scanner for MCP (Model Context Protocol) configurations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mcp-scan
  mcp-scan ./mcp.json ~/.mcp/config.json
  mcp-scan -c ./configs --verbose --mask-secrets
  mcp-scan -f json -o security-report.json
  mcp-scan -f sarif -o mcp-scan.sarif
  mcp-scan demo
  mcp-scan version
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # -- scan --------------------------------------------------------------
    scan_p = subparsers.add_parser("scan", help="Scan MCP configuration files (default)")
    scan_p.add_argument("paths", nargs="*", help="Config files or directories (default: common locations)")
    _add_common_scan_flags(scan_p)

    # -- demo --------------------------------------------------------------
    demo_p = subparsers.add_parser("demo", help="Run a demo scan on sample configurations")
    demo_p.add_argument("--demo-dir", default=None, help="Directory of demo configurations (default: ./demos)")
    _add_common_scan_flags(demo_p)

    # -- version -----------------------------------------------------------
    subparsers.add_parser("version", help="Show version information")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    argv = list(sys.argv[1:] if argv is None else argv)

    # No command means scan
    if not argv or (argv[0] not in COMMANDS and argv[0] not in ("-h", "--help")):
        argv.insert(0, "scan")

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_USAGE

    _configure_logging(getattr(args, "log_level", None))

    dispatch = {
        "scan": scan_command,
        "demo": demo_command,
        "version": version_command,
    }
    handler = dispatch.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())

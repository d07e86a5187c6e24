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
Command execution risk analyzer.

Two independent checks:
  - the executable itself: destructive tools, network fetchers and
    interpreters/shells that an agent could drive arbitrarily
  - each argument: shell metacharacters that could chain extra commands
"""

import re

from ..models import Finding, ServerEntry, Severity
from ..rules.patterns import DANGEROUS_COMMANDS, DESTRUCTIVE_COMMANDS, SHELL_METACHARACTERS
from .base import BaseAnalyzer

_PATH_SEPARATOR_RE = re.compile(r"[\\/]")


def command_base_name(command: str) -> str:
    """Strip any POSIX or Windows directory part from *command*."""
    return _PATH_SEPARATOR_RE.split(command.rstrip("/\\"))[-1]


class CommandAnalyzer(BaseAnalyzer):
    """Flags risky executables and shell injection vectors in arguments."""

    def __init__(self):
        super().__init__("command")

    def analyze(self, server: ServerEntry, location: str) -> list[Finding]:
        findings = self._check_command(server.command, location)
        findings.extend(self._check_args(server.args, location))
        return findings

    def _check_command(self, command: str, location: str) -> list[Finding]:
        findings: list[Finding] = []
        if not command:
            return findings

        base_name = command_base_name(command).lower()
        for dangerous in DANGEROUS_COMMANDS:
            if dangerous not in base_name:
                continue
            severity = Severity.HIGH if dangerous in DESTRUCTIVE_COMMANDS else Severity.MEDIUM
            findings.append(
                Finding(
                    severity=severity,
                    title=f"Potentially dangerous command: {dangerous}",
                    description="Command may have security implications depending on arguments and environment",
                    recommendation="Review command usage and ensure it's properly sandboxed",
                    location=f"{location}.command",
                )
            )
        return findings

    def _check_args(self, args: list[str], location: str) -> list[Finding]:
        findings = []
        for i, arg in enumerate(args):
            if any(meta in arg for meta in SHELL_METACHARACTERS):
                findings.append(
                    Finding(
                        severity=Severity.HIGH,
                        title="Potential shell injection vector",
                        description="Command argument contains shell metacharacters that could enable injection",
                        recommendation="Sanitize arguments or use parameterized execution",
                        location=f"{location}.args[{i}]",
                    )
                )
        return findings

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
Filesystem exposure analyzer.

Flags working directories and arguments that reach into sensitive system or
user locations, or traverse out of the server's own directory.
"""

from ..models import Finding, ServerEntry, Severity
from ..rules.patterns import DANGEROUS_PATH_FRAGMENTS
from .base import BaseAnalyzer


class FilesystemAnalyzer(BaseAnalyzer):
    """Detects sensitive path fragments in workingDir and args."""

    def __init__(self, path_fragments: tuple[str, ...] = DANGEROUS_PATH_FRAGMENTS):
        super().__init__("filesystem")
        self.path_fragments = path_fragments

    def analyze(self, server: ServerEntry, location: str) -> list[Finding]:
        findings = []

        if server.working_dir:
            for fragment in self.path_fragments:
                if fragment in server.working_dir:
                    findings.append(
                        Finding(
                            severity=Severity.HIGH,
                            title="Dangerous filesystem access in workingDir",
                            description=f"Working directory contains potentially dangerous path: {fragment}",
                            recommendation="Use relative paths or restrict access to safe directories",
                            location=f"{location}.workingDir",
                        )
                    )

        for i, arg in enumerate(server.args):
            for fragment in self.path_fragments:
                if fragment in arg:
                    findings.append(
                        Finding(
                            severity=Severity.MEDIUM,
                            title="Potentially dangerous path in arguments",
                            description=f"Command argument contains potentially dangerous path: {fragment}",
                            recommendation="Verify this path access is necessary and secure",
                            location=f"{location}.args[{i}]",
                        )
                    )

        return findings

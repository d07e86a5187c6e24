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
Insecure runtime setting analyzer.
"""

from ...config.constants import McpScanConstants
from ..models import Finding, ServerEntry, Severity
from .base import BaseAnalyzer


class ConfigAnalyzer(BaseAnalyzer):
    """Flags disabled entries, long timeouts, debug mode and disabled TLS verification."""

    def __init__(self, max_timeout_ms: int = McpScanConstants.MAX_TIMEOUT_MS):
        super().__init__("config")
        self.max_timeout_ms = max_timeout_ms

    def analyze(self, server: ServerEntry, location: str) -> list[Finding]:
        findings = []

        if server.disabled:
            findings.append(
                Finding(
                    severity=Severity.LOW,
                    title="Server configuration is disabled",
                    description="This server configuration is marked as disabled",
                    recommendation="Remove unused configurations to reduce attack surface",
                    location=f"{location}.disabled",
                )
            )

        if server.timeout > self.max_timeout_ms:
            findings.append(
                Finding(
                    severity=Severity.LOW,
                    title="Excessive timeout configuration",
                    description="Timeout is set to more than 5 minutes, which could impact availability",
                    recommendation="Use reasonable timeout values to prevent resource exhaustion",
                    location=f"{location}.timeout",
                )
            )

        for env_key, env_value in server.env.items():
            name = env_key.upper()
            if name == "DEBUG" and env_value.lower() == "true":
                findings.append(
                    Finding(
                        severity=Severity.MEDIUM,
                        title="Debug mode enabled",
                        description="Debug mode is enabled which may expose sensitive information",
                        recommendation="Disable debug mode in production environments",
                        location=f"{location}.env.{env_key}",
                    )
                )
            elif name == "NODE_TLS_REJECT_UNAUTHORIZED" and env_value == "0":
                findings.append(
                    Finding(
                        severity=Severity.HIGH,
                        title="TLS verification disabled",
                        description=(
                            "TLS certificate verification is disabled, making connections vulnerable to MITM attacks"
                        ),
                        recommendation="Enable TLS verification and use proper certificates",
                        location=f"{location}.env.{env_key}",
                    )
                )

        return findings

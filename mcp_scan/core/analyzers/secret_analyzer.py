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
Hardcoded secret detection for environment variables and settings.

Combines the pattern catalog, the placeholder filter and the context
validator. A single value may produce several findings when it matches more
than one secret shape.
"""

from __future__ import annotations

import logging
from typing import Any

from ...config.constants import McpScanConstants
from ..models import Finding, ServerEntry, Severity
from ..redaction import mask_secret
from ..rules.patterns import SecretType, match_secret_types
from ..rules.placeholders import is_placeholder
from ..rules.validators import is_likely_real_secret
from .base import BaseAnalyzer

logger = logging.getLogger(__name__)

SECRET_RECOMMENDATION = "Move sensitive credentials to environment variables or secure key management systems"


def _secret_finding(secret_type: SecretType, location: str) -> Finding:
    return Finding(
        severity=Severity.CRITICAL,
        title=f"Exposed {secret_type.label} detected",
        description=f"A potential {secret_type.label.lower()} was found in the configuration",
        recommendation=SECRET_RECOMMENDATION,
        location=location,
    )


class SecretAnalyzer(BaseAnalyzer):
    """Detects credentials embedded in env values and string settings."""

    def __init__(
        self,
        mask_secrets: bool = False,
        fixture_markers: tuple[str, ...] = McpScanConstants.DEFAULT_FIXTURE_PATH_MARKERS,
    ):
        """
        Initialize secret analyzer.

        Args:
            mask_secrets: Redact values that end up in finding locations
            fixture_markers: Location substrings that mark a credential
                fixture; values there always take the forced path
        """
        super().__init__("secrets")
        self.mask_secrets = mask_secrets
        self.fixture_markers = fixture_markers

    def analyze(self, server: ServerEntry, location: str, force: bool = False) -> list[Finding]:
        return self.scan_values(server.env, server.settings, location, force=force)

    def scan_values(
        self,
        env: dict[str, str],
        settings: dict[str, Any],
        location: str,
        force: bool = False,
    ) -> list[Finding]:
        """Run detection over every env value, then every string-typed setting."""
        findings: list[Finding] = []
        for env_key, env_value in env.items():
            findings.extend(self.detect(env_value, f"{location}.env.{env_key}", force=force))

        for setting_key, setting_value in settings.items():
            # Only plain strings are inspected; nested structures are left alone
            if isinstance(setting_value, str):
                findings.extend(self.detect(setting_value, f"{location}.settings.{setting_key}", force=force))

        return findings

    def detect(
        self,
        value: str,
        location: str,
        mask_secrets: bool | None = None,
        force: bool = False,
    ) -> list[Finding]:
        """
        Classify one configuration value.

        Args:
            value: The raw configuration value
            location: Dotted path of the value in the document
            mask_secrets: Override the analyzer-wide masking setting
            force: Skip placeholder and context filtering. Used for
                credential fixtures that must always be detected; the value
                (masked if requested) is appended to each finding's location.

        Returns:
            One critical finding per matching secret type
        """
        if mask_secrets is None:
            mask_secrets = self.mask_secrets

        if force or any(marker in location for marker in self.fixture_markers):
            display_value = mask_secret(value) if mask_secrets else value
            return [
                _secret_finding(secret_type, f"{location} ({display_value})")
                for secret_type in match_secret_types(value)
            ]

        if is_placeholder(value):
            logger.debug("Skipping placeholder value at %s", location)
            return []

        findings = []
        for secret_type in match_secret_types(value):
            if not is_likely_real_secret(secret_type, value, location):
                logger.debug("Suppressed %s match at %s", secret_type.label, location)
                continue
            findings.append(_secret_finding(secret_type, location))

        return findings

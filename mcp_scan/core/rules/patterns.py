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
Secret pattern catalog and risk tables.

Everything here is built once at import and never mutated, so the tables can
be shared by concurrent scans without locking. Several secret patterns are
deliberately broad (any 32 hex characters, any 24 alphanumerics) and are only
meaningful together with the type-specific checks in
:mod:`mcp_scan.core.rules.validators`.

To add a secret family, add a member to :class:`SecretType` and an entry to
``_PATTERN_SOURCES``; add a validator if the pattern needs narrowing.
"""

import re
from collections.abc import Iterator
from enum import Enum
from types import MappingProxyType


class SecretType(str, Enum):
    """Secret families the scanner recognizes. Values are display labels."""

    AWS_ACCESS_KEY = "AWS Access Key"
    AWS_SECRET_ACCESS_KEY = "AWS Secret Access Key"
    AWS_SESSION_TOKEN = "AWS Session Token"
    AZURE_MAPS_KEY = "Azure Maps Key"
    GOOGLE_API_KEY = "Google API Key"
    GCP_SERVICE_ACCOUNT = "GCP Service Account"
    GITHUB_PERSONAL_TOKEN = "GitHub Personal Token"
    GITHUB_OAUTH_TOKEN = "GitHub OAuth Token"
    GITHUB_APP_TOKEN = "GitHub App Token"
    GITHUB_REFRESH_TOKEN = "GitHub Refresh Token"
    GITHUB_TOKEN_V2 = "GitHub Token v2"
    OPENAI_API_KEY = "OpenAI API Key"
    OPENAI_ORGANIZATION = "OpenAI Organization"
    SLACK_BOT_TOKEN = "Slack Bot Token"
    SLACK_USER_TOKEN = "Slack User Token"
    DATADOG_API_KEY = "Datadog API Key"
    DATADOG_APP_KEY = "Datadog App Key"
    DOCKER_PAT = "Docker PAT"
    STRIPE_API_KEY = "Stripe API Key"
    SENDGRID_API_KEY = "SendGrid API Key"
    PAGERDUTY_TOKEN = "PagerDuty Token"
    MONGODB_CONNECTION_URI = "MongoDB Connection URI"
    HEROKU_API_TOKEN = "Heroku API Token"
    GOOGLE_OAUTH_CLIENT_ID = "Google OAuth Client ID"
    ADAFRUIT_IO_KEY = "Adafruit IO Key"
    ATLASSIAN_API_TOKEN = "Atlassian API Token"
    CIRCLECI_PAT = "CircleCI PAT"
    TWILIO_ACCOUNT_SID = "Twilio Account SID"
    TYPEFORM_TOKEN = "Typeform Token"
    PERPLEXITY_API_KEY = "Perplexity API Key"
    NOTION_API_TOKEN = "Notion API Token"
    NOTION_INTEGRATION_TOKEN = "Notion Integration Token"
    ANTHROPIC_API_KEY = "Anthropic API Key"
    PRIVATE_SSH_KEY = "Private SSH Key"
    DATABASE_URL = "Database URL"
    GENERIC_BEARER_TOKEN = "Generic Bearer Token"
    GENERIC_API_KEY = "Generic API Key"

    @property
    def label(self) -> str:
        return self.value


_PATTERN_SOURCES: dict[SecretType, str] = {
    # AWS
    SecretType.AWS_ACCESS_KEY: r"\b(AKIA|ASIA)[A-Z0-9]{16}\b",
    SecretType.AWS_SECRET_ACCESS_KEY: r"\b[A-Za-z0-9+/]{30,}\b",
    SecretType.AWS_SESSION_TOKEN: r"\bAQoD[A-Za-z0-9/+=]{20,}\b",
    # Azure
    SecretType.AZURE_MAPS_KEY: r"\b[0-9]{30,}[A-Z]{4}[0-9]{2}[A-Z]{6,}\b",
    # GCP
    SecretType.GOOGLE_API_KEY: r"\bAIza[A-Za-z0-9_-]{30,}\b",
    SecretType.GCP_SERVICE_ACCOUNT: r'"type":\s*"service_account"',
    # GitHub
    SecretType.GITHUB_PERSONAL_TOKEN: r"\bghp_[A-Za-z0-9]{36}\b",
    SecretType.GITHUB_OAUTH_TOKEN: r"\bgho_[A-Za-z0-9]{36}\b",
    SecretType.GITHUB_APP_TOKEN: r"\bghs_[A-Za-z0-9]{36}\b",
    SecretType.GITHUB_REFRESH_TOKEN: r"\bghr_[A-Za-z0-9]{36}\b",
    SecretType.GITHUB_TOKEN_V2: r"github_pat_[A-Za-z0-9_]{20,}\b",
    # OpenAI
    SecretType.OPENAI_API_KEY: r"\bsk-[A-Za-z0-9]{20,}\b",
    SecretType.OPENAI_ORGANIZATION: r"\borg-[A-Za-z0-9]{24}\b",
    # Slack
    SecretType.SLACK_BOT_TOKEN: r"\bxoxb-[A-Za-z0-9-]{10,}\b",
    SecretType.SLACK_USER_TOKEN: r"\bxoxp-[A-Za-z0-9-]{10,}\b",
    # Datadog
    SecretType.DATADOG_API_KEY: r"\b[a-f0-9]{32}\b",
    SecretType.DATADOG_APP_KEY: r"\b[a-f0-9]{40}\b",
    SecretType.DOCKER_PAT: r"\bdckr_pat_[A-Za-z0-9_]{15,}\b",
    SecretType.STRIPE_API_KEY: r"\bsk_live_[A-Za-z0-9]{20,}\b",
    SecretType.SENDGRID_API_KEY: r"\bSG\.[A-Za-z0-9_-]{22}\.[A-Za-z0-9_-]{43}\b",
    SecretType.PAGERDUTY_TOKEN: r"\bpdus\+_[A-Za-z0-9]{5,}_[a-f0-9-]{36}\b",
    SecretType.MONGODB_CONNECTION_URI: r"\bmongodb\+srv://[^:]+:[^@]+@[^/]+/\b",
    SecretType.HEROKU_API_TOKEN: r"\bHRKU-[a-f0-9-]{36}\b",
    SecretType.GOOGLE_OAUTH_CLIENT_ID: r"\b[0-9]{12}-[a-z0-9]{30,}\.apps\.googleusercontent\.com\b",
    SecretType.ADAFRUIT_IO_KEY: r"\baio_[A-Za-z0-9]{20,}\b",
    SecretType.ATLASSIAN_API_TOKEN: r"\b[A-Za-z0-9]{24}\b",
    SecretType.CIRCLECI_PAT: r"\bCCIPAT_[A-Za-z0-9_]{20,}\b",
    SecretType.TWILIO_ACCOUNT_SID: r"\bAC[a-f0-9]{32}\b",
    SecretType.TYPEFORM_TOKEN: r"\btfp_[A-Za-z0-9_]{40,}\b",
    SecretType.PERPLEXITY_API_KEY: r"\bpplx-[A-Za-z0-9]{20,}\b",
    SecretType.NOTION_API_TOKEN: r"\bntn_[A-Za-z0-9]{30,}\b",
    SecretType.NOTION_INTEGRATION_TOKEN: r"\bsecret_[A-Za-z0-9]{30,}\b",
    SecretType.ANTHROPIC_API_KEY: r"\bsk-ant-api[0-9]{2}-[A-Za-z0-9_-]{30,}\b",
    # Generic shapes
    SecretType.PRIVATE_SSH_KEY: r"-----BEGIN (RSA |OPENSSH |DSA |EC |PGP )?PRIVATE KEY-----",
    SecretType.DATABASE_URL: r"\b(postgres|mysql|mongodb|redis)://[^:\s]+:[^@\s]+@[^/\s]+",
    SecretType.GENERIC_BEARER_TOKEN: r"(?i)bearer\s+[A-Za-z0-9_\-\.]{20,}",
    SecretType.GENERIC_API_KEY: (
        r"""(?i)(?:api[_-]?key|apikey|access[_-]?token)["']?\s*[:=]\s*["']([A-Za-z0-9_\-\.]{20,})["']"""
    ),
}

SECRET_PATTERNS: MappingProxyType = MappingProxyType(
    {secret_type: re.compile(source) for secret_type, source in _PATTERN_SOURCES.items()}
)


def match_secret_types(value: str) -> Iterator[SecretType]:
    """Yield every secret type whose pattern matches somewhere in *value*, in catalog order."""
    for secret_type, pattern in SECRET_PATTERNS.items():
        if pattern.search(value):
            yield secret_type


# --------------------------------------------------------------------------- #
# Risk heuristic tables
# --------------------------------------------------------------------------- #

# Matched as case-sensitive substrings of workingDir and args.
DANGEROUS_PATH_FRAGMENTS = (
    "/etc/passwd",
    "/etc/shadow",
    "/root/",
    "/var/log/",
    "~/.ssh/",
    "~/.aws/",
    "~/.config/",
    "/home/",
    "../",
    "./.",
    "C:\\",
    "\\Windows\\",
    "\\Users\\",
)

# Matched as substrings of the lowercased command base name.
DANGEROUS_COMMANDS = (
    "rm",
    "del",
    "format",
    "mkfs",
    "dd",
    "curl",
    "wget",
    "nc",
    "netcat",
    "python",
    "python3",
    "node",
    "php",
    "ruby",
    "bash",
    "sh",
    "cmd",
    "powershell",
)

DESTRUCTIVE_COMMANDS = frozenset({"rm", "del", "format"})

SHELL_METACHARACTERS = (";", "&&", "||", "|", "`", "$")

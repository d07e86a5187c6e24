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
Context-aware validation of secret pattern matches.

Two layers narrow what the pattern catalog reports:
  - Location: matches under demo, example or test paths are assumed fake.
  - Shape: each secret type may register a check on the matched value
    (canonical prefix, degenerate repeated characters).
"""

from collections.abc import Callable
from types import MappingProxyType

from .patterns import SecretType

_FAKE_LOCATION_MARKERS = ("demo", "example", "test")

# Share of the most common character above which a value counts as a repeated run.
REPEATED_CHAR_THRESHOLD = 0.8
_MIN_REPEATED_LENGTH = 3


def is_repeated_pattern(value: str) -> bool:
    """Return True if more than 80% of *value* is one repeated character.

    Strings shorter than three characters are never considered repeated.
    """
    if len(value) < _MIN_REPEATED_LENGTH:
        return False

    char_count: dict[str, int] = {}
    for char in value:
        char_count[char] = char_count.get(char, 0) + 1

    return max(char_count.values()) > len(value) * REPEATED_CHAR_THRESHOLD


def _requires_prefix(*prefixes: str) -> Callable[[str], bool]:
    def _check(value: str) -> bool:
        return value.startswith(prefixes)

    return _check


def _not_repeated(value: str) -> bool:
    return not is_repeated_pattern(value)


def _aws_key(value: str) -> bool:
    # Access and secret keys share the AKIA/ASIA prefix rule
    return _not_repeated(value) and value.startswith(("AKIA", "ASIA"))


_VALIDATORS: MappingProxyType = MappingProxyType(
    {
        SecretType.AWS_ACCESS_KEY: _aws_key,
        SecretType.AWS_SECRET_ACCESS_KEY: _aws_key,
        SecretType.AWS_SESSION_TOKEN: _not_repeated,
        SecretType.GITHUB_PERSONAL_TOKEN: _requires_prefix("ghp_"),
        SecretType.GITHUB_TOKEN_V2: _requires_prefix("github_pat_"),
        SecretType.OPENAI_API_KEY: _requires_prefix("sk-"),
        SecretType.SLACK_BOT_TOKEN: _requires_prefix("xoxb-"),
        SecretType.SLACK_USER_TOKEN: _requires_prefix("xoxp-"),
        SecretType.DOCKER_PAT: _requires_prefix("dckr_pat_"),
        SecretType.STRIPE_API_KEY: _requires_prefix("sk_live_"),
        SecretType.SENDGRID_API_KEY: _requires_prefix("SG."),
        SecretType.PAGERDUTY_TOKEN: _requires_prefix("pdus+_"),
        SecretType.HEROKU_API_TOKEN: _requires_prefix("HRKU-"),
        SecretType.ADAFRUIT_IO_KEY: _requires_prefix("aio_"),
        SecretType.CIRCLECI_PAT: _requires_prefix("CCIPAT_"),
        SecretType.TWILIO_ACCOUNT_SID: _requires_prefix("AC"),
        SecretType.TYPEFORM_TOKEN: _requires_prefix("tfp_"),
        SecretType.PERPLEXITY_API_KEY: _requires_prefix("pplx-"),
        SecretType.NOTION_API_TOKEN: _requires_prefix("ntn_"),
        SecretType.NOTION_INTEGRATION_TOKEN: _requires_prefix("secret_"),
        SecretType.ANTHROPIC_API_KEY: _requires_prefix("sk-ant-"),
    }
)


def is_fake_location(location: str) -> bool:
    """Return True if *location* points into a demo, example or test configuration."""
    location_lower = location.lower()
    return any(marker in location_lower for marker in _FAKE_LOCATION_MARKERS)


def is_likely_real_secret(secret_type: SecretType, value: str, location: str) -> bool:
    """Decide whether a catalog match is plausible enough to report.

    Args:
        secret_type: The catalog entry that matched
        value: The full configuration value that was matched
        location: Dotted path of the value in the document

    Returns:
        False for demo/example/test locations or when the type-specific
        shape check rejects the value; True otherwise.
    """
    if is_fake_location(location):
        return False

    validator = _VALIDATORS.get(secret_type)
    if validator is None:
        return True
    return validator(value)

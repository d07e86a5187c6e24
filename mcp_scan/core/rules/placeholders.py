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
Placeholder detection for configuration values.

A conservative allow-list of false-positive suppressors: templated values,
example/demo wording and well-known fake credentials from documentation. It
keeps the scanner usable on sample configurations; it is not a security
boundary.
"""

# Substrings that mark a value as a template or filler. Compared lowercase.
_PLACEHOLDER_MARKERS = (
    # Templating
    "${",
    "{{",
    # Placeholder wording
    "your_",
    "replace_",
    "example_",
    "demo_",
    "test_",
    "placeholder",
    "sample",
    # Bracketed hints like <API_KEY>
    "<",
    ">",
    # Low-entropy filler
    "xxx",
    "000",
    "123",
    "abc",
)

# Fake credentials copied around in READMEs and tutorials.
_KNOWN_FAKE_SECRETS = (
    "sk-1234567890abcdef",
    "AKIA1234567890ABCDEF",
    "ghp_1234567890abcdef",
    "xoxb-123456789",
    "AIza12345",
    "SG.example",
    "pdus+_example",
    "dckr_pat_example",
    "HRKU-example",
    "aio_example",
    "CCIPAT_example",
    "AC123456",
    "tfp_example",
    "pplx-example",
    "ntn_example",
    "secret_example",
)

PLACEHOLDER_MARKERS = tuple(m.lower() for m in _PLACEHOLDER_MARKERS + _KNOWN_FAKE_SECRETS)

# Project id used in the public GCP service account samples.
FAKE_GCP_PROJECT_ID = "silent-grid-405121"


def is_placeholder(value: str) -> bool:
    """Return True if *value* is an obvious template, example or fake credential."""
    lower_value = value.lower()
    if any(marker in lower_value for marker in PLACEHOLDER_MARKERS):
        return True

    if FAKE_GCP_PROJECT_ID in lower_value:
        return True
    return "service_account" in lower_value and "example" in lower_value

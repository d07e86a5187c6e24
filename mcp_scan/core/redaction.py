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

"""Redaction of secret values for display."""


def mask_secret(value: str) -> str:
    """Mask *value* so it can be shown without leaking the secret.

    - empty stays empty
    - up to 4 characters: all asterisks
    - 5 to 8 characters: first and last character kept
    - longer: first 3 and last 3 characters kept
    """
    if not value:
        return value

    if len(value) <= 4:
        return "*" * len(value)

    if len(value) <= 8:
        return value[0] + "*" * (len(value) - 2) + value[-1]

    return value[:3] + "*" * (len(value) - 6) + value[-3:]

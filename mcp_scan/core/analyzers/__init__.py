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
Analyzer modules for detecting security risks in MCP server entries.
"""

from .base import BaseAnalyzer
from .command_analyzer import CommandAnalyzer
from .config_analyzer import ConfigAnalyzer
from .filesystem_analyzer import FilesystemAnalyzer
from .secret_analyzer import SecretAnalyzer

__all__ = [
    "BaseAnalyzer",
    "CommandAnalyzer",
    "ConfigAnalyzer",
    "FilesystemAnalyzer",
    "SecretAnalyzer",
]

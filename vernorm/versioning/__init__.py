# Copyright 2025 Roger Cibrian
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

"""Version normalization, comparison and classification for vernorm.

Modules:
    normalize
        Free-form version text to canonical `major.minor.patch[-pre]`.
    compare
        Comparison of free-form versions and pin-versus-range classification.
    backend
        Strict semver operations (compare, valid_range, satisfies) on top of
        the semantic_version library.

Example:
    Basic usage:
        ```python
        from vernorm.versioning import (
            compare_versions,
            get_semantic_version,
            is_specific_version,
        )

        get_semantic_version("1.2b1")         # "1.2.0-b1"
        compare_versions("1.2", "1.2b1")      # 1
        is_specific_version("^1.2.3")         # False
        ```
"""

from .compare import compare_versions, is_newer_version, is_specific_version
from .normalize import SemanticVersion, get_semantic_version, parse_semantic_version

__all__ = [
    "SemanticVersion",
    "compare_versions",
    "get_semantic_version",
    "is_newer_version",
    "is_specific_version",
    "parse_semantic_version",
]

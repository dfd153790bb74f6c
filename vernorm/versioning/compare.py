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

"""Comparison and classification of free-form version strings.

Both inputs of a comparison are normalized first, then ordered by the strict
semver backend. Classification decides whether a string pins one version
("1.2b1", "1.1.1") or describes a range ("^1.2.3", ">=1 <2").
"""

from __future__ import annotations

import re

from vernorm.logging import get_global_logger
from vernorm.versioning import backend
from vernorm.versioning.normalize import get_semantic_version

_LEADING_DIGIT_RE = re.compile(r"^[0-9]")


def compare_versions(v1: str, v2: str) -> int:
    """Compare two versions according to semantic versioning criteria.

    Args:
        v1: Version to compare.
        v2: The other version to compare.

    Returns:
        0 if both versions resolve to the same one, 1 if v1 is greater,
        -1 if v2 is greater.

    Raises:
        UnparsableVersionError: If either input cannot be converted.

    Example:
        ```python
        compare_versions("0.0.1", "0.0.0-beta")  # 1
        compare_versions("1.0.0-", "1.0")        # 0
        compare_versions("1-beta1", "1-beta2")   # -1
        ```

    """
    a = get_semantic_version(v1)
    b = get_semantic_version(v2)
    result = backend.compare(a, b)
    get_global_logger().verbose(
        "COMPARE", f"{v1!r} ({a}) vs {v2!r} ({b}) -> {result}"
    )
    return result


def is_newer_version(remote: str, current: str | None) -> bool:
    """Decide if 'remote' should be considered newer than 'current'.

    Returns True when there is no current version.
    """
    if current is None:
        return True
    return compare_versions(remote, current) > 0


def is_specific_version(version: str | None) -> bool:
    """Check if a given version is a specific version or a range.

    Args:
        version: Version text to check, or None.

    Returns:
        True if the version pins exactly one release, False if it is a range,
        empty, or missing.

    Note:
        Never raises. Non-semver text such as "1.1beta" counts as specific;
        None, non-string input and "" do not.

    """
    logger = get_global_logger()
    if not isinstance(version, str):
        return False

    rendered = backend.valid_range(version)
    if rendered == version:
        # Case: 1.1.1
        logger.debug("SPECIFIC", f"{version!r} is an exact version")
        return True
    if version and rendered is None:
        # Case: not semver at all, e.g. 1.1beta
        logger.debug("SPECIFIC", f"{version!r} is not a range")
        return True
    if version and _LEADING_DIGIT_RE.match(version):
        # Case: valid range that still names one version, e.g. 1.1
        logger.debug("SPECIFIC", f"{version!r} is a partial version")
        return True

    # Case: empty or a real range
    logger.debug("SPECIFIC", f"{version!r} is a range")
    return False

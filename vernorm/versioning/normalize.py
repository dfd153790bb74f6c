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

"""Conversion of free-form version strings into semantic versions.

This module is format-agnostic and performs no I/O. It maps loosely
formatted vendor versions onto the `major.minor.patch[-preRelease]` shape so
they can be handed to a strict semver implementation.

Parsing happens in two passes:

1. A leading scan finds the first digit run (major), an optional minor
   segment, and the unparsed tail. Any text before the first digit is
   discarded ("someText1.2.3" -> 1.2.3).
2. The tail is split into an optional patch digit run, one optional
   separator (`-`, `_` or `.`), and the pre-release text.

Examples:
    | Input            | Output          |
    |------------------|-----------------|
    | "1"              | "1.0.0"         |
    | "1.2"            | "1.2.0"         |
    | "1.2b1"          | "1.2.0-b1"      |
    | "1-beta1"        | "1.0.0-beta1"   |
    | "1.2.3.patch1"   | "1.2.3-patch1"  |
    | "1.2.1.1patch1"  | "1.2.1-1patch1" |
    | "1.0.0-"         | "1.0.0"         |
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from vernorm.exceptions import UnparsableVersionError
from vernorm.logging import get_global_logger

# major, optional minor (no brackets, letters, '-' or '.'), tail
_VERSION_RE = re.compile(r"(\d+)\.?([^\[a-zA-Z\-\.\]]+)?\.?(.*)", re.ASCII)
_TAIL_RE = re.compile(r"(\d+)?[-._]?(.*)", re.ASCII)
_DIGITS_RE = re.compile(r"\d+", re.ASCII)
_LEADING_INT_RE = re.compile(r"\s*\+?(\d+)", re.ASCII)


@dataclass(frozen=True)
class SemanticVersion:
    """Canonical semantic version produced from a free-form string.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        pre_release: Pre-release tag copied verbatim from the input tail,
            or None when the input carried none.

    """

    major: int
    minor: int
    patch: int
    pre_release: str | None = None

    def render(self, omit_pre_release: bool = False) -> str:
        """Render as `major.minor.patch[-preRelease]` text.

        Args:
            omit_pre_release: Drop the pre-release suffix from the output.

        Returns:
            The canonical version text.

        """
        core = f"{self.major}.{self.minor}.{self.patch}"
        if omit_pre_release or self.pre_release is None:
            return core
        return f"{core}-{self.pre_release}"

    def __str__(self) -> str:
        return self.render()


def _leading_int(text: str) -> int:
    """Integer value of the leading digits in text, 0 if there are none."""
    m = _LEADING_INT_RE.match(text)
    return int(m.group(1)) if m else 0


def parse_semantic_version(version: str) -> SemanticVersion:
    """Parse a free-form version string into a SemanticVersion.

    Args:
        version: Version text of arbitrary shape (e.g., "1.2b1", "v2-rc1").

    Returns:
        The structured major/minor/patch/pre-release values.

    Raises:
        UnparsableVersionError: If no numeric major component can be found.

    Example:
        ```python
        sv = parse_semantic_version("1.2.3.patch1")
        sv.patch        # 3
        sv.pre_release  # "patch1"
        ```

    """
    m = _VERSION_RE.search(version) if isinstance(version, str) else None
    if not m:
        raise UnparsableVersionError(
            f'Cannot convert provided version ("{version}") to semantic format'
        )

    major = int(m.group(1))
    minor = 0
    patch = 0
    pre_release: str | None = None

    if m.group(2) is not None:
        # Cases: 1.2.3 or 1.2-beta1
        minor = _leading_int(m.group(2))

    tail = m.group(3)
    if _DIGITS_RE.fullmatch(tail):
        # Case: 1.2.3
        patch = int(tail)
    elif tail:
        # Cases: 1.2b1, 1.2.3-beta1, 1.2.3.patch1
        parsed = _TAIL_RE.fullmatch(tail)
        if parsed.group(1) is not None:
            patch = int(parsed.group(1))
        if parsed.group(2):
            pre_release = parsed.group(2)

    result = SemanticVersion(major, minor, patch, pre_release)
    get_global_logger().debug("VERSION", f"Parsed {version!r} as {result}")
    return result


def get_semantic_version(version: str, *, omit_pre_release: bool = False) -> str:
    """Convert a free-form version string to semantic version text.

    Args:
        version: Version text to convert.
        omit_pre_release: Drop the pre-release tag (`-beta` in `0.5.0-beta`).
            The tail is still parsed so the patch number is extracted.

    Returns:
        Canonical `major.minor.patch[-preRelease]` text.

    Raises:
        UnparsableVersionError: If the input cannot be converted.

    Example:
        ```python
        get_semantic_version("someText1.2.3")          # "1.2.3"
        get_semantic_version("1.2-beta1")              # "1.2.0-beta1"
        get_semantic_version("1.2.3-something", omit_pre_release=True)  # "1.2.3"
        ```

    """
    return parse_semantic_version(version).render(omit_pre_release)

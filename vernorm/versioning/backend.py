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

"""Strict semver operations backed by the semantic_version library.

Everything vernorm needs from a semver implementation goes through the three
functions in this module, so the library can be swapped without touching the
normalizer or classifier:

- compare: three-way precedence comparison of two strict versions
- valid_range: validate an npm-style range and render it canonically
- satisfies: check a strict version against an npm-style range

Range rendering:
    semantic_version parses ranges into a clause tree but does not render
    them back, and its parser is stricter than npm's about spacing. Ranges
    are therefore prepared the way npm prepares them before parsing:

    - whitespace between an operator and its version is removed
      (">= 1.2.3" -> ">=1.2.3")
    - "~>" is read as "~"; "=" and a leading "v" are dropped
    - comparator sets are split on "||", comparators on whitespace, and a
      "A - B" hyphen range stays one comparator

    Comparators keep their source order. A comparator against a full
    version renders as `{op}{major.minor.patch[-pre]}` (build metadata
    dropped). Sugar (caret, tilde, x-ranges, partial versions, hyphen
    ranges) is expanded by NpmSpec and rendered lower bound first.
    ">=0.0.0" matches everything and is dropped; a range that matches
    everything renders as "*". Sets are joined with "||".

    | Range               | Rendering             |
    |---------------------|-----------------------|
    | "1.1.1"             | "1.1.1"               |
    | "=v1.1.1"           | "1.1.1"               |
    | "1.1.1-beta.1"      | "1.1.1-beta.1"        |
    | ">= 1.2.3"          | ">=1.2.3"             |
    | "<2.0.0 >=1.2.3"    | "<2.0.0 >=1.2.3"      |
    | ">=1 || <0.5"       | ">=1.0.0||<0.5.0"     |
    | "1.1"               | ">=1.1.0 <1.2.0"      |
    | "^1.2.3", "~>1.2"   | ">=1.2.3 <2.0.0", ... |
    | "*", "x", ""        | "*"                   |
    | "1.1beta"           | None (invalid)        |

    Upper bounds produced by NpmSpec expansion may differ from npm's in
    pre-release detail (npm writes "<2.0.0-0").
"""

from __future__ import annotations

import re

from semantic_version import NpmSpec, Version
from semantic_version.base import AllOf, Always, AnyOf, Never, Range

from vernorm.exceptions import UnparsableVersionError
from vernorm.logging import get_global_logger

# Lower bounds first, then exact matches, then upper bounds
_BOUND_ORDER: dict[str, int] = {
    ">": 0,
    ">=": 0,
    "==": 1,
    "!=": 1,
    "<": 2,
    "<=": 2,
}

_MATCH_ALL = ">=0.0.0"
_OPERATOR_TRIM_RE = re.compile(r"(~>|~|\^|<=|>=|<|>|=)\s+")
_SET_SPLIT_RE = re.compile(r"\s*\|\|\s*")
_COMPARATOR_RE = re.compile(
    r"(?P<op>~>|~|\^|<=|>=|<|>|=)?=?v?(?P<version>[^\s<>=~^]\S*)"
)
_HYPHEN_BOUND_RE = re.compile(r"=?v?(?P<version>[^\s<>=~^]\S*)")


def _parse_version(text: str) -> Version:
    try:
        return Version(text)
    except ValueError as err:
        raise UnparsableVersionError(
            f'Provided version ("{text}") is not a valid semantic version'
        ) from err


def _render_version(version: Version) -> str:
    core = f"{version.major}.{version.minor}.{version.patch}"
    if version.prerelease:
        return f"{core}-{'.'.join(version.prerelease)}"
    return core


def _render_range(range_: Range) -> str:
    op = "" if range_.operator == "==" else range_.operator
    return f"{op}{_render_version(range_.target)}"


def _sort_key(clause) -> tuple[int, str]:
    if isinstance(clause, Range):
        return _BOUND_ORDER.get(clause.operator, 1), str(clause.target)
    return 1, _render_clause(clause)


def _render_clause(clause) -> str:
    """Render a semantic_version clause tree as npm range text."""
    if isinstance(clause, Range):
        return _render_range(clause)
    if isinstance(clause, Always):
        return ""
    if isinstance(clause, Never):
        return "<0.0.0-0"
    if isinstance(clause, AllOf):
        rendered = (
            _render_clause(c) for c in sorted(clause.clauses, key=_sort_key)
        )
        return " ".join(r for r in rendered if r)
    if isinstance(clause, AnyOf):
        return "||".join(sorted(_render_clause(c) for c in clause.clauses))
    return str(clause)


def _normalize_comparator(token: str) -> str:
    m = _COMPARATOR_RE.fullmatch(token)
    if not m:
        raise ValueError(f"Invalid comparator: {token!r}")
    op = m.group("op") or ""
    op = {"~>": "~", "=": ""}.get(op, op)
    return f"{op}{m.group('version')}"


def _hyphen_bound(token: str) -> str:
    m = _HYPHEN_BOUND_RE.fullmatch(token)
    if not m:
        raise ValueError(f"Invalid hyphen range bound: {token!r}")
    return m.group("version")


def _split_range(expression: str) -> list[list[str]]:
    """Split a range into comparator sets of NpmSpec-ready comparators.

    Raises:
        ValueError: If a comparator is malformed.

    """
    expression = _OPERATOR_TRIM_RE.sub(r"\1", expression.strip())
    sets: list[list[str]] = []
    for part in _SET_SPLIT_RE.split(expression):
        tokens = part.split()
        comparators: list[str] = []
        i = 0
        while i < len(tokens):
            if i + 2 < len(tokens) and tokens[i + 1] == "-":
                low = _hyphen_bound(tokens[i])
                high = _hyphen_bound(tokens[i + 2])
                comparators.append(f"{low} - {high}")
                i += 3
                continue
            comparators.append(_normalize_comparator(tokens[i]))
            i += 1
        sets.append(comparators)
    return sets


def _render_comparator(comparator: str) -> str:
    """Render one prepared comparator; raises ValueError if invalid."""
    m = _COMPARATOR_RE.fullmatch(comparator)
    if m and m.group("op") not in ("~", "^"):
        try:
            exact = Version(m.group("version"))
        except ValueError:
            pass
        else:
            return f"{m.group('op') or ''}{_render_version(exact)}"
    return _render_clause(NpmSpec(comparator).clause)


def _render_set(comparators: list[str]) -> str:
    words = " ".join(_render_comparator(c) for c in comparators).split()
    return " ".join(w for w in words if w != _MATCH_ALL)


def compare(v1: str, v2: str) -> int:
    """Compare two strict semantic versions.

    Args:
        v1: Version to compare.
        v2: The other version to compare.

    Returns:
        -1 if v1 < v2, 0 if equal, 1 if v1 > v2.

    Raises:
        UnparsableVersionError: If either input is not strict semver.

    """
    a = _parse_version(v1)
    b = _parse_version(v2)
    return (a > b) - (a < b)


def valid_range(expression: str) -> str | None:
    """Validate an npm-style range expression.

    Args:
        expression: Range text (e.g., "^1.2.3", ">=1 <2", "1.1.1").

    Returns:
        The canonical rendering of the range, or None if it is invalid.

    """
    logger = get_global_logger()
    try:
        rendered = "||".join(_render_set(s) for s in _split_range(expression))
    except ValueError:
        logger.debug("RANGE", f"Invalid range {expression!r}")
        return None
    rendered = rendered.strip() or "*"
    logger.debug("RANGE", f"Range {expression!r} renders as {rendered!r}")
    return rendered


def satisfies(version: str, expression: str) -> bool:
    """Check whether a strict version satisfies an npm-style range.

    A leading "v" or "=" on the version is ignored.

    Args:
        version: Strict semantic version (e.g., "3.11.4", "v1.2.3").
        expression: Range text.

    Returns:
        True if the version is valid and inside the range, False otherwise.

    """
    try:
        target = Version(version.strip().lstrip("=v").strip())
        prepared = " || ".join(
            " ".join(comparators) or "*" for comparators in _split_range(expression)
        )
        spec = NpmSpec(prepared)
    except ValueError:
        return False
    return spec.match(target)

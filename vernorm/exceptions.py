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

"""Exception hierarchy for vernorm.

This module defines the exceptions raised by the library so callers can
tell a malformed version apart from a failed runtime requirement:

- UnparsableVersionError: Version text cannot be mapped onto semantic form
- VersionMismatchError: The running interpreter fails a version requirement

All exceptions inherit from VernormError, allowing users to catch every
vernorm error with a single except clause if needed.

Example:
    Catching specific error types:
        ```python
        from vernorm import compare_versions
        from vernorm.exceptions import UnparsableVersionError

        try:
            result = compare_versions("1.2b1", "thisIsNotAVersion")
        except UnparsableVersionError as e:
            print(f"Bad version: {e}")
        ```

    Catching all vernorm errors:
        ```python
        from vernorm.exceptions import VernormError

        try:
            check_python_version_satisfies(">=3.10")
        except VernormError as e:
            print(f"vernorm error: {e}")
        ```

Note:
    is_specific_version() never raises; it reports malformed input as
    "not specific" instead.
"""

from __future__ import annotations

__all__ = [
    "VernormError",
    "UnparsableVersionError",
    "VersionMismatchError",
]


class VernormError(Exception):
    """Base exception for all vernorm errors."""

    pass


class UnparsableVersionError(VernormError):
    """Raised when a version string cannot be converted to semantic form.

    This exception is raised when:

    - The input has no leading numeric major-version component
    - The input is not a string at all
    - The normalized text is still rejected by the semver library (e.g., a
      pre-release tag containing characters semver does not allow)

    The offending text is always embedded in the message.

    Example:
        ```python
        from vernorm import get_semantic_version
        from vernorm.exceptions import UnparsableVersionError

        try:
            get_semantic_version("thisIsNotAVersion")
        except UnparsableVersionError as e:
            print(e)
        ```
    """

    pass


class VersionMismatchError(VernormError):
    """Raised when the running interpreter does not satisfy a requirement.

    Suppressed entirely when the FORCE_PYTHON_VERSION environment variable
    is set.
    """

    pass

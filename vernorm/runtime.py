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

"""Interpreter version gate for tools built on vernorm.

Some code requires a specific Python version to work. Calling
check_python_version_satisfies() at startup fails fast with a clear message
instead of an obscure error later on. Setting the FORCE_PYTHON_VERSION
environment variable (to any value) disables the check.

Example:
    ```python
    from vernorm.runtime import check_python_version_satisfies

    check_python_version_satisfies(">=3.10")
    check_python_version_satisfies(">=3.10 <3.14")
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
import os
import platform

from vernorm.exceptions import VersionMismatchError
from vernorm.logging import get_global_logger
from vernorm.versioning import backend
from vernorm.versioning.normalize import get_semantic_version

FORCE_VERSION_ENV = "FORCE_PYTHON_VERSION"


def check_python_version_satisfies(
    requirements: str,
    *,
    version: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Check that the running interpreter matches version requirements.

    Args:
        requirements: npm-style range the interpreter must satisfy
            (e.g., ">=3.10", ">=3.9 <3.13").
        version: Interpreter version to check. Defaults to
            platform.python_version(). Non-semver forms such as "3.13.0rc1"
            are normalized first.
        environ: Environment to read the override from. Defaults to
            os.environ.

    Raises:
        VersionMismatchError: If the version does not satisfy requirements
            and FORCE_PYTHON_VERSION is not set.

    """
    logger = get_global_logger()
    if environ is None:
        environ = os.environ
    if version is None:
        version = platform.python_version()

    if FORCE_VERSION_ENV in environ:
        logger.verbose(
            "RUNTIME", f"{FORCE_VERSION_ENV} is set, skipping check for {requirements!r}"
        )
        return

    normalized = get_semantic_version(version)
    logger.debug("RUNTIME", f"Checking Python {normalized} against {requirements!r}")
    if not backend.satisfies(normalized, requirements):
        raise VersionMismatchError(
            f"Python version {version} doesn't match the requirements "
            f"for this tool: {requirements}"
        )

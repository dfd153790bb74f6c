"""
vernorm - Version Normalizer

A small Python library for comparing versions whose strings do not reliably
follow semantic versioning (`1.2b1`, `1.2.3.patch1`, `1-beta`).

vernorm provides:
  - Normalization of free-form versions to `major.minor.patch[-preRelease]`
  - Semver comparison of free-form versions
  - Classification of version strings as pins or ranges
  - An interpreter version gate with an environment override

Quick Start
-----------
    >>> from vernorm import compare_versions, get_semantic_version
    >>> get_semantic_version("1.2.3.patch1")
    '1.2.3-patch1'
    >>> compare_versions("0.0.1", "0.0.0-beta")
    1

From the command line:

    $ vernorm normalize 1.2b1
    1.2.0-b1

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
versioning : package
    Normalization, comparison, classification and the semver backend.
runtime : module
    Interpreter version gate.
exceptions : module
    Exception hierarchy.
logging : module
    Logger protocol and global logger.

Project Information
-------------------
Author: Roger Cibrian
License: Apache-2.0
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "Normalize loosely formatted version strings into semantic versions"

from vernorm.exceptions import (
    UnparsableVersionError,
    VernormError,
    VersionMismatchError,
)
from vernorm.runtime import check_python_version_satisfies
from vernorm.versioning import (
    SemanticVersion,
    compare_versions,
    get_semantic_version,
    is_newer_version,
    is_specific_version,
    parse_semantic_version,
)

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "get_semantic_version",
    "parse_semantic_version",
    "compare_versions",
    "is_newer_version",
    "is_specific_version",
    "check_python_version_satisfies",
    "SemanticVersion",
    "VernormError",
    "UnparsableVersionError",
    "VersionMismatchError",
]

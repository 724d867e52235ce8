#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdreflow/utils/packages.py
"""Checks for the third-party packages mdreflow parses with.

The renderer is pure Python; only the Markdown parser needs mistune. These
helpers report whether each declared requirement is importable and recent
enough, for the ``requires_dependencies`` decorator and for ``--version``.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from importlib import metadata
from typing import Optional, Sequence, Tuple

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version

# (install_name, import_name, version_spec)
Requirement = Tuple[str, str, str]


@dataclass
class RequirementReport:
    """Outcome of checking a list of requirements.

    Attributes
    ----------
    missing : list of (install_name, version_spec)
        Requirements whose module could not be imported
    mismatched : list of (install_name, version_spec, installed_version)
        Requirements that import but fail the version specifier
    import_error : ImportError or None
        The first import failure, kept for exception chaining

    """

    missing: list[tuple[str, str]] = field(default_factory=list)
    mismatched: list[tuple[str, str, str]] = field(default_factory=list)
    import_error: Optional[ImportError] = None

    @property
    def satisfied(self) -> bool:
        """True when nothing is missing or too old."""
        return not self.missing and not self.mismatched


def get_package_version(package_name: str) -> Optional[str]:
    """Return the installed version of a distribution, or None if absent."""
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Check an installed distribution against a version specifier.

    Parameters
    ----------
    package_name : str
        Distribution name (the pip name, not the import name)
    version_spec : str
        Specifier such as ``">=3.0.0"``; empty accepts any version

    Returns
    -------
    tuple of (bool, str or None)
        Whether the requirement holds, and the installed version if any

    """
    installed = get_package_version(package_name)
    if installed is None:
        return False, None
    if not version_spec:
        return True, installed
    try:
        return Version(installed) in SpecifierSet(version_spec), installed
    except (InvalidVersion, InvalidSpecifier):
        return False, installed


def check_requirements(packages: Sequence[Requirement]) -> RequirementReport:
    """Import each requirement and compare its version.

    Parameters
    ----------
    packages : sequence of (install_name, import_name, version_spec)
        Requirements to check

    Returns
    -------
    RequirementReport
        What is missing or outdated

    """
    report = RequirementReport()
    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as exc:
            report.missing.append((install_name, version_spec))
            if report.import_error is None:
                report.import_error = exc
            continue

        if version_spec:
            meets, installed = check_version_requirement(install_name, version_spec)
            if not meets:
                report.mismatched.append((install_name, version_spec, installed or "unknown"))
    return report


def describe_packages(packages: Sequence[Requirement]) -> str:
    """Summarize installed versions, e.g. ``"mistune 3.0.2"``.

    Packages that are not installed are listed as ``"<name> (not installed)"``.
    """
    parts = []
    for install_name, _import_name, _spec in packages:
        installed = get_package_version(install_name)
        parts.append(f"{install_name} {installed}" if installed else f"{install_name} (not installed)")
    return ", ".join(parts)

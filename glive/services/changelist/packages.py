"""
dpkg package list parsing and comparison.

Package lists are the `dpkg -l` output grml-live leaves in
grml_logs/fai/dpkg.list. Only installed packages (status "ii") count.
"""

from __future__ import annotations

import re

from ...core.models.changelist import OwnPackageChange, PackageChanges

_INSTALLED_RE = re.compile(r"^ii\s+(\S+)\s+(\S+)\s")


def parse_package_list(text: str) -> dict[str, str]:
    """
    Parse dpkg -l output into a name -> version mapping.

    Args:
        text: Full contents of a dpkg.list file

    Returns:
        Installed packages keyed by name
    """
    packages: dict[str, str] = {}
    for line in text.split("\n"):
        match = _INSTALLED_RE.match(line)
        if match:
            packages[match.group(1)] = match.group(2)
    return packages


def diff_packages(
    old: dict[str, str],
    new: dict[str, str],
    package_prefix: str,
) -> PackageChanges:
    """
    Classify the changes between two package lists.

    Packages whose name starts with package_prefix are the distribution's
    own; everything else is reported as a Debian package. An empty prefix
    makes every package an own package.

    Returns:
        PackageChanges with every list sorted by package name; own
        removals come before own updates and additions
    """
    own_removed: list[OwnPackageChange] = []
    own_updated: list[OwnPackageChange] = []
    debian_added: list[str] = []
    debian_changed: list[str] = []
    debian_removed: list[str] = []

    for name in sorted(old.keys() - new.keys()):
        if name.startswith(package_prefix):
            own_removed.append(OwnPackageChange(name=name, old_version=old[name]))
        else:
            debian_removed.append(name)

    for name in sorted(new):
        new_version = new[name]
        old_version = old.get(name)
        if old_version == new_version:
            continue

        if name.startswith(package_prefix):
            own_updated.append(
                OwnPackageChange(name=name, old_version=old_version, new_version=new_version)
            )
        elif old_version is not None:
            debian_changed.append(f"{name} {old_version} -> {new_version}")
        else:
            debian_added.append(name)

    return PackageChanges(
        own=own_removed + own_updated,
        debian_added=debian_added,
        debian_changed=debian_changed,
        debian_removed=debian_removed,
    )

from __future__ import annotations

import logging
from pathlib import Path

from jar_transform.zip_utils import normalize_member_name, open_jar, should_skip_member

from .base import JarScanResult
from .properties import write_properties

logger = logging.getLogger(__name__)

PACKAGES_KEY = "packages"
_COMMENT = "Jar analysis"


def _package_of(member_name: str) -> str | None:
    name = normalize_member_name(member_name)
    if not name.endswith(".class"):
        return None
    parent, sep, _cls = name.rpartition("/")
    if not sep or not parent:
        # default package
        return None
    return parent.replace("/", ".")


def list_packages(jar_path: Path) -> tuple[str, ...]:
    """Return the sorted Java packages that have at least one class in the jar."""
    packages: set[str] = set()
    with open_jar(jar_path) as zf:
        for member in zf.infolist():
            if member.is_dir() or should_skip_member(member.filename):
                continue
            pkg = _package_of(member.filename)
            if pkg:
                packages.add(pkg)
    logger.debug("found %d package(s) in %s", len(packages), jar_path)
    return tuple(sorted(packages))


def scan_jar(input_path: Path, output_path: Path) -> JarScanResult:
    """Scan ``input_path`` and write its package list to ``output_path``."""
    input_path = input_path.resolve()
    packages = list_packages(input_path)
    write_properties(output_path, {PACKAGES_KEY: ",".join(packages)}, comment=_COMMENT)
    return JarScanResult(input_path=input_path, output_path=output_path, packages=packages)


class PackageScanner:
    key = "packages"

    def scan(self, *, input_path: Path, output_path: Path) -> JarScanResult:
        return scan_jar(input_path, output_path)

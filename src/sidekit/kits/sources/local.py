"""Resolve kits shipped inside installed Python packages."""

import importlib.util
import logging
from pathlib import Path

from sidekit.exceptions import FileError, InvalidSchemaError
from sidekit.io import read_json_document
from sidekit.kits.resolver import KitSource
from sidekit.models import Kit
from sidekit.settings import KIT_FILENAME

logger = logging.getLogger(__name__)

# Files that mark the root of a package on disk
PACKAGE_ROOT_MARKERS = ("__init__.py", "pyproject.toml", "setup.py", "setup.cfg")


def kit_id_to_module_name(kit_id: str) -> str:
    """Map a kit id to the import name of the package providing it."""
    return kit_id.replace("-", "_")


def find_package_root(module_name: str) -> Path | None:
    """Locate the on-disk root of an importable package.

    Starts at the directory holding the module's entry file and walks up
    until a directory contains a package root marker.

    Returns None if the name is not a plain top-level module name, if the
    module cannot be found, or if no root is found.
    """
    # find_spec imports the parent package of a dotted name
    if not module_name.isidentifier():
        return None

    try:
        spec = importlib.util.find_spec(module_name)
    except (ImportError, ValueError):
        return None
    if spec is None:
        return None

    if spec.origin is not None and spec.has_location:
        current = Path(spec.origin).resolve().parent
    elif spec.submodule_search_locations:
        # Namespace packages have no entry file, only search locations
        current = Path(next(iter(spec.submodule_search_locations))).resolve()
    else:
        return None

    while True:
        if any((current / marker).exists() for marker in PACKAGE_ROOT_MARKERS):
            return current
        if current.parent == current:
            return None
        current = current.parent


class LocalKitSource(KitSource):
    """Resolve kits from installed packages carrying a sidekit.json at their root.

    Every failure here means "not found locally": a missing package, a missing
    or unreadable descriptor, or an invalid one.
    """

    name = "local"

    async def resolve(self, kit_id: str) -> Kit | None:
        package_root = find_package_root(kit_id_to_module_name(kit_id))
        if package_root is None:
            return None

        try:
            return read_json_document(package_root / KIT_FILENAME, Kit)
        except (FileError, InvalidSchemaError) as e:
            logger.debug("Ignoring local kit candidate for %s: %s", kit_id, e)
            return None

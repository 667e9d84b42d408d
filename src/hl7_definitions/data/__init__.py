# src/hl7_definitions/data/__init__.py
"""
Version data partitions.

Each HL7 version lives in its own subpackage (v2_1, v2_2, ..., v2_7_1)
holding four literal modules:

- messages.py:  MESSAGES  = {type: (name, description, references)}
- segments.py:  SEGMENTS  = {code: (description, fields)}
- datatypes.py: DATATYPES = {code: (description, components)}
- tables.py:    TABLES    = {id: (description, ((code, description), ...))}

A field or component is ``(datatype, description, optionality, repeat,
length, table)``; a message reference is ``(name, description, min, max)``
with an optional fifth item holding the children of a group.

A distribution may leave out any subpackage (or just its tables module);
the missing partition then reads as absent instead of failing to import.
"""

from __future__ import annotations

import importlib
import importlib.util
import pkgutil
from types import ModuleType
from typing import Iterable, Optional, Set

from ..models import Version

__all__ = ["PARTITION_KINDS", "packaged_versions", "load_module"]

PARTITION_KINDS = ("messages", "segments", "datatypes", "tables")


def _iter_partitions(pkg_name: str) -> Iterable[str]:
    """
    Yield the names of the subpackages directly under pkg_name.
    """
    pkg = importlib.import_module(pkg_name)
    pkg_path = getattr(pkg, "__path__", None)
    if not pkg_path:
        return
    for _, name, ispkg in pkgutil.iter_modules(pkg_path):
        if ispkg and not name.startswith("_"):
            yield name


def packaged_versions() -> Set[Version]:
    """Return the versions whose data package ships with this distribution."""
    names = set(_iter_partitions(__name__))
    return {v for v in Version if v.module_name in names}


def load_module(version: Version, kind: str) -> Optional[ModuleType]:
    """
    Import one literal module of a version partition.

    Parameters
    ----------
    version : Version
        Version whose partition to read.
    kind : str
        One of PARTITION_KINDS.

    Returns
    -------
    ModuleType or None
        The imported module, or None when the partition (or that module of
        it) is not packaged.

    Raises
    ------
    ValueError
        If kind is not one of PARTITION_KINDS.
    """
    if kind not in PARTITION_KINDS:
        raise ValueError(f"kind must be one of {PARTITION_KINDS}, got {kind!r}")
    if version not in packaged_versions():
        return None
    modname = f"{__name__}.{version.module_name}.{kind}"
    if importlib.util.find_spec(modname) is None:
        return None
    return importlib.import_module(modname)

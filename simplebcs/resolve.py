# -*- coding: utf-8 -*-
# SimpleBCs/simplebcs/resolve.py

"""
Project: SimpleBCs
Date: 10/19/2026

Purpose
-------
Name→ID resolvers for variable/group references. A resolver is any callable
`resolver(full_name) -> Optional[int]`; None means "no such group".

Main Tasks
----------
    1. MappingResolver: wrap a plain name→id dict (e.g. a host's group table).
    2. id_map_from_field_data: build a name→id map from Gmsh `field_data` entries.
    3. id_map_from_mesh: read a Gmsh `.msh` with `meshio` and return its Physical-name map.
    4. resolve_names: resolve a list of names in one pass, reporting misses.

Notes
-----
- `meshio` is imported lazily so that pure parsing never needs it.
- Malformed `field_data` entries are ignored rather than failing the whole map.
"""

import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

NameToId = Callable[[str], Optional[int]]


class MappingResolver:
    """
    Resolve names against a fixed mapping.

    Parameters
    ----------
    id_map : Mapping[str, int]
        Fully-qualified name → integer group id.
    case_sensitive : bool, optional
        Host group names are case-insensitive in Cactus; default True keeps exact matching.
    """

    def __init__(self, id_map: Mapping[str, int], case_sensitive: bool = True):
        self.case_sensitive = case_sensitive
        if case_sensitive:
            self._ids = {k: int(v) for k, v in id_map.items()}
        else:
            self._ids = {k.lower(): int(v) for k, v in id_map.items()}

    def __call__(self, name: str) -> Optional[int]:
        key = name if self.case_sensitive else name.lower()
        return self._ids.get(key)

    def __contains__(self, name):
        return self(name) is not None

    def __len__(self):
        return len(self._ids)


def id_map_from_field_data(field_data: Mapping[str, object]) -> Dict[str, int]:
    """
    Build a Physical-name → id map from Gmsh `field_data` as exposed by meshio:
        name -> (id, dim, ...)
    Only the first value (id) is used.
    """
    id_map = {}  # type: Dict[str, int]
    for name, val in (field_data or {}).items():
        try:
            id_map[name] = int(val[0])
        except (TypeError, ValueError, IndexError):
            logger.debug("[id_map_from_field_data] Ignoring malformed entry %r: %r", name, val)
    return id_map


def id_map_from_mesh(msh_path: str) -> Dict[str, int]:
    """
    Read a Gmsh mesh (.msh v2/v4, ASCII or binary) and return its Physical-name → id map.

    Raises
    ------
    ImportError
        If `meshio` is not installed.
    RuntimeError
        If the mesh file cannot be read.
    """
    try:
        import meshio
    except ImportError:
        raise ImportError("meshio is required to read group ids from a mesh file")

    try:
        mesh = meshio.read(msh_path)
    except Exception as e:
        raise RuntimeError("Failed to read Gmsh file '{}': {}".format(msh_path, e))

    id_map = id_map_from_field_data(getattr(mesh, "field_data", {}) or {})
    if not id_map:
        logger.warning("[id_map_from_mesh] No Physical names found in %s", msh_path)
    else:
        logger.info("[id_map_from_mesh] %d group ids read from %s", len(id_map), msh_path)
    return id_map


def resolve_names(names: Iterable[str], resolver: NameToId) -> Tuple[List[Optional[int]], List[str]]:
    """
    Resolve each name; return (ids in input order, names that did not resolve).
    """
    ids = []  # type: List[Optional[int]]
    missing = []  # type: List[str]
    for name in names:
        gid = resolver(name)
        ids.append(gid)
        if gid is None:
            missing.append(name)
    return ids, missing

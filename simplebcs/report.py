# -*- coding: utf-8 -*-
# SimpleBCs/simplebcs/report.py

"""
Project: SimpleBCs
Date: 10/19/2026

Purpose
-------
Human- and machine-readable views of a BoundaryTable: the verbose listing written to the
log, a JSON-ready dict, and an atomic manifest writer.

Main Tasks
----------
    1. format_table(table, title): "vb[i]=BC(name=...,thorn::var,...)" lines.
    2. table_to_dict(table, problems): plain dict/list structure for json.dump.
    3. write_manifest(table, path, problems): atomic UTF-8 JSON write.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .errors import RenderError
from .model import BoundaryTable


def format_table(table, title="BCs to be applied by SimpleBCs:"):
    # type: (BoundaryTable, Optional[str]) -> str
    lines = [title] if title else []
    lines.extend("vb[{}]={}".format(i, group) for i, group in enumerate(table))
    return "\n".join(lines)


def table_to_dict(table, problems=None):
    # type: (BoundaryTable, Optional[Iterable[Exception]]) -> Dict[str, Any]
    """
    {
      "bcs": [{"name": str, "vars": [{"name": str, "gid": int|None}, ...]}, ...],
      "problems": [{"type": str, "message": str, "context": dict|None}, ...]
    }
    """
    bcs = []
    for group in table:
        bcs.append({
            "name": group.name,
            "vars": [{"name": r.full_name, "gid": r.gid} for r in group.refs],
        })
    out = []
    for p in problems or ():
        out.append({
            "type": type(p).__name__,
            "message": p.args[0] if p.args else str(p),
            "context": getattr(p, "context", None),
        })
    return {"bcs": bcs, "problems": out}


def write_manifest(table, path, problems=None):
    # type: (BoundaryTable, str, Optional[Iterable[Exception]]) -> str
    """
    Atomic UTF-8 JSON write of `table_to_dict(table, problems)`.

    Raises
    ------
    RenderError
        If the payload cannot be serialized or the file cannot be written.
    """
    try:
        text = json.dumps(table_to_dict(table, problems), indent=2)
    except (TypeError, ValueError) as e:
        raise RenderError("Table is not JSON-serializable: {}".format(e), {"path": path})

    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        tf = tempfile.NamedTemporaryFile("w", encoding="utf-8", dir=str(p.parent), delete=False)
        try:
            tf.write(text + "\n")
            tmp_name = tf.name
        finally:
            tf.close()
        os.replace(tmp_name, str(p))
    except OSError as e:
        raise RenderError("Failed to write manifest: {}".format(e), {"path": str(p)})
    return str(p)

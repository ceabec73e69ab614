# -*- coding: utf-8 -*-
# SimpleBCs/simplebcs/__init__.py

"""
Project: SimpleBCs
Date: 10/19/2026

Modules:
--------
- model:     Token, VariableRef, BoundaryGroup, BoundaryTable.
- tokenizer: String → identifier / ':' / '::' tokens; illegal characters are fatal.
- grammar:   Tokens → BoundaryTable ("name:" opens a group, "thorn::var" adds to it).
- table:     Array mode: (name, group list) entries → table + collected problems.
- resolve:   Name → group id resolvers (mapping-backed, Gmsh Physical names via meshio).
- driver:    Build-once TableCache; select/sync host calls under a failure policy.
- config:    Sectioned defaults, merged and validated settings, array entries.
- schema:    Key aliases and per-key checks; raises SchemaError.
- parfile:   Thorn::key = value parameter files → settings mapping.
- validate:  Cross-group checks (conflicting selections, empty groups).
- report:    Verbose listing, JSON-ready dict, atomic manifest write.
- logstream: Scoped info/error log streams.
- errors:    ConfigError base plus typed subclasses.
- api:       High-level entry points.
"""

from .api import parse_bc_string, build_from_entries, load_table, load_settings, register_boundaries
from .config import build_settings, entries_from_settings
from .driver import TableCache, register_table, sync_table
from .grammar import reduce, scan
from .model import Token, TokenKind, VariableRef, BoundaryGroup, BoundaryTable
from .resolve import MappingResolver, id_map_from_mesh
from .table import build_table, split_group_list
from .tokenizer import tokenize
from .validate import cross_validate
from .errors import (ConfigError, ParseError, IllegalCharacterError, SchemaError, ValidationError,
                     UnknownVariableError, MissingNameError, ConflictError, ExternalOperationError,
                     RenderError)

__all__ = [
    # High-level API
    "parse_bc_string", "build_from_entries", "load_table", "load_settings", "register_boundaries",
    # Settings
    "build_settings", "entries_from_settings",
    # Parsing
    "tokenize", "reduce", "scan", "build_table", "split_group_list", "cross_validate",
    # Data model
    "Token", "TokenKind", "VariableRef", "BoundaryGroup", "BoundaryTable",
    # Host glue
    "TableCache", "register_table", "sync_table", "MappingResolver", "id_map_from_mesh",
    # Error types
    "ConfigError", "ParseError", "IllegalCharacterError", "SchemaError", "ValidationError",
    "UnknownVariableError", "MissingNameError", "ConflictError", "ExternalOperationError",
    "RenderError",
]

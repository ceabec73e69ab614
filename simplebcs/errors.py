# -*- coding: utf-8 -*-
# SimpleBCs/simplebcs/errors.py

"""
Project: SimpleBCs
Date: 10/19/2026

Purpose
-------
Typed exceptions for the boundary-condition parser, table builder, settings layer and
registration driver, with compact context-aware messages so that a configuration author
can locate the offending character, entry or variable from the message alone.

Main Tasks
----------
    1. Define ConfigError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses for parsing, schema checks, validation and external calls.
    3. Give the collected (non-raised) validation errors structured attributes.

Notes
-----
- Array-mode validation errors are collected in lists, not raised; they are still
  exceptions so a caller may raise any of them directly.
- Context is optional; long values are truncated for readability.
"""

__all__ = [
    "ConfigError",
    "ParseError",
    "IllegalCharacterError",
    "SchemaError",
    "ValidationError",
    "UnknownVariableError",
    "MissingNameError",
    "ConflictError",
    "ExternalOperationError",
    "RenderError",
]


_MAX_VALUE_CHARS = 120


def _render_value(value):
    # Variable lists print as "[a::x b::y]" so they match the group-list syntax.
    if isinstance(value, (list, tuple)):
        text = "[" + " ".join(str(v) for v in value) + "]"
    else:
        text = repr(value)
    if len(text) > _MAX_VALUE_CHARS:
        text = text[:_MAX_VALUE_CHARS - 3] + "..."
    return text


def _format_context(ctx):
    """
    Render context as ' | entry=2, name='ADMBase::lapse'' in the order the raising code
    supplied the fields (entry/char position first, details after). '' if there is none.
    """
    if not ctx:
        return ""
    return " | " + ", ".join("{}={}".format(k, _render_value(v)) for k, v in ctx.items())


class ConfigError(Exception):
    """
    Base class for everything SimpleBCs raises or collects.

    `context` holds the fields that locate the problem in the input (entry index,
    character position, variable name). It is copied on construction, so callers may
    reuse their dict.
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        return str(self.args[0]) + _format_context(self.context)


class ParseError(ConfigError):
    """Lexical problems in a boundary-condition string."""


class IllegalCharacterError(ParseError):
    """
    The tokenizer met a character outside [A-Za-z0-9_:] and the separators.
    Fatal to the current parse; no partial token list is returned.
    """
    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(
            "Illegal character in input: {!r}".format(char),
            {"char": char, "position": position},
        )


class SchemaError(ConfigError):
    """
    Per-key settings issues:
      - unknown/invalid enum values
      - non-numeric or non-boolean where one is required
      - out-of-range scalar values
      - array settings longer than the configured capacity
    """


class ValidationError(ConfigError):
    """
    Problems with a built table or one of its entries. Collected rather than raised
    by the array-mode builder and by cross-validation.
    """


class UnknownVariableError(ValidationError):
    """A listed variable name did not resolve to a group id."""
    def __init__(self, index, name):
        self.index = index
        self.name = name
        super().__init__(
            "Unknown variable or group name: {}".format(name),
            {"entry": index, "name": name},
        )


class MissingNameError(ValidationError):
    """An entry lists variables but has no boundary-condition name."""
    def __init__(self, index, variables=()):
        self.index = index
        self.variables = tuple(variables)
        super().__init__(
            "Boundary condition entry {} lists variables but has no name".format(index),
            {"entry": index, "variables": list(self.variables)},
        )


class ConflictError(ValidationError):
    """The same variable is claimed by more than one boundary condition."""
    def __init__(self, variable, bc_names):
        self.variable = variable
        self.bc_names = tuple(bc_names)
        super().__init__(
            "Variable {} is selected for several boundary conditions".format(variable),
            {"variable": variable, "bcs": list(self.bc_names)},
        )


class ExternalOperationError(ConfigError):
    """
    A host select/sync call reported failure (non-zero negative return or exception).
    """
    def __init__(self, operation, variable, bc=None, code=None, cause=None):
        self.operation = operation
        self.variable = variable
        self.bc = bc
        self.code = code
        self.cause = cause
        ctx = {"operation": operation, "variable": variable}
        if bc is not None:
            ctx["bc"] = bc
        if code is not None:
            ctx["code"] = code
        msg = "{} failed for {}".format(operation, variable)
        if cause is not None:
            msg += ": {}".format(cause)
        super().__init__(msg, ctx)


class RenderError(ConfigError):
    """
    Errors while rendering/writing reports:
      - non-serializable values
      - encoding/IO problems (use context to include 'path')
    """

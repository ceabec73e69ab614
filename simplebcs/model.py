# -*- coding: utf-8 -*-
# SimpleBCs/simplebcs/model.py

"""
Project: SimpleBCs
Date: 10/19/2026

Purpose
-------
Plain data containers shared by both front ends: lexical tokens, variable references,
named boundary-condition groups and the table that holds them.

Notes
-----
- BoundaryTable 1—* BoundaryGroup 1—* VariableRef; no back-references.
- Groups are filled while parsing and treated as read-only afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

IDENT_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_")


def is_ident_char(c: Optional[str]) -> bool:
    """True if c is a C-identifier character."""
    return c is not None and c in IDENT_CHARS


class TokenKind(Enum):
    IDENTIFIER = "identifier"
    SINGLE_COLON = ":"
    DOUBLE_COLON = "::"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    offset: int = field(default=0, compare=False)  # position of the first character

    @classmethod
    def from_text(cls, text: str, offset: int = 0) -> "Token":
        if text == ":":
            return cls(TokenKind.SINGLE_COLON, text, offset)
        if text == "::":
            return cls(TokenKind.DOUBLE_COLON, text, offset)
        return cls(TokenKind.IDENTIFIER, text, offset)

    @property
    def is_name(self) -> bool:
        """Identifier token whose text can name a group, thorn or variable."""
        return self.kind is TokenKind.IDENTIFIER and is_ident_char(self.text[:1])


@dataclass(frozen=True)
class VariableRef:
    """
    One grid-function reference. If the variable is "MyThorn::a", then full_name is
    "MyThorn::a", name is "a" and thorn is "MyThorn".
    """
    thorn: str
    name: str
    gid: Optional[int] = None

    @property
    def full_name(self) -> str:
        if not self.thorn:
            return self.name
        return self.thorn + "::" + self.name

    @property
    def resolved(self) -> bool:
        return self.gid is not None

    @classmethod
    def from_full_name(cls, full_name: str, gid: Optional[int] = None) -> "VariableRef":
        thorn, sep, name = full_name.partition("::")
        if not sep or not thorn:
            return cls("", full_name, gid)
        return cls(thorn, name, gid)

    def with_gid(self, gid: Optional[int]) -> "VariableRef":
        return VariableRef(self.thorn, self.name, gid)

    def __str__(self):
        return self.full_name


@dataclass
class BoundaryGroup:
    """A boundary condition name and the variables it applies to, in input order."""
    name: str
    refs: List[VariableRef] = field(default_factory=list)

    def __post_init__(self):
        if not self.name:
            self.name = "?"

    def __str__(self):
        return "BC(name=" + self.name + "".join("," + str(r) for r in self.refs) + ")"


class BoundaryTable:
    """
    Ordered sequence of BoundaryGroup.

    Order matters for display only; each group is independent. Equality is structural
    (same names, same references, same order).
    """

    def __init__(self, groups: Optional[Sequence[BoundaryGroup]] = None):
        self._groups = list(groups or [])

    def append(self, group: BoundaryGroup) -> BoundaryGroup:
        self._groups.append(group)
        return group

    @property
    def last(self) -> BoundaryGroup:
        return self._groups[-1]

    def names(self) -> List[str]:
        return [g.name for g in self._groups]

    def refs(self) -> Iterator[Tuple[BoundaryGroup, VariableRef]]:
        """Flattened (group, ref) pairs in table order."""
        for g in self._groups:
            for r in g.refs:
                yield g, r

    def __iter__(self):
        return iter(self._groups)

    def __len__(self):
        return len(self._groups)

    def __getitem__(self, i):
        return self._groups[i]

    def __eq__(self, other):
        if not isinstance(other, BoundaryTable):
            return NotImplemented
        return self._groups == other._groups

    def __repr__(self):
        return "BoundaryTable({!r})".format(self._groups)

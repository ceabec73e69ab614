# -*- coding: utf-8 -*-
# SimpleBCs/simplebcs/grammar.py

"""
Project: SimpleBCs
Date: 10/19/2026

Purpose
-------
Fold a token list into a BoundaryTable (string mode).

Grammar
-------
    name :            opens a new boundary condition group
    thorn :: var      adds a reference to the most recently opened group

Anything before the first `name :` belongs to the implicit "none" group, which is always
the first group of the table even if it stays empty. Any other token is skipped.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .model import BoundaryGroup, BoundaryTable, Token, TokenKind, VariableRef

IMPLICIT_GROUP = "none"


@dataclass(frozen=True)
class SkippedToken:
    """A token the reducer could not place (index in the token list, input offset, text)."""
    index: int
    offset: int
    text: str


def _kind_at(tokens, i):
    return tokens[i].kind if i < len(tokens) else None


def scan(tokens: Sequence[Token]) -> Tuple[BoundaryTable, List[SkippedToken]]:
    """
    Reduce `tokens` and also report every token that was skipped.

    Never raises; lookahead past the end of `tokens` simply fails to match.
    """
    table = BoundaryTable([BoundaryGroup(IMPLICIT_GROUP)])
    skipped = []  # type: List[SkippedToken]
    i = 0
    n = len(tokens)
    while i < n:
        tok = tokens[i]
        if tok.is_name and _kind_at(tokens, i + 1) is TokenKind.SINGLE_COLON:
            table.append(BoundaryGroup(tok.text))
            i += 2
        elif (tok.is_name
              and _kind_at(tokens, i + 1) is TokenKind.DOUBLE_COLON
              and i + 2 < n and tokens[i + 2].is_name):
            table.last.refs.append(VariableRef(tok.text, tokens[i + 2].text))
            i += 3
        else:
            skipped.append(SkippedToken(i, tok.offset, tok.text))
            i += 1
    return table, skipped


def reduce(tokens: Sequence[Token]) -> BoundaryTable:
    """Build the string-mode BoundaryTable; malformed fragments are dropped silently."""
    table, _ = scan(tokens)
    return table

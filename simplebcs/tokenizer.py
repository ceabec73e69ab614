# -*- coding: utf-8 -*-
# SimpleBCs/simplebcs/tokenizer.py

"""
Project: SimpleBCs
Date: 10/19/2026

Purpose
-------
Break a boundary-condition string into tokens that are either a C-identifier, a single
colon (:) or a double colon (::). Commas and whitespace are separators.

Notes
-----
- One character of lookback. The lookback is updated after every character, separators
  included, so "a b" yields two identifiers and ": :" two single colons.
- A run of three or more colons stays one buffer and classifies as an identifier with
  colon text; the grammar reducer skips it.
- An illegal character aborts the whole scan (no partial token list).
"""

import logging
from typing import List

from .errors import IllegalCharacterError
from .logstream import error_stream
from .model import Token, is_ident_char

logger = logging.getLogger(__name__)

SEPARATORS = frozenset(", \t\r\n")


def tokenize(text: str) -> List[Token]:
    """
    Scan `text` left to right and return the token list.

    Raises
    ------
    IllegalCharacterError
        On any character outside [A-Za-z0-9_:] and the separators.
    """
    last = None
    buf = []
    start = 0
    tokens = []  # type: List[Token]

    def flush():
        if buf:
            tokens.append(Token.from_text("".join(buf), start))

    for i, c in enumerate(text):
        if c == ":" and last == ":":
            buf.append(c)
        elif is_ident_char(c) and is_ident_char(last):
            buf.append(c)
        elif c == ":" or is_ident_char(c):
            flush()
            buf = [c]
            start = i
        elif c in SEPARATORS:
            pass
        else:
            with error_stream(logger, lambda: IllegalCharacterError(c, i)) as sout:
                sout.write("[tokenize] Illegal character in input: {!r} at position {}".format(c, i))
        last = c
    flush()
    return tokens

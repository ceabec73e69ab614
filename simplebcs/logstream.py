# -*- coding: utf-8 -*-
# SimpleBCs/simplebcs/logstream.py

"""
Project: SimpleBCs
Date: 10/19/2026

Purpose
-------
Scoped text streams for multi-line log messages. Text written inside the `with` block is
buffered and emitted as one record when the block exits.

Main Tasks
----------
    1. info_stream(logger): emit the buffer at INFO level on exit.
    2. error_stream(logger, exc_type, context): emit at ERROR level, then raise exc_type.

Notes
-----
- If the body raises, nothing is emitted and the original exception propagates.
- Empty buffers are not emitted by info_stream.
"""

import io
import logging
from contextlib import contextmanager

from .errors import ConfigError


@contextmanager
def info_stream(logger: logging.Logger, level: int = logging.INFO):
    """
    Yield a text buffer; log its contents (trailing newline stripped) on scope exit.
    """
    buf = io.StringIO()
    yield buf
    text = buf.getvalue().rstrip("\n")
    if text:
        logger.log(level, "%s", text)


@contextmanager
def error_stream(logger: logging.Logger, exc_type=ConfigError, context=None):
    """
    Yield a text buffer; on scope exit log it at ERROR level and raise.

    `exc_type` is called as exc_type(text, context) when context is given, else
    exc_type(text). A zero-argument callable may be passed to build the exception
    itself (e.g. a lambda closing over a typed error).
    """
    buf = io.StringIO()
    yield buf
    text = buf.getvalue().rstrip("\n")
    logger.error("%s", text)
    if isinstance(exc_type, type):
        if context is not None:
            raise exc_type(text, context)
        raise exc_type(text)
    raise exc_type()

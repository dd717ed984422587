"""Token scanning over text streams with pluggable split functions.

A splitter is called as ``splitter(data, at_eof)`` with the text buffered so
far and returns ``(advance, token)``: how many characters to consume and the
token found, or None when no token is ready yet.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator
from typing import IO, Optional, Union

Splitter = Callable[[str, bool], "tuple[int, Optional[str]]"]
Separator = Callable[[str], "tuple[int, Optional[str]]"]
Processor = Callable[[str], Optional[str]]

COMMENT = "//"

_CHUNK_SIZE = 4096
_MAX_EMPTY_TOKENS = 100

# Characters with the Unicode White_Space property.
_SPACE = (
    "\t\n\v\f\r \u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def scan(stream: Union[IO[str], str], splitter: Splitter) -> Iterator[str]:
    """Tokens produced by ``splitter`` from a text stream (or a string).

    When the splitter consumes text without producing a token, more text is
    read before it is called again.
    """
    if isinstance(stream, str):
        stream = io.StringIO(stream)
    buffer = ""
    at_eof = False
    empties = 0
    while True:
        if buffer or at_eof:
            advance, token = splitter(buffer, at_eof)
            if not 0 <= advance <= len(buffer):
                raise ValueError("splitter advanced outside the buffered text")
            buffer = buffer[advance:]
            if token is not None:
                if not at_eof or advance > 0:
                    empties = 0
                else:
                    empties += 1
                    if empties > _MAX_EMPTY_TOKENS:
                        raise RuntimeError("too many empty tokens without progressing")
                yield token
                continue
        if at_eof:
            return
        chunk = stream.read(_CHUNK_SIZE)
        if isinstance(chunk, bytes):
            raise TypeError("scan needs a text stream, not a binary one")
        if chunk:
            buffer += chunk
        else:
            at_eof = True


def _combine(processors: tuple[Processor, ...]) -> Callable[[Optional[str]], Optional[str]]:
    def run(token: Optional[str]) -> Optional[str]:
        for process in processors:
            if token is None:
                break
            token = process(token)
        return token

    return run


def rune_sep_func(sep: str, *args: Processor) -> Splitter:
    """A splitter on the character ``sep``; tokens pass through ``args`` in turn.

    The text after the last separator is a token too. A processor returning
    None drops the token.
    """
    process = _combine(args)
    split = eof_sep_func(rune_sep(sep))

    def splitter(data: str, at_eof: bool) -> tuple[int, Optional[str]]:
        advance, token = split(data, at_eof)
        return advance, process(token)

    return splitter


def rune_sep(sep: str) -> Separator:
    """A separator finding the text before the first ``sep`` character."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")

    def separator(data: str) -> tuple[int, Optional[str]]:
        at = data.find(sep)
        if at < 0:
            return 0, None
        return at + 1, data[:at]

    return separator


def eof_sep_func(separator: Separator) -> Splitter:
    """A splitter using ``separator``, taking all remaining text as a token at the end."""

    def splitter(data: str, at_eof: bool) -> tuple[int, Optional[str]]:
        if not at_eof:
            return separator(data)
        return len(data), data or None

    return splitter


def trim(data: str) -> str:
    """``data`` without leading or trailing white space."""
    return data.strip(_SPACE)


def trim_left(data: str) -> str:
    """``data`` without leading white space."""
    return data.lstrip(_SPACE)


def trim_right(data: str) -> str:
    """``data`` without trailing white space."""
    return data.rstrip(_SPACE)


def _cut_suffix(data: str, suffix: str) -> tuple[str, bool]:
    if data.endswith(suffix):
        return data[: len(data) - len(suffix)], True
    return data, False


def cut_suffix(suffix: str) -> Processor:
    """A processor removing ``suffix`` from the end of a token when present."""
    return replace_if(suffix, _cut_suffix)


def replace_if(text: str, op: Callable[[str, str], "tuple[str, bool]"]) -> Processor:
    """A processor using ``op(token, text)``'s result when it reports success."""

    def process(data: str) -> str:
        result, ok = op(data, text)
        return result if ok else data

    return process


def match_string(text: str, op: Callable[[str, str], bool]) -> Processor:
    """A processor dropping tokens for which ``op(token, text)`` is true."""

    def process(data: str) -> Optional[str]:
        return None if op(data, text) else data

    return process


def before_string(text: str) -> Processor:
    """A processor keeping only what comes before the first ``text``."""

    def process(data: str) -> str:
        at = data.find(text)
        return data[:at] if at >= 0 else data

    return process


def after_string(text: str) -> Processor:
    """A processor keeping only what comes after the first ``text``."""

    def process(data: str) -> str:
        at = data.find(text)
        return data[at + len(text):] if at >= 0 else data

    return process


LINES_UNIVERSAL: Splitter = rune_sep_func("\n", cut_suffix("\r"), before_string(COMMENT))
"""Lines without a trailing carriage return or ``//`` comments."""

LINES: Splitter = rune_sep_func("\n", before_string(COMMENT))
"""Lines without ``//`` comments."""
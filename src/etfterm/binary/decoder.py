"""Recursive decoder for the external term format.

A buffer is the version marker (131) followed by exactly one term.  Each
term starts with a one-byte tag; :data:`TERM_READERS` maps every supported
tag to the function that reads the rest of it.  Composite readers call back
into :meth:`TermDecoder.decode_term` for their elements, so a failure at any
depth aborts the whole parse.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from etfterm.errors import FormatError, Reason
from etfterm.models.options import DecoderOptions
from etfterm.models.term import (
    Float64,
    MapEntry,
    Mapping,
    Sequence,
    SignedInt32,
    Term,
    Text,
    UnsignedInt,
)

from .codecs.bytecursor import Cursor
from .codecs.tags import VERSION, Tag

logger = logging.getLogger(__name__)


class TermDecoder:
    """Single-use decoder: construct with a buffer, call :meth:`parse` once."""

    def __init__(self, data: bytes | bytearray | memoryview, options: Optional[DecoderOptions] = None):
        self.cur = Cursor(data)
        self.options = options or DecoderOptions()
        self._depth = 0
        self._parsed = False

    @property
    def consumed(self) -> int:
        return self.cur.tell()

    def parse(self) -> Term:
        if self._parsed:
            raise RuntimeError("TermDecoder.parse() may only be called once per instance")
        self._parsed = True

        version = self.cur.u8()
        if version != VERSION:
            raise FormatError(
                Reason.UNSUPPORTED_VERSION,
                f"unsupported version {version}, expected {VERSION}",
                version=version, offset=0,
            )
        logger.debug("version %d accepted, %d byte(s) of term data", version, self.cur.remaining())
        term = self.decode_term()
        if self.cur.remaining():
            logger.debug("ignoring %d trailing byte(s) after top-level term", self.cur.remaining())
        return term

    def decode_term(self) -> Term:
        start = self.cur.tell()
        tag = self.cur.u8()
        reader = TERM_READERS.get(tag)
        if reader is None:
            raise FormatError(
                Reason.UNSUPPORTED_TERM_TAG,
                f"unsupported term type {tag} at offset {start}",
                tag=tag, offset=start,
            )
        return reader(self)

    # -- helpers shared by the term readers --

    def read_text(self, n: int) -> Text:
        start = self.cur.tell()
        raw = self.cur.take(n)
        try:
            return Text(value=raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise FormatError(
                Reason.INVALID_UTF8,
                f"invalid UTF-8 at offset {start + e.start}",
                offset=start + e.start,
            ) from e

    def read_elements(self, count: int) -> List[Term]:
        # every term is at least its tag byte
        self.cur.require(count)
        self._enter()
        out: List[Term] = []
        for _ in range(count):
            out.append(self.decode_term())
        self._depth -= 1
        return out

    def read_pairs(self, count: int) -> List[Tuple[Term, Term]]:
        """Key/value terms in wire order.  Keys that decode to equal values
        (say 1 from SMALL_INTEGER and 1 from INTEGER) are one key: it keeps
        its first term and position and takes the last value."""
        self.cur.require(2 * count)
        self._enter()
        pairs: Dict[Any, Tuple[Term, Term]] = {}
        for _ in range(count):
            key = self.decode_term()
            value = self.decode_term()
            ident = key.match_key()
            first = pairs.get(ident)
            pairs[ident] = (first[0] if first else key, value)
        self._depth -= 1
        return list(pairs.values())

    def _enter(self) -> None:
        limit = self.options.max_depth
        if limit is not None and self._depth >= limit:
            raise FormatError(
                Reason.NESTING_TOO_DEEP,
                f"nesting deeper than {limit} at offset {self.cur.tell()}",
                offset=self.cur.tell(), depth=self._depth + 1,
            )
        self._depth += 1


# -- term readers (cursor sits just past the tag) --

def _small_integer(d: TermDecoder) -> Term:
    return UnsignedInt(value=d.cur.u8())

def _integer(d: TermDecoder) -> Term:
    if d.options.signed_int32:
        return SignedInt32(value=d.cur.s32())
    return UnsignedInt(value=d.cur.u32())

def _new_float(d: TermDecoder) -> Term:
    return Float64(value=d.cur.f64())

def _short_text(d: TermDecoder) -> Term:
    # ATOM_EXT and STRING_EXT: u16 length
    return d.read_text(d.cur.u16())

def _binary(d: TermDecoder) -> Term:
    return d.read_text(d.cur.u32())

def _list(d: TermDecoder) -> Term:
    n = d.cur.u32()
    # N elements plus the tail byte
    d.cur.require(n + 1)
    items = d.read_elements(n)
    d.cur.u8()  # tail, normally NIL_EXT; discarded whatever it is
    return Sequence(items=tuple(items))

def _nil(d: TermDecoder) -> Term:
    if d.options.nil_as_sequence:
        return Sequence()
    return Mapping()

def _small_tuple(d: TermDecoder) -> Term:
    return Sequence(items=tuple(d.read_elements(d.cur.u8())))

def _large_tuple(d: TermDecoder) -> Term:
    return Sequence(items=tuple(d.read_elements(d.cur.u32())))

def _map(d: TermDecoder) -> Term:
    n = d.cur.u32()
    pairs = d.read_pairs(n)
    return Mapping(entries=tuple(MapEntry(key=k, value=v) for k, v in pairs))


TERM_READERS: Dict[int, Callable[[TermDecoder], Term]] = {
    Tag.SMALL_INTEGER: _small_integer,
    Tag.INTEGER: _integer,
    Tag.NEW_FLOAT: _new_float,
    Tag.ATOM: _short_text,
    Tag.STRING: _short_text,
    Tag.BINARY: _binary,
    Tag.LIST: _list,
    Tag.NIL: _nil,
    Tag.SMALL_TUPLE: _small_tuple,
    Tag.LARGE_TUPLE: _large_tuple,
    Tag.MAP: _map,
}

"""etfterm: Erlang external term format decoder.

    >>> from etfterm import decode
    >>> decode(bytes([131, 97, 42]))
    42

Decoding produces a typed :data:`~etfterm.models.term.Term` tree
(:func:`decode_term`), or plain Python values (:func:`decode`).  Malformed
input of any kind raises :class:`FormatError`.
"""

from __future__ import annotations

from .binary.decoder import TermDecoder
from .binary.reader import decode, decode_base64, decode_term, load_bytes
from .errors import FormatError, Reason
from .models.options import DecoderOptions
from .models.term import (
    Float64,
    MapEntry,
    Mapping,
    Sequence,
    SignedInt32,
    Term,
    Text,
    UnsignedInt,
)

__version__ = "0.1.0"

__all__ = [
    "TermDecoder",
    "decode",
    "decode_term",
    "decode_base64",
    "load_bytes",
    "DecoderOptions",
    "FormatError",
    "Reason",
    "Term",
    "UnsignedInt",
    "SignedInt32",
    "Float64",
    "Text",
    "Sequence",
    "Mapping",
    "MapEntry",
]

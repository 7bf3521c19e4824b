from __future__ import annotations

import base64
import binascii
import logging
from pathlib import Path
from typing import Any, Optional, Union

from etfterm.errors import FormatError, Reason
from etfterm.models.options import DecoderOptions
from etfterm.models.term import Term

from .decoder import TermDecoder

BytesLike = Union[str, Path, bytes, bytearray, memoryview]

logger = logging.getLogger(__name__)


def load_bytes(inp: BytesLike) -> bytes:
    """Raw buffers pass through; ``str``/``Path`` name a file to read."""
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    return Path(str(inp)).read_bytes()


def decode_term(data: BytesLike, options: Optional[DecoderOptions] = None) -> Term:
    """Decode one encoded buffer (or file) into a typed :data:`Term`."""
    return TermDecoder(load_bytes(data), options).parse()


def decode(data: BytesLike, options: Optional[DecoderOptions] = None) -> Any:
    """Decode into plain Python values (int, float, str, list, dict)."""
    return decode_term(data, options).to_python()


def decode_base64(text: str | bytes, options: Optional[DecoderOptions] = None) -> Term:
    """
    Decode a base64 transport envelope, then the term inside it.
    Whitespace (line breaks in a pasted or wrapped payload) is ignored;
    anything else outside the base64 alphabet is rejected.
    """
    compact = "".join(text.split()) if isinstance(text, str) else b"".join(text.split())
    try:
        raw = base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise FormatError(Reason.INVALID_BASE64, f"invalid base64 envelope: {e}") from e
    logger.debug("base64 envelope carries %d byte(s)", len(raw))
    return TermDecoder(raw, options).parse()

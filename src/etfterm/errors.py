"""Decoding errors.

Every failure raised by the decoder is a :class:`FormatError`.  The
``reason`` attribute is one of the :class:`Reason` codes and is what callers
(and tests) should compare against; the message is for humans.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Reason(str, Enum):
    UNSUPPORTED_VERSION = "unsupported-version"
    UNSUPPORTED_TERM_TAG = "unsupported-term-tag"
    TRUNCATED_INPUT = "truncated-input"
    INVALID_UTF8 = "invalid-utf8"
    NESTING_TOO_DEEP = "nesting-too-deep"
    INVALID_BASE64 = "invalid-base64"
    NON_FINITE_FLOAT = "non-finite-float"


class FormatError(ValueError):
    """The buffer is not valid external term format input.

    Context attributes are set only for the reasons that carry them:

    - ``version``: UNSUPPORTED_VERSION
    - ``tag``, ``offset``: UNSUPPORTED_TERM_TAG
    - ``offset``, ``requested``, ``available``: TRUNCATED_INPUT
    - ``offset``: INVALID_UTF8
    - ``offset``, ``depth``: NESTING_TOO_DEEP
    """

    def __init__(
        self,
        reason: Reason,
        msg: str = "",
        *,
        offset: Optional[int] = None,
        tag: Optional[int] = None,
        version: Optional[int] = None,
        requested: Optional[int] = None,
        available: Optional[int] = None,
        depth: Optional[int] = None,
    ) -> None:
        super().__init__(msg or reason.value)
        self.reason = reason
        self.offset = offset
        self.tag = tag
        self.version = version
        self.requested = requested
        self.available = available
        self.depth = depth

    @property
    def code(self) -> str:
        return self.reason.value

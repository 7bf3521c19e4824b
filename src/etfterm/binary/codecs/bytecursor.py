from __future__ import annotations
import struct

from etfterm.errors import FormatError, Reason

class Cursor:
    """Read-only big-endian cursor over a byte buffer.

    Every read checks bounds before consuming anything, so a failed read
    leaves ``pos`` where it was.
    """
    __slots__ = ("buf", "pos")

    def __init__(self, data: bytes | bytearray | memoryview):
        self.buf = memoryview(bytes(data)).toreadonly()
        self.pos = 0

    def remaining(self) -> int: return len(self.buf) - self.pos
    def tell(self) -> int: return self.pos

    def require(self, n: int) -> None:
        if n > self.remaining():
            raise FormatError(
                Reason.TRUNCATED_INPUT,
                f"unexpected end of input: need {n} byte(s) at offset {self.pos}, {self.remaining()} available",
                offset=self.pos, requested=n, available=self.remaining(),
            )

    def take(self, n: int) -> bytes:
        self.require(n)
        end = self.pos + n
        out = self.buf[self.pos:end].tobytes()
        self.pos = end
        return out

    # byte-aligned big-endian reads
    def _unpack(self, fmt: str, n: int):
        return struct.unpack(fmt, self.take(n))[0]
    def u8(self) -> int:  return self._unpack(">B", 1)
    def u16(self) -> int: return self._unpack(">H", 2)
    def u32(self) -> int: return self._unpack(">I", 4)
    def s32(self) -> int: return self._unpack(">i", 4)
    def f64(self) -> float: return self._unpack(">d", 8)

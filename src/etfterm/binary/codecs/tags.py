from __future__ import annotations

VERSION = 131

class Tag:
    NEW_FLOAT = 70
    SMALL_INTEGER = 97
    INTEGER = 98
    ATOM = 100
    SMALL_TUPLE = 104
    LARGE_TUPLE = 105
    NIL = 106
    STRING = 107
    LIST = 108
    BINARY = 109
    MAP = 116

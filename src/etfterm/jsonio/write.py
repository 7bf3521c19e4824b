from __future__ import annotations
import json
from ..errors import FormatError, Reason
from ..models.term import Term

def write_json(term: Term, *, pretty: bool = True) -> str:
    """Render a decoded term as strict JSON; non-text map keys become their compact JSON.
    NaN and infinity have no JSON form and raise FormatError (NON_FINITE_FLOAT)."""
    try:
        if pretty:
            return json.dumps(term.to_jsonable(), ensure_ascii=False, indent=2, allow_nan=False)
        return json.dumps(term.to_jsonable(), ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    except ValueError as e:
        raise FormatError(Reason.NON_FINITE_FLOAT, f"cannot render as JSON: {e}") from e

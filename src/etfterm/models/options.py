from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

class DecoderOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # composite nesting limit; None disables it (trusted input only)
    max_depth: int | None = Field(default=128, ge=1)
    # INTEGER_EXT is read unsigned unless this is set (then two's complement)
    signed_int32: bool = False
    # NIL_EXT decodes to an empty mapping unless this is set
    nil_as_sequence: bool = False

from __future__ import annotations
from enum import Enum

class GestationStage(str, Enum):
    EARLY = "Early"
    MID = "Mid"
    LATE = "Late"
    PRE_FOALING = "Pre-foaling"

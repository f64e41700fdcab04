from __future__ import annotations
from dataclasses import dataclass

# ----------------------------
# Scored receipt (in-memory only)
# ----------------------------
@dataclass(frozen=True)
class StoredReceipt:
    id: str
    points: int

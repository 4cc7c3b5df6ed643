"""
history_event.py

Dataclass für einen Verlaufseintrag (user-visible activity).

• from_row()  – baut das Objekt aus einer DB-Zeile
• as_dict()   – Dict für GUI/Export mit lokaler Zeit
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from core.helpers import date_time_helper as dt


@dataclass
class HistoryEvent:
    id: Optional[int]
    type: str
    message: str
    at: datetime                 # immer UTC
    user: str
    meta: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_row(cls, row: Any) -> "HistoryEvent":
        data = dict(row)
        at = data["at"]
        if isinstance(at, str):
            at = datetime.fromisoformat(at)
        raw_meta = data.get("meta")
        try:
            meta = json.loads(raw_meta) if raw_meta else {}
        except json.JSONDecodeError:
            meta = {"raw": raw_meta}
        return cls(
            id=data.get("id"),
            type=data.get("type", ""),
            message=data.get("message") or "",
            at=dt.to_utc(at),
            user=data.get("user") or "",
            meta=meta if isinstance(meta, dict) else {"value": meta},
        )

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type,
            "message": self.message,
            "at_utc": self.at.isoformat(),
            "at": dt.utc_to_local_str(self.at),
            "user": self.user,
            "meta": dict(self.meta),
        }

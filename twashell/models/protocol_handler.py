# twashell/models/protocol_handler.py
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ProtocolHandler:
    protocol: str             # 'bitcoin', 'web+tea', ... (no '://')
    url: str                  # format with a single '%s', e.g. '?wallet=%s'

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProtocolHandler":
        return cls(protocol=data.get("protocol") or "", url=data.get("url") or "")

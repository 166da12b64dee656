from __future__ import annotations

import dataclasses
import enum


class Module(enum.IntEnum):
    LIGHT = 0
    DARK = 1


class SessionMode(str, enum.Enum):
    LANDING = "landing"
    LISTENING = "listening"
    ENDED = "ended"


@dataclasses.dataclass(frozen=True)
class PackedPayload:
    data: bytes
    payload_length: int  # UTF-8 length of the source text, before truncation
    truncated: bool

    @property
    def dropped(self) -> int:
        return max(0, self.payload_length - len(self.data)) if self.truncated else 0

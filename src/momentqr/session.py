"""Session glue around the encoder: URLs, host mode and the listening countdown."""

from __future__ import annotations

import logging
import math
import time
from datetime import datetime, timezone
from typing import Callable, List, Mapping, Optional
from urllib.parse import quote

from . import config
from .models import SessionMode

logger = logging.getLogger(__name__)

# Characters JavaScript's encodeURIComponent leaves as-is besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def session_url(origin: Optional[str], session_id: str) -> str:
    """Return the join URL for `session_id`, or "" while the origin is unknown."""
    if not origin:
        return ""
    return f"{origin.rstrip('/')}/session/{quote(session_id, safe=_URI_COMPONENT_SAFE)}"


def resolve_session_id(route_id: Optional[str]) -> str:
    return route_id or config.ANCHOR_SESSION_ID


def is_anchor_host(query: Mapping[str, str]) -> bool:
    return query.get("host") == "1"


def log_event(event_name: str, session_id: Optional[str]) -> dict:
    payload = {
        "event_name": event_name,
        "session_id": session_id,
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }
    logger.info("event: %s", payload)
    return payload


class ListeningSession:
    """Landing -> listening -> ended countdown for one session.

    Time comes from `clock` (seconds, monotonic); callers drive the countdown
    with `tick()`. Every transition is logged through `log_event`.
    """

    def __init__(
        self,
        session_id: str,
        duration_ms: int = config.DURATION_MS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.session_id = session_id
        self.duration_ms = duration_ms
        self.clock = clock
        self.mode = SessionMode.LANDING
        self.remaining_ms: float = duration_ms
        self.events: List[dict] = []
        self._started: Optional[float] = None
        self._emit("landing_viewed")

    def _emit(self, name: str) -> None:
        self.events.append(log_event(name, self.session_id))

    def join(self) -> None:
        if self.mode is not SessionMode.LANDING:
            return
        self._emit("join_clicked")
        self.mode = SessionMode.LISTENING
        self._started = self.clock()
        self.remaining_ms = self.duration_ms
        self._emit("listening_started")

    def tick(self) -> float:
        if self.mode is not SessionMode.LISTENING or self._started is None:
            return self.remaining_ms
        elapsed_ms = (self.clock() - self._started) * 1000
        self.remaining_ms = max(0.0, self.duration_ms - elapsed_ms)
        if self.remaining_ms <= 0:
            self._started = None
            self._emit("listening_ended")
            self.mode = SessionMode.ENDED
        return self.remaining_ms

    def leave(self) -> None:
        if self.mode is not SessionMode.LISTENING:
            return
        self._emit("listening_aborted")
        self._started = None
        self.remaining_ms = 0
        self.mode = SessionMode.ENDED

    def close(self) -> None:
        if self.mode is not SessionMode.ENDED:
            return
        self.mode = SessionMode.LANDING
        self.remaining_ms = self.duration_ms

    @property
    def seconds_left(self) -> int:
        return math.ceil(self.remaining_ms / 1000)

    @property
    def progress(self) -> float:
        if self.duration_ms <= 0:
            return 0.0
        return max(0.0, min(1.0, self.remaining_ms / self.duration_ms))

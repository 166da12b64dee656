from __future__ import annotations

import itertools
import logging

from . import config
from .models import PackedPayload

logger = logging.getLogger(__name__)


def well_formed(text: str) -> str:
    """Return `text` with lone surrogates replaced by U+FFFD; paired surrogates are joined."""
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


def to_utf8(text: str) -> bytes:
    return well_formed(text).encode("utf-8")


def pack(text: str, capacity: int = config.CAPACITY) -> bytes:
    """Return `text` as UTF-8, cut to `capacity` bytes and padded with filler."""
    out = bytearray(to_utf8(text)[:capacity])
    for pad in itertools.cycle(config.PAD_BYTES):
        if len(out) >= capacity:
            break
        out.append(pad)
    return bytes(out)


def pack_payload(text: str, capacity: int = config.CAPACITY) -> PackedPayload:
    """Like `pack`, but also report whether the text had to be cut."""
    payload_length = len(to_utf8(text))
    truncated = payload_length > capacity
    if truncated:
        logger.warning(
            "payload of %d bytes exceeds capacity %d; dropping %d bytes",
            payload_length,
            capacity,
            payload_length - capacity,
        )
    return PackedPayload(data=pack(text, capacity), payload_length=payload_length, truncated=truncated)

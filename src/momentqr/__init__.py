"""Compact matrix code encoder and rasterizer for session join links."""

from .config import CAPACITY, SIZE
from .matrix import build, encode
from .models import Module, PackedPayload, SessionMode
from .packer import pack, pack_payload
from .raster import rasterize, reference_matrix, render, to_ascii, write_image
from .session import ListeningSession, is_anchor_host, log_event, resolve_session_id, session_url

__all__ = [
    "CAPACITY",
    "SIZE",
    "Module",
    "PackedPayload",
    "SessionMode",
    "pack",
    "pack_payload",
    "build",
    "encode",
    "rasterize",
    "render",
    "reference_matrix",
    "to_ascii",
    "write_image",
    "ListeningSession",
    "is_anchor_host",
    "log_event",
    "resolve_session_id",
    "session_url",
]

"""FastAPI dependencies for keygate routes."""

from __future__ import annotations

from fastapi import Request

from keygate.identifiers import KeyEncoder
from keygate.store import KeyValueStore


def get_store(request: Request) -> KeyValueStore:
    """Get the key-value store from app state."""
    return request.app.state.store


def get_encoder(request: Request) -> KeyEncoder:
    """Get the key encoder from app state."""
    return request.app.state.encoder

"""Meta endpoints — health, version, record counts."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from keygate.deps import get_store
from keygate.store import KeyValueStore

router = APIRouter(prefix="/api/v1", tags=["meta"])


@router.get("/health")
def health():
    return {"status": "ok", "service": "keygate"}


@router.get("/version")
def version():
    return {"gateway": "0.1.0"}


@router.get("/counts")
def counts(store: KeyValueStore = Depends(get_store)):
    return store.count()

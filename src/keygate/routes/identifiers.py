"""Identifier endpoints — report how an id maps onto a storage key."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from keygate.deps import get_encoder
from keygate.identifiers import KeyEncoder
from keygate.models import IdentifierReport

router = APIRouter(prefix="/api/v1", tags=["identifiers"])


@router.get("/identifiers/{identifier}", response_model=IdentifierReport)
def describe_identifier(identifier: str, encoder: KeyEncoder = Depends(get_encoder)):
    valid = encoder.is_valid(identifier)
    key = encoder.encode_valid(identifier) if valid else None
    return IdentifierReport(id=identifier, valid=valid, key=key)

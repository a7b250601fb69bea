"""Request and response bodies for the gateway."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class NeutronObject(BaseModel):
    """A network, subnet or port as the API caller sees it."""

    id: str = Field(min_length=1)
    name: str = ""
    tenant_id: str | None = None
    admin_state_up: bool = True
    attributes: dict[str, Any] = Field(default_factory=dict)


class NeutronObjectUpdate(BaseModel):
    """Partial update. Fields left unset are not touched."""

    id: str | None = None
    name: str | None = None
    tenant_id: str | None = None
    admin_state_up: bool | None = None
    attributes: dict[str, Any] | None = None


class IdentifierReport(BaseModel):
    id: str
    valid: bool
    key: str | None = None

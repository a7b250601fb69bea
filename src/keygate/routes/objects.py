"""Object endpoints — networks, subnets and ports keyed by storage key.

Every external id is converted to a storage key before the store sees it.
An id without a key is rejected with 400. Failed store statuses are raised
as StatusError and translated by the app's exception handler.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from keygate.deps import get_encoder, get_store
from keygate.identifiers import KeyEncoder
from keygate.models import NeutronObject, NeutronObjectUpdate
from keygate.status import StatusError
from keygate.store import Collection, KeyValueStore

router = APIRouter(prefix="/api/v1", tags=["objects"])


def _require_key(encoder: KeyEncoder, identifier: str, field: str = "id") -> str:
    key = encoder.to_key(identifier)
    if key is None:
        raise HTTPException(status_code=400, detail=f"Invalid {field}: {identifier}")
    return key


@router.post("/{collection}", status_code=201)
def create_object(
    collection: Collection,
    obj: NeutronObject,
    store: KeyValueStore = Depends(get_store),
    encoder: KeyEncoder = Depends(get_encoder),
):
    key = _require_key(encoder, obj.id)
    record = obj.model_dump(mode="json")
    record["key"] = key
    record["tenant_key"] = (
        _require_key(encoder, obj.tenant_id, "tenant_id") if obj.tenant_id is not None else None
    )

    status = store.create(collection, key, record)
    if not status.is_success:
        raise StatusError(status)
    return {"id": obj.id, "key": key}


@router.get("/{collection}")
def list_objects(collection: Collection, store: KeyValueStore = Depends(get_store)):
    return store.list_objects(collection)


@router.get("/{collection}/{object_id}")
def get_object(
    collection: Collection,
    object_id: str,
    store: KeyValueStore = Depends(get_store),
    encoder: KeyEncoder = Depends(get_encoder),
):
    status, record = store.get(collection, _require_key(encoder, object_id))
    if not status.is_success:
        raise StatusError(status)
    return record


@router.put("/{collection}/{object_id}")
def update_object(
    collection: Collection,
    object_id: str,
    changes: NeutronObjectUpdate,
    store: KeyValueStore = Depends(get_store),
    encoder: KeyEncoder = Depends(get_encoder),
):
    key = _require_key(encoder, object_id)
    fields = changes.model_dump(mode="json", exclude_unset=True)
    if fields.get("tenant_id") is not None:
        fields["tenant_key"] = _require_key(encoder, fields["tenant_id"], "tenant_id")
    elif "tenant_id" in fields:
        fields["tenant_key"] = None

    status, record = store.update(collection, key, fields)
    if not status.is_success:
        raise StatusError(status)
    return record


@router.delete("/{collection}/{object_id}", status_code=204)
def delete_object(
    collection: Collection,
    object_id: str,
    store: KeyValueStore = Depends(get_store),
    encoder: KeyEncoder = Depends(get_encoder),
):
    status = store.delete(collection, _require_key(encoder, object_id))
    if not status.is_success:
        raise StatusError(status)
    return Response(status_code=204)

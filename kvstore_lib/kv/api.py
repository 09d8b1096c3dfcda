from typing import Optional
from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse
import logging

from kvstore_lib.services.resolver import resolve_service, resolve_store
from kvstore_lib.store.namespace_store import DEFAULT_NAMESPACE, EntryRef
from .models import DeletePayload, SetPayload

router = APIRouter()
logger = logging.getLogger(__name__)


def respond(status_code: int, **body) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body)


def failure(status_code: int, error: str) -> JSONResponse:
    return respond(status_code, success=False, error=error)


def _namespace_for(request: Request, namespace: Optional[str]) -> str:
    # Omitted and empty namespaces both fall back to the configured default
    if namespace:
        return namespace
    cfg = resolve_service(request, 'config')
    return getattr(cfg, 'default_namespace', None) or DEFAULT_NAMESPACE


@router.post('/')
async def api_set(request: Request, payload: Optional[SetPayload] = Body(default=None)):
    if payload is None or not payload.key or payload.value is None:
        return failure(400, "Missing key or value")
    store = resolve_store(request)
    ref = EntryRef(key=payload.key, namespace=_namespace_for(request, payload.namespace))
    logger.debug("Setting %s/%s", ref.namespace, ref.key)
    result = store.set(ref, payload.value)
    if not result:
        return failure(500, "Failed to set value")
    return respond(200, success=True)


@router.get('/')
async def api_get(request: Request, key: Optional[str] = None, namespace: Optional[str] = None):
    if not key:
        return failure(400, "Missing key")
    store = resolve_store(request)
    ref = EntryRef(key=key, namespace=_namespace_for(request, namespace))
    result = store.get(ref)
    if not result:
        # a missing key is reported the same way as a storage failure
        return failure(500, "Failed to get value")
    return respond(200, success=True, data=result.value)


@router.delete('/')
async def api_delete(request: Request, payload: Optional[DeletePayload] = Body(default=None)):
    if payload is None or not payload.key:
        return failure(400, "Missing key")
    store = resolve_store(request)
    ref = EntryRef(key=payload.key, namespace=_namespace_for(request, payload.namespace))
    logger.debug("Deleting %s/%s", ref.namespace, ref.key)
    result = store.delete(ref)
    if not result:
        return failure(500, "Failed to delete value")
    return respond(200, success=True)

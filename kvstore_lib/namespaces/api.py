from fastapi import APIRouter, Request
import logging

from kvstore_lib.kv.api import failure, respond
from kvstore_lib.services.resolver import resolve_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get('/namespaces')
async def api_list_namespaces(request: Request):
    result = resolve_store(request).namespaces()
    if not result:
        return failure(500, "Failed to list namespaces")
    return respond(200, success=True, data=result.value)


@router.get('/namespaces/{namespace}/keys')
async def api_list_keys(request: Request, namespace: str):
    result = resolve_store(request).keys(namespace)
    if not result:
        return failure(500, "Failed to list keys")
    return respond(200, success=True, data=result.value)


@router.delete('/namespaces/{namespace}')
async def api_destroy_namespace(request: Request, namespace: str):
    logger.info("Destroying namespace %s", namespace)
    result = resolve_store(request).destroy(namespace)
    if not result:
        return failure(500, "Failed to destroy namespace")
    return respond(200, success=True)

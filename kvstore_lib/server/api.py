from fastapi import APIRouter, Request

from kvstore_lib.services.resolver import resolve_store
from .health import get_health

router = APIRouter()


@router.get('/health')
async def api_health(request: Request):
    health = get_health()
    health["storage_backend"] = resolve_store(request).backend.name
    return health

from fastapi import APIRouter

from newsai.api.v1.endpoints import health, routing, settings, tenants


api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(routing.router)
api_router.include_router(settings.router)
api_router.include_router(tenants.router)

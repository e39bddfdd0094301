from fastapi import APIRouter

from netcfg_core.api.api_v1.endpoints import interfaces_api

api_router = APIRouter()

api_router.include_router(
    interfaces_api.router, prefix="/interfaces", tags=["interfaces"]
)

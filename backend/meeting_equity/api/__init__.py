"""HTTP routers."""

from fastapi import APIRouter

from . import configs, equity, health

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(equity.router)
api_router.include_router(configs.router)

# src/recipe_hub/presentation/api/routers/health.py
from fastapi import APIRouter

from ..schemas import HealthOut


def api_create_health_router() -> APIRouter:
    router = APIRouter(tags=["health"])

    @router.get("/health", response_model=HealthOut)
    async def health() -> HealthOut:
        return HealthOut()

    return router

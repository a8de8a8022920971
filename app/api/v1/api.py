"""API v1 router composition."""

from fastapi import APIRouter

from app.api.v1.endpoints import dishes, restaurants

api_router: APIRouter = APIRouter()
api_router.include_router(restaurants.router, prefix="/restaurants", tags=["restaurants"])
api_router.include_router(dishes.router, prefix="/dishes", tags=["dishes"])

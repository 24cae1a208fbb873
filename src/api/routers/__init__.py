"""API sub-routers assembled into a single api_router."""

from fastapi import APIRouter

from src.api.routers.visualization import router as visualization_router

api_router = APIRouter()

api_router.include_router(visualization_router, tags=["visualization"])

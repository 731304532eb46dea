from fastapi import APIRouter

from app.api.routers import policies

api_router = APIRouter()

api_router.include_router(policies.router)

from fastapi import APIRouter

from .signup_route import signup_router

api_v1_router = APIRouter(prefix="/api/v1")

api_v1_router.include_router(signup_router)

"""API routers"""

from fastapi import APIRouter

from .generate import router as generate_router
from .sheets import router as sheets_router

api_router = APIRouter(prefix="/api")

api_router.include_router(generate_router)
api_router.include_router(sheets_router)

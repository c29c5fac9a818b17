"""Central router that includes all sub-routers."""

from fastapi import APIRouter

from app.api.complaints import router as complaints_router
from app.api.admin import router as admin_router
from app.api.status import router as status_router

api_router = APIRouter()
api_router.include_router(complaints_router)
api_router.include_router(admin_router)
api_router.include_router(status_router)

from fastapi import APIRouter

from api.routes.system import router as system_router
from api.routes.translations import router as translations_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(translations_router)

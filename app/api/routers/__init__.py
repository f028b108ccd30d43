from fastapi import APIRouter

from app.api.routers.contact import router as contact_router
from app.api.routers.contact_form import router as contact_form_router
from app.api.routers.info import router as info_router
from app.api.routers.pages import router as pages_router


api_routers = APIRouter(prefix="/api")
api_routers.include_router(contact_router, prefix="/contacts", tags=["contacts"])
api_routers.include_router(info_router, prefix="/info", tags=["info"])

site_routers = APIRouter()
site_routers.include_router(pages_router, tags=["pages"])
site_routers.include_router(contact_form_router, tags=["contact_form"])

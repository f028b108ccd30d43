from fastapi import APIRouter

from app.infrastructure.config.config import APP_CONFIG


router = APIRouter()


@router.get(
    "",
    summary="Project information"
)
async def get_info() -> dict[str, str]:
    return {
        "project": APP_CONFIG.APP_NAME,
        "description": APP_CONFIG.PROJECT_DESCRIPTION,
        "author": APP_CONFIG.PROJECT_AUTHOR,
    }

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.routers import api_routers, site_routers
from app.infrastructure.database.adapters.sqlite_connection import DatabaseConnection
from app.infrastructure.errors.handlers import register_error_handlers
from app.infrastructure.logging.logger import configure_logging, get_logger
from app.infrastructure.middleware import LoggingMiddleware
from app.infrastructure.config.config import APP_CONFIG


configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app):
    logger.info("application_startup", app_name=APP_CONFIG.APP_NAME, debug=APP_CONFIG.DEBUG)

    db_connection = DatabaseConnection()
    try:
        await db_connection.init_db()
    except Exception as exc:
        logger.error("database_init_failed", error=str(exc))
        await db_connection.close()
        raise
    app.state.db_connection = db_connection

    logger.info("database_connected")

    yield

    await db_connection.close()
    logger.info("application_shutdown")


app = FastAPI(
    title=APP_CONFIG.APP_NAME,
    debug=APP_CONFIG.DEBUG,
    lifespan=lifespan
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=APP_CONFIG.CORS_ALLOWED_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(LoggingMiddleware)

register_error_handlers(app)

static_dir = Path(APP_CONFIG.STATIC_DIR)
if not static_dir.exists():
    static_dir.mkdir(parents=True, exist_ok=True)
    logger.info("static_directory_created", path=str(static_dir))

app.mount("/static", StaticFiles(directory=APP_CONFIG.STATIC_DIR), name="static")
logger.info("static_files_mounted", directory=APP_CONFIG.STATIC_DIR)

app.include_router(api_routers)
app.include_router(site_routers)

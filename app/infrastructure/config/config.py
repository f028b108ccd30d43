from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Contacts Server"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ALLOWED_ORIGINS: str = "http://localhost:3000"
    STATIC_DIR: str = "public"

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    PROJECT_DESCRIPTION: str = "Server-side request handling with FastAPI"
    PROJECT_AUTHOR: str = "Our Team"


class DBConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DB_PATH: str = "database.sqlite"
    DB_ECHO: bool = False

    def get_url(self, is_async: bool = True) -> str:
        driver = "sqlite+aiosqlite" if is_async else "sqlite"
        return f"{driver}:///{self.DB_PATH}"


APP_CONFIG = AppConfig()
DB_CONFIG = DBConfig()

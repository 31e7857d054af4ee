from pydantic import model_validator
from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    PROJECT_NAME: str = "Quotes API"
    API_PREFIX: str = ""

    # Database (AsyncPG)
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "password"
    POSTGRES_DB: str = "quotes"
    # Composed from POSTGRES_* unless set explicitly
    DATABASE_URL: Optional[str] = None
    DB_ECHO: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # CORS, empty list disables the middleware
    BACKEND_CORS_ORIGINS: List[str] = []

    # Uvicorn
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    @model_validator(mode="after")
    def assemble_database_url(self) -> "Settings":
        if not self.DATABASE_URL:
            self.DATABASE_URL = (
                f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                f"@{self.POSTGRES_SERVER}/{self.POSTGRES_DB}"
            )
        return self

    class Config:
        env_file = ".env"

settings = Settings()

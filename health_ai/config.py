import os
from pydantic_settings import BaseSettings
from pydantic import Field
from pydantic_settings import SettingsConfigDict
from typing import Optional, List
from functools import lru_cache

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application Settings
    APP_NAME: str = "Health AI API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    DOCS_ENABLED: bool = True

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = int(os.environ.get("PORT", 8000))

    # Database Settings
    DATABASE_URL: str = os.environ.get("DATABASE_URL", "sqlite:///./health_ai.db")

    # CORS Settings (comma-separated strings)
    ALLOWED_ORIGINS: str = os.environ.get("ALLOWED_ORIGINS", "*")
    ALLOWED_METHODS: str = os.environ.get("ALLOWED_METHODS", "GET,POST,PUT,DELETE,OPTIONS")
    ALLOWED_HEADERS: str = os.environ.get("ALLOWED_HEADERS", "Content-Type,Authorization")
    CORS_ALLOW_CREDENTIALS: bool = True

    # File Upload Settings
    MAX_FILE_SIZE: int = 10 * 1024 * 1024  # 10MB
    ALLOWED_IMAGE_TYPES: List[str] = ["image/jpeg", "image/png", "image/webp", "image/gif", "image/bmp", "image/tiff"]
    MAX_REQUEST_SIZE: int = MAX_FILE_SIZE + 1024 * 1024  # multipart overhead
    GZIP_MIN_SIZE: int = 500  # bytes

    # Object storage: "local" or "s3"
    STORAGE_BACKEND: str = os.environ.get("STORAGE_BACKEND", "local")
    UPLOAD_DIR: str = os.environ.get("UPLOAD_DIR", "uploads")
    S3_BUCKET_NAME: str = os.environ.get("S3_BUCKET_NAME", "")
    S3_ENDPOINT_URL: Optional[str] = os.environ.get("S3_ENDPOINT_URL", None)
    AWS_ACCESS_KEY_ID: str = os.environ.get("AWS_ACCESS_KEY_ID", "")
    AWS_SECRET_ACCESS_KEY: str = os.environ.get("AWS_SECRET_ACCESS_KEY", "")
    AWS_REGION: str = os.environ.get("AWS_REGION", "auto")

    # AI Settings: "openai" or "gemini"
    AI_PROVIDER: str = os.environ.get("AI_PROVIDER", "openai")
    OPENAI_API_KEY: str = os.environ.get("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.environ.get("OPENAI_MODEL", "gpt-4o")
    GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")

    # Identity provider (external users service)
    USERS_SERVICE_API_URL: str = os.environ.get("USERS_SERVICE_API_URL", "")
    USERS_SERVICE_API_KEY: str = os.environ.get("USERS_SERVICE_API_KEY", "")
    SESSION_COOKIE_NAME: str = "session_token"
    SESSION_COOKIE_MAX_AGE: int = 60 * 24 * 60 * 60  # 60 days

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def _split_csv(self, value: str) -> List[str]:
        if value is None:
            return []
        value = value.strip()
        if value == "":
            return []
        return [item.strip() for item in value.split(",")]

    @property
    def allowed_origins_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_ORIGINS)

    @property
    def allowed_methods_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_METHODS)

    @property
    def allowed_headers_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_HEADERS)

@lru_cache()
def get_settings() -> Settings:
    s = Settings()
    # CORS_ORIGINS overrides ALLOWED_ORIGINS when set
    cors_env = os.environ.get("CORS_ORIGINS")
    if cors_env:
        s.ALLOWED_ORIGINS = cors_env
    return s

settings: Settings = get_settings()

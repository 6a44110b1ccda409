import os
from dotenv import load_dotenv

load_dotenv()


def _csv(raw: str) -> list[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings:
    PROJECT_NAME: str = "Badgeworks"
    ENV: str = os.getenv("ENV", "development")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./badgeworks.db")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # auth: una sola clave de admin; la cookie va firmada con SECRET_KEY
    ADMIN_KEY: str = os.getenv("ADMIN_KEY", "").strip()
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-me")
    AUTH_COOKIE: str = "admin_auth"
    AUTH_COOKIE_MAX_AGE: int = 60 * 60 * 24 * 7

    # enlaces públicos (share url, imagen og)
    PUBLIC_BASE_URL: str = os.getenv("PUBLIC_BASE_URL", "").rstrip("/")
    CORS_ORIGINS: list[str] = _csv(os.getenv("CORS_ORIGINS", "")) or ["http://localhost:3000"]

    # proveedores de IA (selección explícita)
    TEXT_PROVIDER: str = os.getenv("TEXT_PROVIDER", "openai").strip().lower()
    IMAGE_PROVIDER: str = os.getenv("IMAGE_PROVIDER", "openai").strip().lower()

    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "").strip()
    OPENAI_TEXT_MODEL: str = os.getenv("OPENAI_TEXT_MODEL", "gpt-4o-mini").strip()
    OPENAI_IMAGE_MODEL: str = os.getenv("OPENAI_IMAGE_MODEL", "dall-e-3").strip()

    ANTHROPIC_API_KEY: str = os.getenv("ANTHROPIC_API_KEY", "").strip()
    ANTHROPIC_MODEL: str = os.getenv("ANTHROPIC_MODEL", "claude-3-5-sonnet-20241022").strip()

    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "").strip()
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash").strip()
    GEMINI_IMAGE_MODEL: str = os.getenv("GEMINI_IMAGE_MODEL", "gemini-2.5-flash-image").strip()

    # almacenamiento de imágenes: local | blob
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "local").strip().lower()
    MEDIA_DIR: str = os.getenv("MEDIA_DIR", "")
    BLOB_READ_WRITE_TOKEN: str = os.getenv("BLOB_READ_WRITE_TOKEN", "").strip()
    BLOB_API_URL: str = os.getenv("BLOB_API_URL", "https://blob.vercel-storage.com").rstrip("/")

    @property
    def cookie_secure(self) -> bool:
        return self.ENV == "production"

    def share_url_for(self, permalink: str) -> str:
        return f"{self.PUBLIC_BASE_URL}/a/{permalink}"


settings = Settings()

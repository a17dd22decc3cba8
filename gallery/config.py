import os

from dotenv import load_dotenv


load_dotenv()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return int(value)


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///gallery.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    UPLOAD_FOLDER = os.path.abspath(os.getenv("UPLOAD_FOLDER", "public/uploads"))
    UPLOAD_URL_PREFIX = "/uploads"
    MAX_CONTENT_LENGTH = _env_int("MAX_UPLOAD_BYTES", 10 * 1024 * 1024)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    PORT = _env_int("PORT", 8000)

    # Flask-Cors accepts regex strings alongside plain origins.
    _default_cors_origins = [
        "http://localhost:3000",
        r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    ]
    _cors_origins_raw = os.getenv("CORS_ALLOWED_ORIGINS", "").strip()
    if _cors_origins_raw:
        CORS_ALLOWED_ORIGINS = [
            item.strip() for item in _cors_origins_raw.split(",") if item.strip()
        ]
    else:
        CORS_ALLOWED_ORIGINS = _default_cors_origins

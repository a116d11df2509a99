import os


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "super-secret-key")

    SQLALCHEMY_DATABASE_URI = os.getenv(
        "SQLALCHEMY_DATABASE_URI",
        "sqlite:///librarydesk.db"
    )

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    PORT = int(os.getenv("PORT", "5123"))

    # tabloları açılışta oluştur (migration kullanıyorsan kapat)
    AUTO_CREATE_TABLES = _flag("AUTO_CREATE_TABLES", "1")

    # Open Library ISBN proxy
    OPENLIBRARY_BASE_URL = os.getenv("OPENLIBRARY_BASE_URL", "https://openlibrary.org")
    OPENLIBRARY_COVERS_URL = os.getenv("OPENLIBRARY_COVERS_URL", "https://covers.openlibrary.org")
    BOOK_LOOKUP_TIMEOUT = float(os.getenv("BOOK_LOOKUP_TIMEOUT", "10"))

    # isGood yenileme job'u
    SCHEDULER_ENABLED = _flag("SCHEDULER_ENABLED", "1")
    STATUS_REFRESH_MINUTES = int(os.getenv("STATUS_REFRESH_MINUTES", "60"))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    AUTO_CREATE_TABLES = True
    SCHEDULER_ENABLED = False

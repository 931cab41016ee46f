import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "People Registry")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./people.db")
    DATABASE_ECHO: bool = _as_bool(os.getenv("DATABASE_ECHO", "false"))

    # rendering
    TEMPLATES_DIR: str = os.getenv("TEMPLATES_DIR", os.path.join(BASE_DIR, "templates"))

    # logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "")  # empty means stdout only

settings = Settings()

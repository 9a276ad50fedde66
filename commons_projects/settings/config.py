from functools import lru_cache
from pathlib import Path
import os

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]
ENV_FILE = BASE_DIR / ".env"
APP_CONF = BASE_DIR / "conf" / "application.conf"

load_dotenv(dotenv_path=ENV_FILE, override=False)


def _parse_application_conf(path: Path = APP_CONF) -> dict[str, str]:
    if not path.exists():
        return {}
    expanded = os.path.expandvars(path.read_text(encoding="utf-8"))
    data: dict[str, str] = {}
    for line in expanded.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = (part.strip() for part in line.split("=", 1))
        if not value or "${" in value:
            # unresolved placeholders fall through to env/defaults
            continue
        data[key] = value
    return data


def _application_conf_settings(*_args, **_kwargs) -> dict[str, str]:
    return _parse_application_conf()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    # App
    APP_NAME: str = "commons-projects"
    APP_ENV: str = "local"
    DEBUG: bool = False

    # Projects backend
    BACKEND_BASE_URL: str = "http://127.0.0.1:8000"

    # Wikimedia Commons
    COMMONS_API_URL: str = "https://commons.wikimedia.org/w/api.php"

    HTTP_TIMEOUT: float = 20.0

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Path | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (
            init_settings,
            _application_conf_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()

import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource
from typing_extensions import Self

CONFIG_FILE_ENV = "SEODEX_CONFIG_FILE"
LOG_FILE_ENV = "SEODEX_LOG_FILE"
DATA_DIR_ENV = "SEODEX_DATA_DIR"
DEFAULT_DATA_DIR = "~/.local/share/seodex"

# Third-party loggers that drown out ours at DEBUG/INFO
QUIET_LOGGERS = {
    "asyncio": logging.WARNING,
    "aiosqlite": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "alembic": logging.INFO,
}


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings read from the YAML file named by SEODEX_CONFIG_FILE.

    A missing variable or a missing file contributes nothing.
    """

    def __init__(self, settings_cls: type[BaseSettings]) -> None:
        super().__init__(settings_cls)
        self._data = self._read(os.environ.get(CONFIG_FILE_ENV))

    @staticmethod
    def _read(config_file: str | None) -> dict[str, Any]:
        if not config_file:
            return {}
        path = Path(config_file).expanduser()
        if not path.is_file():
            return {}
        return yaml.safe_load(path.read_text()) or {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


class DatabaseConfig(BaseModel):
    """Database section. Leave url empty to use SQLite under the data directory."""

    url: str = ""
    echo: bool = False


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Log file path, taken from SEODEX_LOG_FILE. None logs to stderr."""
        return os.environ.get(LOG_FILE_ENV)


class SiteConfig(BaseModel):
    """The site the indexables describe."""

    home_url: str = "http://localhost"
    blog_id: int = 1
    author_base: str = "author"


class IndexingConfig(BaseModel):
    """Knobs for building indexables and the taxonomy watcher."""

    public_post_statuses: list[str] = Field(default_factory=lambda: ["publish"])
    cleanup_delay_seconds: int = Field(default=300, ge=0)
    avatar_size: int = Field(default=500, gt=0)


class Config(BaseSettings):
    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()
    site: SiteConfig = SiteConfig()
    indexing: IndexingConfig = IndexingConfig()

    model_config = {
        "env_prefix": "SEODEX_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # SEODEX_SITE__HOME_URL -> site.home_url
    }

    @model_validator(mode="after")
    def derive_database_url(self) -> Self:
        """Fall back to <SEODEX_DATA_DIR>/seodex.db when no database URL is set."""
        if not self.database.url:
            data_dir = Path(os.environ.get(DATA_DIR_ENV, DEFAULT_DATA_DIR)).expanduser()
            self.database = self.database.model_copy(
                update={"url": f"sqlite+aiosqlite:///{data_dir / 'seodex.db'}"}
            )
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Earlier sources win: init kwargs, env, .env, YAML file, secrets
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def _log_handler(config: LoggingConfig) -> logging.Handler:
    if not config.file:
        return logging.StreamHandler(sys.stderr)
    log_path = Path(config.file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(log_path)


def configure_logging(config: LoggingConfig) -> None:
    """Install a single root handler (stderr, or the log file) at the configured level.

    Call once at startup; calling again replaces the previous handler.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)
    for old in list(root_logger.handlers):
        root_logger.removeHandler(old)

    handler = _log_handler(config)
    handler.setLevel(config.level)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.date_format))
    root_logger.addHandler(handler)

    for name, level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s, file=%s", config.level, config.file
    )

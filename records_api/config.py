# records_api/config.py
import os
from dataclasses import dataclass


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Runtime settings. Every field can be overridden with a RECORDS_* environment variable."""

    database_url: str = "sqlite:///database.db"
    sql_echo: bool = False
    log_level: str = "INFO"
    # Only this origin may call /api/customers from a browser; /api/suppliers is open to all.
    customers_allowed_origin: str = "http://localhost:5173"
    host: str = "127.0.0.1"
    port: int = 8080


def get_settings() -> Settings:
    return Settings(
        database_url=os.environ.get("RECORDS_DATABASE_URL", Settings.database_url),
        sql_echo=_env_bool("RECORDS_SQL_ECHO", "False"),
        log_level=os.environ.get("RECORDS_LOG_LEVEL", Settings.log_level).upper(),
        customers_allowed_origin=os.environ.get(
            "RECORDS_CUSTOMERS_ALLOWED_ORIGIN", Settings.customers_allowed_origin
        ),
        host=os.environ.get("RECORDS_HOST", Settings.host),
        port=int(os.environ.get("RECORDS_PORT", str(Settings.port))),
    )

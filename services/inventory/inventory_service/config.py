"""
Configuration for the Inventory service.

All settings come from environment variables. Outside production a local
``.env`` file is loaded first so developers can keep credentials out of the shell.
"""
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy.engine import URL

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_logging_configured = False


def get_env(key: str, fallback: str) -> str:
    """
    Return an environment variable, or ``fallback`` when it is not set.

    A variable that is set to an empty string is returned as-is.
    """
    value = os.environ.get(key)
    if value is None:
        return fallback
    return value


def load_environment() -> bool:
    """
    Load variables from a ``.env`` file unless running in production.

    Returns:
        True if a .env file was found and loaded, False otherwise
    """
    if os.getenv("ENV") == "production":
        return False
    loaded = load_dotenv(os.path.join(os.getcwd(), ".env"))
    if not loaded:
        logger.info("No .env file found")
    return loaded


def build_database_url(
    user: Optional[str] = None,
    password: Optional[str] = None,
    host: Optional[str] = None,
    name: Optional[str] = None,
) -> str:
    """
    Build the SQLAlchemy URL for the MySQL database.

    ``DATABASE_URL`` takes precedence when it is set; otherwise the URL is
    assembled from the DB_* variables. Credentials are escaped, and
    ``DB_HOST`` may carry a ``:port`` suffix.
    """
    override = os.getenv("DATABASE_URL")
    if override:
        return override

    user = user if user is not None else get_env("DB_USER", "root")
    password = password if password is not None else get_env("DB_PASSWORD", "password")
    host = host if host is not None else get_env("DB_HOST", "mysql")
    name = name if name is not None else get_env("DB_NAME", "shopping_list")
    port = None
    if ":" in host:
        host, _, raw_port = host.rpartition(":")
        port = int(raw_port)
    url = URL.create(
        drivername="mysql+pymysql",
        username=user,
        password=password,
        host=host,
        port=port,
        database=name,
    )
    return url.render_as_string(hide_password=False)


def configure_logging(level: Optional[str] = None) -> None:
    """Install a single stdout handler on the root logger (once per process)."""
    global _logging_configured
    if _logging_configured:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel((level or get_env("LOG_LEVEL", "INFO")).upper())
    root.addHandler(handler)
    _logging_configured = True


load_environment()

DATABASE_URL = build_database_url()
PORT = int(get_env("PORT", "8080"))

"""
Application configuration.

Values are read from the environment (a local .env file is loaded first) so
that the same code runs in development, tests and production.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def default_entries_api_url(port):
    """The entries endpoint of this same server when it listens on `port`."""
    return f"http://127.0.0.1:{port}/api/entries"


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config(object):
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-dashboard-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///dashboard.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    PORT = int(os.getenv("PORT", "8050"))

    # CRUD collaborator used by the entry table controller; defaults to this server
    ENTRIES_API_URL = os.getenv("ENTRIES_API_URL", default_entries_api_url(PORT))
    API_TIMEOUT_SEC = float(os.getenv("API_TIMEOUT_SEC", "10"))

    # Outgoing mail for one-time passcodes
    MAIL_SERVER = os.getenv("MAIL_SERVER", "smtp.gmail.com")
    MAIL_PORT = int(os.getenv("MAIL_PORT", "587"))
    MAIL_USERNAME = os.getenv("MAIL_USERNAME", "")
    MAIL_PASSWORD = os.getenv("MAIL_PASSWORD", "")
    MAIL_SENDER = os.getenv("MAIL_SENDER", "Dashboard <no-reply@localhost>")
    MAIL_USE_TLS = _env_bool("MAIL_USE_TLS", True)
    MAIL_SUPPRESS_SEND = _env_bool("MAIL_SUPPRESS_SEND", os.getenv("FLASK_ENV") != "production")

    OTP_TTL_MINUTES = int(os.getenv("OTP_TTL_MINUTES", "10"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    ENTRIES_API_URL = "http://testserver/api/entries"
    MAIL_SUPPRESS_SEND = True

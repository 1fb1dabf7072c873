"""
Configuration management for the Recipe Dashboard.

This module centralizes environment variable loading from the .env file at project root.
It is imported early by the Streamlit entry point (streamlit_app/app.py) so that .env is
loaded before any other code reads environment variables.

In hosted deployments .env will not exist; load_dotenv() is safe to call and will no-op,
and platform environment variables are used instead.

Environment Variables:
- BACKEND_URL: Optional, backend base URL (defaults to http://localhost:1111)
- APP_ID: Required, application identifier sent with every backend request
- BACKEND_API_PATH: Optional, REST prefix appended to BACKEND_URL (defaults to "/api")
- BACKEND_TIMEOUT_SECONDS: Optional, per-request timeout (defaults to 10)
- USER_ENTITY: Optional, authenticable entity slug (defaults to "users")
- RECIPE_ENTITY: Optional, recipe collection slug (defaults to "recipes")
- LOG_LEVEL: Optional, root log level for the app (defaults to "INFO")
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BACKEND_URL = "http://localhost:1111"
DEFAULT_API_PATH = "/api"
DEFAULT_TIMEOUT_SECONDS = 10.0


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    The project root is found by going up from this file's location
    (recipes_client/config.py -> project root). Existing environment variables
    take precedence over values from the file.

    Safe to call multiple times.
    """
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env file on module import
load_env_file()


class BackendConfig:
    """Configuration for the hosted recipe backend."""

    @staticmethod
    def get_backend_url() -> str:
        """
        Get the backend base URL.

        Returns:
            Base URL with trailing slash removed (default: http://localhost:1111)
        """
        return os.getenv("BACKEND_URL", DEFAULT_BACKEND_URL).rstrip("/")

    @staticmethod
    def get_app_id() -> Optional[str]:
        """
        Get the application identifier.

        Returns:
            App id string or None if not set

        Note:
            This does not raise an error - see validate_required_config().
        """
        return os.getenv("APP_ID") or None

    @staticmethod
    def get_api_url() -> str:
        """
        Get the REST API root, e.g. http://localhost:1111/api.
        """
        api_path = os.getenv("BACKEND_API_PATH", DEFAULT_API_PATH).strip("/")
        base_url = BackendConfig.get_backend_url()
        return f"{base_url}/{api_path}" if api_path else base_url

    @staticmethod
    def get_admin_url() -> str:
        """Get the URL of the backend's admin panel."""
        return f"{BackendConfig.get_backend_url()}/admin"

    @staticmethod
    def get_timeout() -> float:
        """
        Get the per-request timeout in seconds.

        Falls back to the default when the variable is unset or not a positive number.
        """
        raw = os.getenv("BACKEND_TIMEOUT_SECONDS")
        if not raw:
            return DEFAULT_TIMEOUT_SECONDS
        try:
            value = float(raw)
        except ValueError:
            return DEFAULT_TIMEOUT_SECONDS
        return value if value > 0 else DEFAULT_TIMEOUT_SECONDS

    @staticmethod
    def get_user_entity() -> str:
        return os.getenv("USER_ENTITY", "users")

    @staticmethod
    def get_recipe_entity() -> str:
        return os.getenv("RECIPE_ENTITY", "recipes")


def get_log_level() -> str:
    """Get the configured log level name (default: INFO)."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def validate_required_config() -> None:
    """
    Validate that all required environment variables are set.

    Raises:
        RuntimeError: If any required configuration is missing
    """
    missing = []

    if not BackendConfig.get_app_id():
        missing.append("APP_ID (application identifier of the hosted backend)")

    if missing:
        raise RuntimeError(
            "Missing required environment variables:\n" +
            "\n".join(f"  - {var}" for var in missing) +
            "\n\nPlease create a .env file at the project root with these variables."
        )

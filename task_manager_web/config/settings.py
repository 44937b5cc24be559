"""
Application settings and configuration
"""

import os
from pathlib import Path
from dotenv import load_dotenv
from task_manager_web.config.constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_PROXY_BASE_URL,
    DEFAULT_PORT,
    MAX_RETRIES,
    REQUEST_TIMEOUT,
)

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


class Settings:
    """Application settings loaded from environment variables"""

    # Proxy server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", str(DEFAULT_PORT)))

    # Task backend
    API_BASE_URL: str = os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL)
    BACKEND_TIMEOUT: float = float(os.getenv("BACKEND_TIMEOUT", str(REQUEST_TIMEOUT)))
    BACKEND_MAX_RETRIES: int = int(os.getenv("BACKEND_MAX_RETRIES", str(MAX_RETRIES)))

    # UI controller
    PROXY_BASE_URL: str = os.getenv("PROXY_BASE_URL", DEFAULT_PROXY_BASE_URL)

    # Application
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_TO_FILE: bool = os.getenv("LOG_TO_FILE", "false").lower() == "true"
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")  # relative to the working directory

    @classmethod
    def validate(cls) -> bool:
        """Validate that URLs and numeric settings are usable"""
        invalid = [
            name for name, url in (
                ("API_BASE_URL", cls.API_BASE_URL),
                ("PROXY_BASE_URL", cls.PROXY_BASE_URL),
            )
            if not url.startswith(("http://", "https://"))
        ]

        if invalid:
            raise ValueError(
                f"Invalid URL in environment variables: {', '.join(invalid)}"
            )

        if cls.BACKEND_MAX_RETRIES < 1:
            raise ValueError("BACKEND_MAX_RETRIES must be at least 1")

        return True


# Global settings instance
settings = Settings()

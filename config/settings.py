"""
Centralized configuration management for the implementor bridge.
Loads environment variables and provides default configurations.
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Settings:
    """Application settings and configuration."""

    # Well-known names shared with the host page
    REGISTER_FUNCTION_NAME: str = os.getenv("REGISTER_FUNCTION_NAME", "register_implementors")
    PENDING_SLOT_NAME: str = os.getenv("PENDING_SLOT_NAME", "pending_implementors")

    # Generated fragment files
    FRAGMENT_ROOT: str = os.getenv("FRAGMENT_ROOT", "target/doc/trait.impl")

    # API server
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")

    @classmethod
    def validate(cls) -> None:
        """Validate that all settings hold usable values."""
        required_settings = [
            ("REGISTER_FUNCTION_NAME", cls.REGISTER_FUNCTION_NAME),
            ("PENDING_SLOT_NAME", cls.PENDING_SLOT_NAME),
        ]

        missing_settings = [name for name, value in required_settings if not value]
        if missing_settings:
            raise ValueError(f"Missing required environment variables: {', '.join(missing_settings)}")

        if cls.LOG_LEVEL.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid LOG_LEVEL: {cls.LOG_LEVEL}")

        if not 0 < cls.API_PORT < 65536:
            raise ValueError(f"Invalid API_PORT: {cls.API_PORT}")

# Global settings instance
settings = Settings()

"""Configuration management for the combat tracker"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

# Bundled with the application: exports are tamper-evident, not secret.
DEFAULT_EXPORT_SECRET_KEY = "combat-tracker-secret-key-v1"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Settings(BaseModel):
    """Application settings"""

    # Export signing
    export_secret_key: str = DEFAULT_EXPORT_SECRET_KEY
    export_file_extension: str = ".ctdata"

    # Logging
    log_level: str = "INFO"

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        # Override with environment variables if present
        self.export_secret_key = os.environ.get(
            'COMBAT_TRACKER_EXPORT_KEY',
            self.export_secret_key
        )
        self.export_file_extension = os.environ.get(
            'COMBAT_TRACKER_FILE_EXTENSION',
            self.export_file_extension
        )
        self.log_level = os.environ.get('COMBAT_TRACKER_LOG_LEVEL', self.log_level)

        if self.export_secret_key == DEFAULT_EXPORT_SECRET_KEY:
            logger.debug("Using bundled export signing key")
        else:
            logger.debug("Using export signing key from environment")


# Create global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance"""
    return settings


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for command line use."""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )

"""
Application configuration loaded from the environment
"""

import os

from dotenv import load_dotenv


load_dotenv()


class Config:
    """Application settings"""

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOGS_DIR: str = os.getenv("LOGS_DIR", "logs")
    LOG_FILE_NAME: str = os.getenv("LOG_FILE_NAME", "ispadmin.log")

    # Billing jobs
    OVERDUE_CHECK_INTERVAL: int = int(os.getenv("OVERDUE_CHECK_INTERVAL", "60"))  # minutes

    # Monitoring
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    SENTRY_DSN: str | None = os.getenv("SENTRY_DSN") or None

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration values

        Returns:
            True if the configuration is usable

        Raises:
            ValueError: If a setting has an invalid value
        """
        if cls.LOG_LEVEL.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"LOG_LEVEL has an unknown value: {cls.LOG_LEVEL}")

        if cls.OVERDUE_CHECK_INTERVAL <= 0:
            raise ValueError("OVERDUE_CHECK_INTERVAL must be a positive number of minutes")

        return True

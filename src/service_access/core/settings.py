# Logging adapter for application-wide logging
from service_access.adapters.logging_adapter import LoggingAdapter

from pydantic import field_validator
from pydantic_settings import BaseSettings
from rich import print

from service_access.core.interfaces.logging import LoggingPort

# using pydantic_settings to manage environment variables
# and do automatic type casting in a central place
class ServiceAccessSettings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore"
    }
    SERVICE_ACCESS_LOG_LEVEL: str = "INFO"
    # Retry attempts after the first one on transient faults
    SERVICE_ACCESS_RETRY: int = 3
    # Fixed delay between attempts, in seconds
    SERVICE_ACCESS_DELAY: float = 2.0
    # Lifetime of in-memory cache entries in seconds; unset keeps entries forever
    SERVICE_ACCESS_CACHE_TTL: float | None = None

    def print_settings(self, logger: LoggingPort):
        """Prints the settings for debugging purposes"""
        logger.info("Service access settings:")
        print(self)

    @field_validator("SERVICE_ACCESS_LOG_LEVEL", mode="before")
    def normalize_log_level(cls, value: str) -> str:
        """Accept lower-case level names from the environment."""
        return str(value).upper().strip()


app_settings = ServiceAccessSettings()

logger = LoggingAdapter("service_access", app_settings.SERVICE_ACCESS_LOG_LEVEL)

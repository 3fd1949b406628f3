"""Configuration models for the service access executor.

Options are consumed once, when the executor is built; the retry policy
derived from them is shared by every call made through that executor.
"""

from pydantic import BaseModel, Field


class ServiceAccessOptions(BaseModel):
    """Retry settings for remote service access.

    Attributes:
        retry: Number of additional attempts after the first failed one
        delay: Fixed wait in seconds between attempts (float for test flexibility)
    """

    retry: int = Field(
        default=3,
        ge=0,
        description="Number of retry attempts after the first attempt on transient faults"
    )

    delay: float = Field(
        default=2.0,
        ge=0,
        description="Fixed wait time in seconds between attempts (no exponential backoff)"
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @classmethod
    def from_app_settings(cls, settings) -> "ServiceAccessOptions":
        """Factory method to construct options from a ServiceAccessSettings instance.

        Args:
            settings: ServiceAccessSettings instance from core.settings

        Returns:
            ServiceAccessOptions with values from app settings
        """
        return cls(
            retry=settings.SERVICE_ACCESS_RETRY,
            delay=settings.SERVICE_ACCESS_DELAY,
        )

"""
Environment-specific configuration settings.

Read once per cold start; handlers and services share the same instance.
"""

from dataclasses import dataclass
import os
from typing import Optional


@dataclass
class Settings:
    """Runtime settings for the ticket lookup functions."""

    # Environment
    environment: str = "dev"
    aws_region: str = "eu-west-2"

    # DynamoDB layout (partition key event_id, sort key ticket_id)
    tickets_table: str = "tickets"
    barcode_index: str = "barcode-index"
    wristband_index: str = "wristband_barcode-index"
    created_at_index: str = "created_at-index"

    # Listing page sizes
    initial_page_size: int = 10
    default_page_size: int = 10
    max_page_size: int = 500

    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        overrides = dict(
            environment=env,
            aws_region=os.environ.get("AWS_REGION", cls.aws_region),
            tickets_table=os.environ.get("TICKETS_TABLE", cls.tickets_table),
            barcode_index=os.environ.get("BARCODE_INDEX", cls.barcode_index),
            wristband_index=os.environ.get("WRISTBAND_INDEX", cls.wristband_index),
            created_at_index=os.environ.get("CREATED_AT_INDEX", cls.created_at_index),
            default_page_size=int(
                os.environ.get("DEFAULT_PAGE_SIZE", cls.default_page_size)
            ),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level).upper(),
        )

        # Production overrides
        if env == "prod":
            overrides["max_page_size"] = int(os.environ.get("MAX_PAGE_SIZE", 1000))
        else:
            overrides["max_page_size"] = int(
                os.environ.get("MAX_PAGE_SIZE", cls.max_page_size)
            )

        return cls(**overrides)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the cached settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_environment()
    return _settings


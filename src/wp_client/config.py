"""wp_client.config

Connection settings for :class:`~wp_client.client.WikiPathwaysClient`.
"""
from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_URL = "https://webservice.wikipathways.org"

_TRUE = {"1", "true", "yes", "on"}


class ClientSettings(BaseModel):
    """Configuration options for the WikiPathways client."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        default=DEFAULT_URL,
        description="Root URL of the WikiPathways webservice",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait for the service before giving up",
    )
    user_agent: str = Field(
        default="wp-client/0.1.0",
        description="User-Agent header sent with every request",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Whether to verify the server's TLS certificate",
    )

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Build settings from ``WIKIPATHWAYS_*`` variables (and a ``.env`` file)."""
        load_dotenv()
        values = {}
        if os.getenv("WIKIPATHWAYS_URL"):
            values["base_url"] = os.environ["WIKIPATHWAYS_URL"]
        if os.getenv("WIKIPATHWAYS_TIMEOUT"):
            values["timeout"] = float(os.environ["WIKIPATHWAYS_TIMEOUT"])
        if os.getenv("WIKIPATHWAYS_USER_AGENT"):
            values["user_agent"] = os.environ["WIKIPATHWAYS_USER_AGENT"]
        if os.getenv("WIKIPATHWAYS_VERIFY_SSL"):
            values["verify_ssl"] = os.environ["WIKIPATHWAYS_VERIFY_SSL"].strip().lower() in _TRUE
        return cls(**values)

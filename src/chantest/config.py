"""Configuration for chantest."""

import threading

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library configuration from environment variables."""

    default_timeout: float = Field(
        0.1,
        ge=0,
        le=threading.TIMEOUT_MAX,
        description="Seconds the package-level helpers wait before failing an expectation",
    )

    model_config = {
        "env_prefix": "CHANTEST_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

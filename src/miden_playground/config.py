# config.py
# Runtime configuration, read from the environment (and .env if present).

import os
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class InitPolicy(str, Enum):
    """When the engine runtime is (re)loaded."""

    ONCE = "once"  # at session start and on reload
    PER_CALL = "per_call"  # before every submission


class PlaygroundConfig(BaseModel):
    engine: str = Field(default="", description="Dotted module path of the execution engine.")
    init_policy: InitPolicy = InitPolicy.ONCE
    log_level: str = Field(default="WARNING", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @classmethod
    def from_env(cls) -> "PlaygroundConfig":
        """Raises pydantic.ValidationError on unrecognised values."""
        return cls(
            engine=os.getenv("PLAYGROUND_ENGINE", "").strip(),
            init_policy=os.getenv("PLAYGROUND_INIT_POLICY", InitPolicy.ONCE.value).strip().lower(),
            log_level=os.getenv("PLAYGROUND_LOG_LEVEL", "WARNING").strip().upper(),
        )

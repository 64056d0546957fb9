"""Runtime settings loaded from WALLFRAME_* environment variables."""

from __future__ import annotations
import os
from pydantic import BaseModel


ENV_PREFIX = "WALLFRAME_"


class Settings(BaseModel):
    log_level: str = "INFO"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    cors_origins: list[str] = ["*"]

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from the environment; unset keys keep defaults."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for field in cls.model_fields:
            raw = env.get(ENV_PREFIX + field.upper())
            if raw is None:
                continue
            if field == "cors_origins":
                values[field] = [o.strip() for o in raw.split(",") if o.strip()]
            else:
                values[field] = raw
        settings = cls(**values)
        if settings.debug:
            settings.log_level = "DEBUG"
        return settings

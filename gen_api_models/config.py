"""Generator settings.

Values come from ``GEN_API_MODELS_*`` environment variables and can be
overridden per run by passing keyword arguments (the CLI does this for the
options given on the command line).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GEN_API_MODELS_", case_sensitive=False)

    # Type names used for responses that declare no schema
    default_success_type: str = Field(default="undefined")
    default_error_type: str = Field(default="Error")

    # Type names the decoder composer maps to the constant / error decoders
    no_content_type: str = Field(default="undefined")
    generic_error_type: str = Field(default="Error")

    strict_interfaces: bool = Field(default=False)
    generate_request_types: bool = Field(default=False)
    generate_response_decoders: bool = Field(default=False)

    log_level: str = Field(default="INFO")

    @property
    def generate_operations(self) -> bool:
        return self.generate_request_types or self.generate_response_decoders


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

from __future__ import annotations

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import ENV_PREFIX

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Defaults for command-line flags (IN_* env vars or .env)."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, env_file=None, extra="ignore")

    parallel: int = Field(default=1)
    shell: bool = Field(default=False)
    verbose: bool = Field(default=False)
    color: bool = Field(default=True)


def get_settings() -> Settings:
    return Settings()

"""
Process configuration. The only input is the GitHub token from the environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

API_BASE_URL = "https://api.github.com"
TOKEN_ENV_VAR = "GITHUB_TOKEN"


class ConfigError(Exception):
  pass


@dataclass(frozen=True)
class Settings:
  token: str
  base_url: str = API_BASE_URL


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
  """Read settings from the environment. Raises ConfigError if the token is missing."""
  env = os.environ if environ is None else environ
  token = env.get(TOKEN_ENV_VAR, "").strip()
  if not token:
    raise ConfigError(f"{TOKEN_ENV_VAR} environment variable is required")
  return Settings(token=token)

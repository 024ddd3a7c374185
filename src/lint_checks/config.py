# src/lint_checks/config.py
from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class ActionSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Provided by the runner
    github_event_name: str
    github_sha: str
    github_repository: str
    github_workspace: str = ""
    github_api_url: str = "https://api.github.com"

    # Provided by the action user (`with: github_token: ...`)
    input_github_token: SecretStr

    # Defaults
    lint_checks_user_agent: str = "lint-checks"
    log_level: str = "INFO"


@lru_cache
def load_settings() -> ActionSettings:
    return ActionSettings()

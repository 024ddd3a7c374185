from pydantic import BaseModel, ConfigDict, SecretStr


class RepositoryContext(BaseModel):
    """Repository and trigger event the action is running for."""

    model_config = ConfigDict(frozen=True)

    workspace: str
    event_name: str
    owner: str
    repository: str | None  # None when GITHUB_REPOSITORY has no "/"
    sha: str
    token: SecretStr

    # Where and as whom the check runs are created
    api_url: str = "https://api.github.com"
    user_agent: str = "lint-checks"

# src/lint_checks/checks/environment.py
import logging
from pydantic import ValidationError
from lint_checks.config import ActionSettings, load_settings
from lint_checks.errors import ConfigurationError
from lint_checks.models.github import RepositoryContext


logger = logging.getLogger(__name__)


def split_repository(identifier: str) -> tuple[str, str | None]:
    """Split "owner/repo" on the first "/" -> (owner, repo or None)."""
    owner, sep, repository = identifier.partition("/")
    return owner, repository if sep else None


def get_github_info(settings: ActionSettings | None = None) -> RepositoryContext:
    """Return information about the repository and the event that triggered the action."""
    if settings is None:
        try:
            settings = load_settings()
        except ValidationError as e:
            missing = [
                str(error["loc"][0]).upper()
                for error in e.errors()
                if error["type"] == "missing"
            ]
            if missing:
                raise ConfigurationError(
                    f"Missing required value(s): {', '.join(missing)}",
                    missing=missing,
                ) from e
            raise ConfigurationError(f"Invalid action configuration: {e}") from e

    owner, repository = split_repository(settings.github_repository)
    if repository is None:
        logger.warning(
            f"GITHUB_REPOSITORY '{settings.github_repository}' is not in 'owner/repo' format"
        )

    return RepositoryContext(
        workspace=settings.github_workspace,
        event_name=settings.github_event_name,
        owner=owner,
        repository=repository,
        sha=settings.github_sha,
        token=settings.input_github_token,
        api_url=settings.github_api_url,
        user_agent=settings.lint_checks_user_agent,
    )

# src/lint_checks/checks/reporter.py
import json
import logging
from dataclasses import dataclass
import httpx
from pydantic import ValidationError
from lint_checks.errors import CheckRunError, TransportError
from lint_checks.models.check import (
    MAX_ANNOTATIONS,
    Annotation,
    CheckConclusion,
    CheckOutput,
    CheckRequestBody,
    CheckRunResponse,
)
from lint_checks.models.github import RepositoryContext
from lint_checks.models.lint import LintResults
from lint_checks.platforms.base import CheckPlatform
from lint_checks.platforms.github import GitHubChecksClient


logger = logging.getLogger(__name__)


@dataclass
class CheckRunCreated:
    """Check run accepted by GitHub."""
    id: int | None
    html_url: str | None
    annotations_count: int


def build_annotations(results: LintResults) -> list[Annotation]:
    """Map results to annotations, notices first, then warnings, then failures."""
    return [
        Annotation(
            path=result.path,
            start_line=result.first_line,
            end_line=result.last_line,
            annotation_level=level,
            message=result.message,
        )
        for level, bucket in results.buckets()
        for result in bucket
    ]


def build_summary(check_name: str, total: int) -> str:
    if total == 0:
        return f"{check_name} found no issue"
    return f"{check_name} found {total} issue{'' if total == 1 else 's'}"


def build_check_body(
    check_name: str,
    context: RepositoryContext,
    results: LintResults,
) -> CheckRequestBody:
    annotations = build_annotations(results)

    # A single request accepts at most MAX_ANNOTATIONS annotations
    if len(annotations) > MAX_ANNOTATIONS:
        logger.info(
            f"There are more than {MAX_ANNOTATIONS} errors/warnings from {check_name}. "
            f"Annotations are created for the first {MAX_ANNOTATIONS} results only."
        )
        annotations = annotations[:MAX_ANNOTATIONS]

    total = results.total
    return CheckRequestBody(
        name=check_name,
        head_sha=context.sha,
        conclusion=CheckConclusion.SUCCESS if total == 0 else CheckConclusion.FAILURE,
        output=CheckOutput(
            title=check_name,
            summary=build_summary(check_name, total),
            annotations=annotations,
        ),
    )


def _default_platform(context: RepositoryContext) -> CheckPlatform:
    return GitHubChecksClient(
        token=context.token.get_secret_value(),
        base_url=context.api_url,
        user_agent=context.user_agent,
    )


async def submit_check(
    check_name: str,
    context: RepositoryContext,
    results: LintResults,
    platform: CheckPlatform | None = None,
) -> CheckRunCreated | TransportError:
    """Create the check run; failures are returned, not raised."""
    body = build_check_body(check_name, context, results)
    platform = platform or _default_platform(context)

    try:
        data = await platform.create_check_run(
            context.owner,
            context.repository,
            body.model_dump(mode="json"),
        )
    except httpx.HTTPStatusError as e:
        return TransportError(message=str(e), status_code=e.response.status_code)
    except (httpx.HTTPError, json.JSONDecodeError) as e:
        return TransportError(message=str(e))

    try:
        created = CheckRunResponse.model_validate(data)
    except ValidationError as e:
        return TransportError(message=f"Unexpected check run response: {e}")

    return CheckRunCreated(
        id=created.id,
        html_url=created.html_url,
        annotations_count=len(body.output.annotations),
    )


async def create_check(
    check_name: str,
    context: RepositoryContext,
    results: LintResults,
    platform: CheckPlatform | None = None,
) -> CheckRunCreated:
    """Create a check run annotating the commit with the linter results.

    Raises:
        CheckRunError: if the GitHub API request fails
    """
    outcome = await submit_check(check_name, context, results, platform)
    if isinstance(outcome, TransportError):
        logger.error(f"Failed to create check run for {check_name}: {outcome.message}")
        raise CheckRunError.from_transport_error(outcome)

    logger.debug(
        f"Created check run '{check_name}' with {outcome.annotations_count} annotations"
    )
    return outcome

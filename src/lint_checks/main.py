# src/lint_checks/main.py
import argparse
import asyncio
import logging
import sys
from pathlib import Path
from pydantic import ValidationError

from lint_checks.checks import create_check, get_github_info
from lint_checks.config import load_settings
from lint_checks.errors import CheckRunError, ConfigurationError
from lint_checks.models.lint import LintResults
from lint_checks.platforms.github import GitHubChecksClient


logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lint-checks",
        description="Create GitHub check runs from linter results.",
    )
    parser.add_argument(
        "--name", dest="names", action="append", required=True,
        help="Check name shown in the check list (repeat once per linter)",
    )
    parser.add_argument(
        "--results", dest="results", action="append", required=True, type=Path,
        help="JSON file with {notices, warnings, failures} (same order as --name)",
    )
    args = parser.parse_args(argv)
    if len(args.names) != len(args.results):
        parser.error("--name and --results must be given the same number of times")
    return args


def load_results(path: Path) -> LintResults:
    """Load linter results from a JSON file."""
    return LintResults.model_validate_json(path.read_text(encoding="utf-8"))


def resolve_log_level(name: str) -> int:
    """Map a LOG_LEVEL name to a logging level, INFO when unknown."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    try:
        log_level = load_settings().log_level
    except ValidationError:
        log_level = "INFO"
    logging.basicConfig(level=resolve_log_level(log_level))


async def run(checks: list[tuple[str, LintResults]]) -> None:
    """Create one check run per (name, results) pair."""
    github = get_github_info()
    platform = GitHubChecksClient(
        token=github.token.get_secret_value(),
        base_url=github.api_url,
        user_agent=github.user_agent,
    )

    logger.info(f"Reporting {len(checks)} check(s) for {github.owner}/{github.repository}@{github.sha}")
    for check_name, results in checks:
        await create_check(check_name, github, results, platform=platform)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    configure_logging()

    try:
        checks = [
            (name, load_results(path)) for name, path in zip(args.names, args.results)
        ]
    except (OSError, ValidationError) as e:
        logger.error(f"Could not read linter results: {e}")
        return 1

    try:
        asyncio.run(run(checks))
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except CheckRunError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

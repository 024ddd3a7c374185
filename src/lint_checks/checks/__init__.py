from .environment import get_github_info, split_repository
from .reporter import (
    CheckRunCreated,
    build_annotations,
    build_check_body,
    build_summary,
    create_check,
    submit_check,
)

__all__ = [
    "get_github_info",
    "split_repository",
    "CheckRunCreated",
    "build_annotations",
    "build_check_body",
    "build_summary",
    "create_check",
    "submit_check",
]

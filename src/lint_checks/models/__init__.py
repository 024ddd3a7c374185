from .check import (
    MAX_ANNOTATIONS,
    Annotation,
    CheckConclusion,
    CheckOutput,
    CheckRequestBody,
    CheckRunResponse,
)
from .github import RepositoryContext
from .lint import AnnotationLevel, LintResult, LintResults

__all__ = [
    "MAX_ANNOTATIONS",
    "Annotation",
    "AnnotationLevel",
    "CheckConclusion",
    "CheckOutput",
    "CheckRequestBody",
    "CheckRunResponse",
    "LintResult",
    "LintResults",
    "RepositoryContext",
]

from collections.abc import Iterator, Sequence
from enum import Enum
from typing import Any
from pydantic import AliasChoices, BaseModel, Field, model_validator


class AnnotationLevel(str, Enum):
    NOTICE = "notice"
    WARNING = "warning"
    FAILURE = "failure"


class LintResult(BaseModel):
    path: str
    first_line: int = Field(validation_alias=AliasChoices("first_line", "firstLine"))
    last_line: int = Field(validation_alias=AliasChoices("last_line", "lastLine"))
    message: str


class LintResults(BaseModel):
    """Linter output grouped by severity: notices, then warnings, then failures."""

    notices: list[LintResult] = Field(default_factory=list)
    warnings: list[LintResult] = Field(default_factory=list)
    failures: list[LintResult] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def accept_positional_buckets(cls, data: Any) -> Any:
        # [notices, warnings, failures] as produced by the linter runners
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise ValueError(f"Expected 3 severity buckets, got {len(data)}")
            notices, warnings, failures = data
            return {"notices": notices, "warnings": warnings, "failures": failures}
        return data

    @classmethod
    def from_buckets(cls, buckets: Sequence[Sequence[Any]]) -> "LintResults":
        return cls.model_validate(list(buckets))

    def buckets(self) -> Iterator[tuple[AnnotationLevel, list[LintResult]]]:
        yield AnnotationLevel.NOTICE, self.notices
        yield AnnotationLevel.WARNING, self.warnings
        yield AnnotationLevel.FAILURE, self.failures

    @property
    def total(self) -> int:
        return len(self.notices) + len(self.warnings) + len(self.failures)

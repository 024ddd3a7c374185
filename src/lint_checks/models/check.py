from enum import Enum
from pydantic import BaseModel, Field
from .lint import AnnotationLevel


# Maximum number of annotations accepted by a single Checks API request
MAX_ANNOTATIONS = 50


class CheckConclusion(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class Annotation(BaseModel):
    path: str
    start_line: int
    end_line: int
    annotation_level: AnnotationLevel
    message: str


class CheckOutput(BaseModel):
    title: str
    summary: str
    annotations: list[Annotation] = Field(default_factory=list, max_length=MAX_ANNOTATIONS)


class CheckRequestBody(BaseModel):
    name: str
    head_sha: str
    conclusion: CheckConclusion
    output: CheckOutput


class CheckRunResponse(BaseModel):
    """Fields of the created check run used by lint-checks."""

    id: int | None = None
    html_url: str | None = None

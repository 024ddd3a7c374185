# tests/unit/test_models.py
import pytest
from pydantic import ValidationError
from lint_checks.models import AnnotationLevel, LintResult, LintResults, RepositoryContext


def test_lint_result_accepts_camel_case():
    result = LintResult.model_validate(
        {"path": "a.js", "firstLine": 3, "lastLine": 4, "message": "semi"}
    )
    assert result.first_line == 3
    assert result.last_line == 4


def test_lint_results_defaults():
    results = LintResults()
    assert results.total == 0
    assert [level for level, _ in results.buckets()] == [
        AnnotationLevel.NOTICE,
        AnnotationLevel.WARNING,
        AnnotationLevel.FAILURE,
    ]


def test_lint_results_from_buckets():
    item = {"path": "a.js", "first_line": 1, "last_line": 1, "message": "x"}
    results = LintResults.from_buckets([[item], [], [item, item]])

    assert len(results.notices) == 1
    assert results.warnings == []
    assert len(results.failures) == 2
    assert results.total == 3


def test_lint_results_rejects_wrong_bucket_count():
    with pytest.raises(ValidationError):
        LintResults.from_buckets([[], []])


def test_lint_results_from_json_array():
    results = LintResults.model_validate_json(
        '[[], [{"path": "a.js", "firstLine": 1, "lastLine": 2, "message": "x"}], []]'
    )
    assert results.warnings[0].last_line == 2


def test_repository_context_is_frozen():
    context = RepositoryContext(
        workspace="",
        event_name="push",
        owner="octo",
        repository="hello",
        sha="abc",
        token="t",
    )
    with pytest.raises(ValidationError):
        context.sha = "def"

# tests/unit/test_platforms_base.py
import pytest
from lint_checks.platforms.base import CheckPlatform


@pytest.mark.unit
def test_platform_is_abstract():
    with pytest.raises(TypeError):
        CheckPlatform()

# tests/integration/conftest.py
import pytest


def pytest_collection_modifyitems(items):
    """Mark every test collected under tests/integration as 'integration'."""
    for item in items:
        if "integration" in item.path.parts:
            item.add_marker(pytest.mark.integration)

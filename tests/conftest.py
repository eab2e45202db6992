"""Общие фикстуры тестов apfloat."""

import pytest

from apfloat.core.context import reset_context


@pytest.fixture(autouse=True)
def default_context():
    """Каждый тест начинается и заканчивается с default-контекстом."""
    reset_context()
    yield
    reset_context()

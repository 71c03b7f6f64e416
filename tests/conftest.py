"""
Pytest configuration and shared fixtures for flux-minimal tests.

This module provides:
- Recorder fixture that collects callback arguments in call order
- Store/actions fixtures for the common "one declared action" setup
"""

from typing import Any

import pytest

from flux_minimal import Actions, DataStore


class Recorder:
    """Callable that records every argument it is called with."""

    def __init__(self) -> None:
        self.calls: list[Any] = []

    def __call__(self, value: Any = None) -> None:
        self.calls.append(value)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def store() -> DataStore:
    return DataStore({"something": "nothing"})


@pytest.fixture
def actions() -> Actions:
    return Actions({"my_action": None, "another_action": None})

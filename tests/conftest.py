"""Shared pytest fixtures for prqlbind unit and integration tests."""
from __future__ import annotations

import pytest

from prqlbind.compile.facade import Invoker
from prqlbind.compile.registry import BackendFactory
from tests.fixtures import FAKE_BACKEND, FakeBackend

BackendFactory.register_class(FAKE_BACKEND, FakeBackend)


@pytest.fixture()
def backend() -> FakeBackend:
    """A fresh fake backend per test."""
    return FakeBackend()


@pytest.fixture()
def invoker(backend: FakeBackend) -> Invoker:
    return Invoker(backend)

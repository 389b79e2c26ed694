"""Shared pytest fixtures for chainQL unit and integration tests."""
from __future__ import annotations

import pytest

from chainql.schema.model import Model
from tests.fixtures import users_model


@pytest.fixture()
def users() -> Model:
    """``users`` table with no explicit field list."""
    return users_model()


@pytest.fixture()
def users_with_fields() -> Model:
    """``users`` table declaring ``id`` and ``name``."""
    return users_model("id", "name")

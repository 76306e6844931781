"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from hydra_curve.api.main import app
from hydra_curve.curve import CurveConfig, stable_config, standard_config, volatile_config


@pytest.fixture
def stable() -> CurveConfig:
    """The stable-pair preset."""
    return stable_config()


@pytest.fixture
def standard() -> CurveConfig:
    """The general-purpose preset."""
    return standard_config()


@pytest.fixture
def volatile() -> CurveConfig:
    """The volatile-pair preset."""
    return volatile_config()


@pytest.fixture(params=["stable", "standard", "volatile"])
def any_preset(request: pytest.FixtureRequest) -> CurveConfig:
    """Each named preset in turn."""
    return {
        "stable": stable_config,
        "standard": standard_config,
        "volatile": volatile_config,
    }[request.param]()


@pytest.fixture
def client():
    """Create a test client for the API."""
    yield TestClient(app)
    app.dependency_overrides.clear()

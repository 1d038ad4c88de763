"""Smoke tests for package imports."""

import importlib

import pytest


pytestmark = pytest.mark.smoke

MODULES = [
    "consumer_config",
    "consumer_config.connection",
    "consumer_config.contracts",
    "consumer_config.decoder",
    "consumer_config.errors",
    "consumer_config.loader",
    "consumer_config.log_files",
    "consumer_config.reader",
    "consumer_config.settings",
    "consumer_config.topology",
]


@pytest.mark.parametrize("module_name", MODULES)
def test_module_imports(module_name: str) -> None:
    """Each public module imports without side effects failing."""
    assert importlib.import_module(module_name) is not None


def test_public_api_is_exported() -> None:
    """Names listed in ``__all__`` resolve on the package."""
    package = importlib.import_module("consumer_config")

    missing = [name for name in package.__all__ if not hasattr(package, name)]

    assert missing == []

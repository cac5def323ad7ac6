"""
Shared fixtures: a fresh level registry, a recording binding and a factory
wired to both. The process-wide default factory is rebuilt around every test.
"""

import pytest

from slf4py import factory as factory_module
from slf4py.bindings import BindingRegistry
from slf4py.configuration import LoggerConfiguration
from slf4py.factory import LoggerFactory
from slf4py.testing import RecordingBinding


@pytest.fixture(autouse=True)
def reset_default_factory():
    """Each test starts with no process-wide factory."""
    factory_module.set_default_factory(None)
    yield
    factory_module.set_default_factory(None)


@pytest.fixture
def configuration() -> LoggerConfiguration:
    return LoggerConfiguration()


@pytest.fixture
def binding() -> RecordingBinding:
    return RecordingBinding(vendor="recording", version="1.0.0")


@pytest.fixture
def factory(binding, configuration) -> LoggerFactory:
    return LoggerFactory(BindingRegistry([binding]), configuration)

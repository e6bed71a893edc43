import pytest

from suitekit import Logger, SuiteRegistry


@pytest.fixture
def registry():
    return SuiteRegistry()


@pytest.fixture
def calls():
    """Records the order in which fixture lifecycle steps happen"""
    return []


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    Logger.set_verbose(False)

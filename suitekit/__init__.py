"""
suitekit
Registration and discovery of fixture-based test suites
"""

from .core.errors import (
    DuplicateRegistration,
    DuplicateTestName,
    InvalidArgument,
    SuiteKitError,
    TeardownFailure,
)
from .core.execution import TestFunction
from .core.registry import (
    SuiteRegistry,
    add_test,
    default_registry,
    get_test_suites,
    register_test_suite,
)
from .core.result import TestResult, TestState
from .core.utils import Logger
from .discovery.test_functions import (
    full_test_name,
    get_all_test_functions,
    get_test_functions,
)

__version__ = "0.1.0"

__all__ = [
    "SuiteRegistry",
    "TestFunction",
    "TestResult",
    "TestState",
    "Logger",
    # Errors
    "SuiteKitError",
    "InvalidArgument",
    "DuplicateRegistration",
    "DuplicateTestName",
    "TeardownFailure",
    # Registration and discovery
    "default_registry",
    "register_test_suite",
    "add_test",
    "get_test_suites",
    "get_test_functions",
    "get_all_test_functions",
    "full_test_name",
]

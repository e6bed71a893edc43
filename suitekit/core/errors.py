"""
Exceptions raised while registering, discovering and running test suites
"""


class SuiteKitError(Exception):
    """Base class for all errors raised by suitekit itself"""


class InvalidArgument(SuiteKitError, TypeError):
    """Raised when a registration call receives something it cannot use"""


class DuplicateRegistration(SuiteKitError, ValueError):
    """Raised when the same fixture class is registered twice"""

    def __init__(self, fixture):
        self.fixture = fixture
        super().__init__(
            f"Test suite already registered: {getattr(fixture, '__name__', '')}"
        )


class DuplicateTestName(SuiteKitError, ValueError):
    """Raised when add_test() would shadow an existing test of the fixture"""

    def __init__(self, test_name: str):
        self.test_name = test_name
        super().__init__(f"Test already defined: {test_name}")


class TeardownFailure(SuiteKitError):
    """
    Raised when tearDown fails after a test that itself passed.

    When the test failed too, the test's own exception is re-raised instead and
    this error is only attached to it as a note.
    """

    def __init__(self, test_name: str, error: BaseException):
        self.test_name = test_name
        self.error = error
        super().__init__(f"tearDown failed for {test_name}: {error!r}")

"""
Executable wrappers that run one fixture test with guaranteed tearDown
"""

from typing import Callable, Optional

from .conventions import TEAR_DOWN_NAME
from .errors import TeardownFailure
from .result import TestResult, TestState


class TestFunction:
    """
    Zero-argument callable bound to one (fixture, test name) pair.

    Each call constructs a fresh fixture instance, runs the test against it and
    then runs the instance's tearDown hook, if any, whatever the test did.
    """

    __test__ = False

    def __init__(
        self,
        fixture: type,
        name: str,
        full_name: str,
        body: Optional[Callable[[object], None]] = None,
    ):
        self.fixture = fixture
        self.name = name
        self.full_name = full_name
        # Tests attached with add_test() receive the instance explicitly;
        # declared methods are looked up on the instance by name.
        self._body = body

    def __call__(self):
        result = self._execute(TestResult(self.full_name))
        if result.error is not None:
            raise result.error
        if result.teardown_error is not None:
            raise TeardownFailure(
                self.full_name, result.teardown_error
            ) from result.teardown_error

    def run(self) -> TestResult:
        """Run the test and return its result instead of raising"""
        return self._execute(TestResult(self.full_name))

    def _execute(self, result: TestResult) -> TestResult:
        result.advance(TestState.CONSTRUCTING)
        try:
            instance = self.fixture()
        except Exception as e:
            result.mark_failure(e)
            return result

        result.advance(TestState.RUNNING)
        try:
            self._invoke(instance)
        except Exception as e:
            result.error = e
        finally:
            result.advance(TestState.TEARING_DOWN)
            self._tear_down(instance, result)

        if result.error is not None or result.teardown_error is not None:
            result.mark_failure()
        else:
            result.mark_success()
        return result

    def _invoke(self, instance):
        if self._body is not None:
            self._body(instance)
        else:
            getattr(instance, self.name)()

    def _tear_down(self, instance, result: TestResult):
        try:
            # Reading the hook can fail too, e.g. through a property getter.
            tear_down = getattr(instance, TEAR_DOWN_NAME, None)
            if callable(tear_down):
                tear_down()
        except Exception as e:
            result.teardown_error = e
            if result.error is not None:
                result.error.add_note(str(TeardownFailure(self.full_name, e)))

    def __repr__(self):
        return f"<TestFunction {self.full_name}>"

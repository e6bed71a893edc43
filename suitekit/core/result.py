"""
Per-invocation record of a single test function run
"""

import time
from enum import Enum
from typing import Optional


class TestState(Enum):
    """Lifecycle of one test function invocation"""

    __test__ = False

    NOT_STARTED = "not_started"
    CONSTRUCTING = "constructing"
    RUNNING = "running"
    TEARING_DOWN = "tearing_down"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (TestState.SUCCEEDED, TestState.FAILED)


class TestResult:
    """Test result container"""

    __test__ = False

    def __init__(self, name: str):
        self.name = name
        self.state = TestState.NOT_STARTED
        self.error: Optional[BaseException] = None
        self.teardown_error: Optional[BaseException] = None
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    def advance(self, state: TestState):
        """Move to the next non-terminal state"""
        if self.start_time is None:
            self.start_time = time.time()
        self.state = state

    def mark_success(self):
        """Mark test as successful"""
        self.state = TestState.SUCCEEDED
        self.end_time = time.time()

    def mark_failure(self, error: Optional[BaseException] = None):
        """Mark test as failed, keeping the first error seen"""
        if self.error is None:
            self.error = error
        self.state = TestState.FAILED
        self.end_time = time.time()

    @property
    def success(self) -> bool:
        return self.state is TestState.SUCCEEDED

    @property
    def error_message(self) -> str:
        failure = self.error or self.teardown_error
        return str(failure) if failure is not None else ""

    def duration(self) -> float:
        """Get test duration in seconds"""
        if self.start_time is None:
            return 0.0
        if self.end_time:
            return self.end_time - self.start_time
        return time.time() - self.start_time

    def __repr__(self):
        return f"<TestResult {self.name} {self.state.value}>"

"""
Process-wide registry of test suite fixtures
"""

import inspect
import threading
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .errors import DuplicateRegistration, DuplicateTestName, InvalidArgument
from .utils import Logger


class SuiteRegistry:
    """Ordered registry of fixture classes, unique by identity"""

    def __init__(self):
        self._suites: List[type] = []
        self._added_tests: Dict[int, Dict[str, Callable]] = {}
        self._lock = threading.Lock()

    def register(self, fixture: type) -> type:
        """
        Register a fixture class to be executed by the test runner

        Any callable declared directly on the class is treated as a test,
        unless its name ends with an underscore or is 'tearDown'.

        Args:
            fixture: The fixture class. It must be instantiable with no arguments.

        Returns:
            The fixture itself, so this can be used as a class decorator
        """
        if not inspect.isclass(fixture):
            raise InvalidArgument(
                f"register_test_suite() requires a class, got {type(fixture).__name__}"
            )

        with self._lock:
            # Compared by identity, never by equality.
            if self._find(fixture) is not None:
                raise DuplicateRegistration(fixture)
            self._suites.append(fixture)

        Logger.verbose(f"Registered test suite: {fixture.__name__}")
        return fixture

    def add_test(self, fixture: type, func: Callable) -> Callable:
        """
        Attach an externally defined function as a test of a registered fixture

        The function's __name__ is used as the test name. Any name is allowed,
        including 'tearDown', 'constructor' and names ending with an underscore.
        The function is called with the fixture instance as its only argument.

        Args:
            fixture: A fixture class previously passed to register()
            func: The test function

        Returns:
            The function itself
        """
        if not callable(func):
            raise InvalidArgument("add_test() requires a callable test function")

        name = getattr(func, "__name__", "")
        if not name:
            raise InvalidArgument("add_test() requires a named test function")

        # Deferred to avoid a circular import with the discovery package.
        from ..discovery.test_functions import declared_test_names, full_test_name

        with self._lock:
            if self._find(fixture) is None:
                raise InvalidArgument(
                    f"Test suite not registered: {getattr(fixture, '__name__', fixture)!r}"
                )

            added = self._added_tests.setdefault(id(fixture), {})
            if name in added or name in declared_test_names(fixture):
                raise DuplicateTestName(full_test_name(fixture, name))
            added[name] = func

        Logger.verbose(f"Added test {full_test_name(fixture, name)}")
        return func

    def added_tests(self, fixture: type) -> Dict[str, Callable]:
        """Get the tests attached to a fixture with add_test(), in order"""
        with self._lock:
            return dict(self._added_tests.get(id(fixture), {}))

    def is_registered(self, fixture) -> bool:
        return self._find(fixture) is not None

    @property
    def test_suites(self) -> Tuple[type, ...]:
        """All registered fixtures in registration order"""
        return tuple(self._suites)

    def _find(self, fixture) -> Optional[int]:
        for index, suite in enumerate(self._suites):
            if suite is fixture:
                return index
        return None

    def __contains__(self, fixture) -> bool:
        return self.is_registered(fixture)

    def __iter__(self) -> Iterator[type]:
        return iter(self.test_suites)

    def __len__(self) -> int:
        return len(self._suites)


default_registry = SuiteRegistry()


def resolve_registry(registry: Optional[SuiteRegistry] = None) -> SuiteRegistry:
    """Get the given registry, or the process-wide one when None"""
    return default_registry if registry is None else registry


def register_test_suite(fixture: type, registry: Optional[SuiteRegistry] = None) -> type:
    """Register a fixture class with the process-wide registry"""
    return resolve_registry(registry).register(fixture)


def add_test(
    fixture: type, func: Callable, registry: Optional[SuiteRegistry] = None
) -> Callable:
    """Attach a test function to a fixture in the process-wide registry"""
    return resolve_registry(registry).add_test(fixture, func)


def get_test_suites(registry: Optional[SuiteRegistry] = None) -> Tuple[type, ...]:
    """Get all registered fixture classes in registration order"""
    return resolve_registry(registry).test_suites

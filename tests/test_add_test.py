import functools

import pytest

from suitekit import (
    DuplicateTestName,
    InvalidArgument,
    add_test,
    default_registry,
    get_test_functions,
)


def make_fixture(calls):
    class MyFixture:
        def __init__(self):
            self.object_under_test_ = "widget"

        def Declared(self):
            calls.append("Declared")

        def tearDown(self):
            calls.append("tearDown")

    return MyFixture


def test_added_function_becomes_a_test(calls, registry):
    fixture = registry.register(make_fixture(calls))

    def ReturnsWidget(instance):
        calls.append(instance.object_under_test_)

    assert registry.add_test(fixture, ReturnsWidget) is ReturnsWidget

    tests = get_test_functions(fixture, registry)
    assert list(tests) == ["MyFixture.Declared", "MyFixture.ReturnsWidget"]

    tests["MyFixture.ReturnsWidget"]()
    assert calls == ["widget", "tearDown"]


def test_added_tests_bypass_naming_rules(calls, registry):
    fixture = registry.register(make_fixture(calls))

    def tearDown(instance):
        calls.append("tearDown test")

    def helper_(instance):
        pass

    def constructor(instance):
        pass

    for func in (tearDown, helper_, constructor):
        registry.add_test(fixture, func)

    tests = get_test_functions(fixture, registry)
    assert "MyFixture.tearDown" in tests
    assert "MyFixture.helper_" in tests
    assert "MyFixture.constructor" in tests

    tests["MyFixture.tearDown"]()
    assert calls == ["tearDown test", "tearDown"]


def test_added_test_failure_still_tears_down(calls, registry):
    fixture = registry.register(make_fixture(calls))

    def Breaks(instance):
        raise AssertionError("added test failed")

    registry.add_test(fixture, Breaks)
    with pytest.raises(AssertionError, match="added test failed"):
        get_test_functions(fixture, registry)["MyFixture.Breaks"]()
    assert calls == ["tearDown"]


def test_add_test_requires_registered_fixture(calls, registry):
    def Orphan(instance):
        pass

    with pytest.raises(InvalidArgument, match="not registered"):
        registry.add_test(make_fixture(calls), Orphan)


def test_add_test_rejects_non_callables(calls, registry):
    fixture = registry.register(make_fixture(calls))
    with pytest.raises(InvalidArgument):
        registry.add_test(fixture, "Declared")


def test_add_test_rejects_nameless_functions(calls, registry):
    fixture = registry.register(make_fixture(calls))
    nameless = functools.partial(print)
    with pytest.raises(InvalidArgument, match="named"):
        registry.add_test(fixture, nameless)


def test_duplicate_added_name_is_rejected(calls, registry):
    fixture = registry.register(make_fixture(calls))

    def Twice(instance):
        pass

    registry.add_test(fixture, Twice)
    with pytest.raises(DuplicateTestName) as excinfo:
        registry.add_test(fixture, Twice)
    assert excinfo.value.test_name == "MyFixture.Twice"
    assert list(registry.added_tests(fixture)) == ["Twice"]


def test_name_clashing_with_declared_test_is_rejected(calls, registry):
    fixture = registry.register(make_fixture(calls))

    def Declared(instance):
        pass

    with pytest.raises(DuplicateTestName):
        registry.add_test(fixture, Declared)
    assert registry.added_tests(fixture) == {}


def test_added_test_wins_over_later_class_member(calls, registry):
    fixture = registry.register(make_fixture(calls))

    def Late(instance):
        calls.append("added Late")

    registry.add_test(fixture, Late)
    fixture.Late = lambda self: calls.append("member Late")

    get_test_functions(fixture, registry)["MyFixture.Late"]()
    assert calls == ["added Late", "tearDown"]


def test_added_tests_are_per_fixture(calls, registry):
    first = registry.register(make_fixture(calls))
    second = registry.register(make_fixture(calls))

    def OnlyFirst(instance):
        pass

    registry.add_test(first, OnlyFirst)
    assert "MyFixture.OnlyFirst" in get_test_functions(first, registry)
    assert "MyFixture.OnlyFirst" not in get_test_functions(second, registry)


def test_module_level_add_test_uses_given_registry(calls, registry):
    fixture = registry.register(make_fixture(calls))

    def Attached(instance):
        pass

    add_test(fixture, Attached, registry=registry)
    assert "Attached" in registry.added_tests(fixture)
    assert fixture not in default_registry

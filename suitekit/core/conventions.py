"""
Naming conventions test authors rely on when declaring fixtures
"""

# Members whose name ends with this marker are private helpers, never tests.
PRIVATE_SUFFIX = "_"

# Reserved for the per-test cleanup hook.
TEAR_DOWN_NAME = "tearDown"

# Only treated as a test when it does not point back at the fixture itself.
CONSTRUCTOR_NAME = "constructor"

NAME_SEPARATOR = "."


def is_private(name: str) -> bool:
    return name.endswith(PRIVATE_SUFFIX)


def is_reserved(name: str) -> bool:
    return name == TEAR_DOWN_NAME

"""Loading of suites from entry points."""

from importlib.metadata import entry_points

from artifact_check.errors import SuiteNotFoundError
from artifact_check.suites.base import Suite

ENTRY_POINT_GROUP = "artifact_check.suites"


def load_suite(key: str) -> Suite:
    """Load a suite by key.

    Args:
        key: The suite key as registered in pyproject.toml
             (e.g., "environment", "html-structure")

    Returns:
        The suite instance

    Raises:
        SuiteNotFoundError: If no suite with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            suite: Suite = entry.load()
            return suite

    available = sorted(e.name for e in entries)
    raise SuiteNotFoundError(
        f"Suite '{key}' not found. Available suites: {available}"
    )

class MapiTestError(Exception):
    """Harness wiring defect, as opposed to a failing test."""

class AllocationError(MapiTestError):
    """The owning context needed to create a recorder is missing."""

class InvalidArgument(MapiTestError, ValueError):
    """A record operation was given a missing suite, recorder or test name."""

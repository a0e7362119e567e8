"""Per-suite result accounting.

Each suite owns one :class:`StatRecorder`. The driver reports every executed
test through :func:`stat_add_result`; failures keep their names in the order
they were recorded so the final report can list them.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, List

from ..errors import AllocationError, InvalidArgument

log = logging.getLogger(__name__)

@dataclass
class FailureRecord:
    name: str

@dataclass
class StatRecorder:
    success: int = 0
    failure: int = 0
    failure_info: List[FailureRecord] = field(default_factory=list)
    enabled: bool = False

    @property
    def failed_names(self) -> List[str]:
        return [f.name for f in self.failure_info]

    def add(self, name: str, result: bool) -> None:
        """Record one test outcome. An empty ``name`` raises before any change."""
        if not name:
            log.warning("Refusing to record a result without a test name")
            raise InvalidArgument("test name is required")
        if result:
            self.success += 1
        else:
            self.failure += 1
            self.failure_info.append(FailureRecord(name=str(name)))
        self.enabled = True
        log.debug("recorded %s: %s", name, "pass" if result else "fail")

def stat_init(owner: Any) -> StatRecorder:
    """Create a zeroed recorder for ``owner`` (normally the suite)."""
    if owner is None:
        raise AllocationError("no owning context for the statistics recorder")
    return StatRecorder()

def stat_add_result(suite: Any, name: str, result: bool) -> None:
    """Add a test result to the statistics of ``suite``."""
    if suite is None or getattr(suite, "stat", None) is None:
        log.warning("Result for %r has no suite or recorder to go to", name)
        raise InvalidArgument("suite and its statistics recorder are required")
    suite.stat.add(name, result)

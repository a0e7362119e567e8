import logging
from typing import Iterable, Protocol

log = logging.getLogger(__name__)

MT_STAT_TITLE = "FAILED TEST CASES"
MT_SUMMARY_TITLE = "TEST SUMMARY"

class Printer(Protocol):
    def title(self, text: str) -> None: ...
    def title_end(self) -> None: ...
    def failure(self, suite: str, test: str) -> None: ...
    def line(self, text: str) -> None: ...

def stat_dump(suites: Iterable, printer: Printer) -> int:
    """Print failed test cases and the run summary.

    Suites that never recorded a result are left out entirely. Returns the
    number of failing tests, so 0 means every test passed.
    """
    num_passed = 0
    num_failed = 0

    printer.title(MT_STAT_TITLE)
    for suite in suites:
        stat = getattr(suite, "stat", None)
        if stat is None or not stat.enabled:
            continue
        num_passed += stat.success
        num_failed += stat.failure
        for el in stat.failure_info:
            printer.failure(suite.name, el.name)
    printer.title_end()

    printer.title(MT_SUMMARY_TITLE)
    printer.line(f"Number of passing tests: {num_passed}")
    printer.line(f"Number of failing tests: {num_failed}")
    printer.title_end()

    log.info("Run finished: %d passed, %d failed", num_passed, num_failed)
    return num_failed

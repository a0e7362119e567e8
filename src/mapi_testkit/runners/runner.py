from dataclasses import dataclass, field
from typing import List, Callable, Optional, Iterable, Any
import importlib
import logging
from ..errors import InvalidArgument
from ..stats.stat import StatRecorder, stat_init, stat_add_result
from ..stats.dump import Printer, stat_dump

log = logging.getLogger(__name__)

MODULE_TEST_SUCCESS = "[SUCCESS]"
MODULE_TEST_FAILURE = "[FAILURE]"

@dataclass
class TestCase:
    __test__ = False
    name: str
    func: Callable[[Any], Any]
    description: str = ""
    def run(self, ctx: "MapiTest"):
        return self.func(ctx)

class Suite:
    def __init__(self, name: str, description: str = "", online: bool = True):
        if not name:
            raise InvalidArgument("suite name is required")
        self.name = name
        self.description = description
        self.online = online
        self.tests: List[TestCase] = []
        self.stat: StatRecorder = stat_init(self)

    def add_test(self, name: str, func: Callable[[Any], Any], description: str = "") -> TestCase:
        if not name:
            raise InvalidArgument("test name is required")
        if self.find_test(name):
            raise InvalidArgument(f"test {name!r} already registered in suite {self.name!r}")
        tc = TestCase(name, func, description)
        self.tests.append(tc)
        return tc

    def find_test(self, name: str) -> Optional[TestCase]:
        return next((t for t in self.tests if t.name == name), None)

    def __repr__(self) -> str:
        return f"Suite({self.name!r}, tests={len(self.tests)})"

@dataclass
class MapiTest:
    """Run context: the ordered suite registry shared by the driver and the report."""
    no_server: bool = False
    suites: List[Suite] = field(default_factory=list)

    def suite_init(self, name: str, description: str = "", online: bool = True) -> Suite:
        if self.find_suite(name):
            raise InvalidArgument(f"suite {name!r} already registered")
        suite = Suite(name, description, online)
        self.suites.append(suite)
        return suite

    def find_suite(self, name: str) -> Optional[Suite]:
        return next((s for s in self.suites if s.name == name), None)

    def load(self, module: str) -> None:
        # Suite modules expose register(mt) and add their suites to the run.
        mod = importlib.import_module(module)
        register = getattr(mod, "register", None)
        if not callable(register):
            raise InvalidArgument(f"{module} has no register(mt)")
        register(self)

class TestRunner:
    __test__ = False
    def __init__(self, mt: MapiTest, printer: Printer):
        self.mt = mt
        self.printer = printer

    def discover(self, names: Optional[Iterable[str]] = None) -> List[Suite]:
        if names is None:
            return list(self.mt.suites)
        suites = []
        for n in dict.fromkeys(names):
            s = self.mt.find_suite(n)
            if s is None:
                raise InvalidArgument(f"unknown suite {n!r}")
            suites.append(s)
        return suites

    def run_suite(self, suite: Suite) -> None:
        if suite.online and self.mt.no_server:
            log.info("Skipping %s: needs a server", suite.name)
            return
        self.printer.title(f"[MODULE] {suite.name}")
        for tc in suite.tests:
            self.printer.line(f"[TEST] {tc.name}")
            try:
                passed = bool(tc.run(self.mt))
            except Exception as e:
                log.error("%s/%s raised %r", suite.name, tc.name, e)
                passed = False
            stat_add_result(suite, tc.name, passed)
            self.printer.line(f"[RESULT] {tc.name}: {MODULE_TEST_SUCCESS if passed else MODULE_TEST_FAILURE}")
        self.printer.title_end()

    def run(self, names: Optional[Iterable[str]] = None) -> int:
        for suite in self.discover(names):
            self.run_suite(suite)
        return stat_dump(self.mt.suites, self.printer)

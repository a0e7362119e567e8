import xml.etree.ElementTree as ET

from mapi_testkit.reporters.junit import JUnitReporter
from mapi_testkit.runners.runner import MapiTest
from mapi_testkit.stats.stat import stat_add_result


def test_junit_lists_enabled_suites(tmp_path):
    mt = MapiTest()
    messaging = mt.suite_init("Messaging")
    mt.suite_init("Folder")
    stat_add_result(messaging, "CreateMessage", True)
    stat_add_result(messaging, "OpenMessage", False)

    path = tmp_path / "junit.xml"
    JUnitReporter(str(path)).emit(mt.suites)

    root = ET.parse(path).getroot()
    suites = root.findall("testsuite")
    assert [s.get("name") for s in suites] == ["Messaging"]
    assert suites[0].get("tests") is None
    assert suites[0].get("failures") == "1"
    cases = suites[0].findall("testcase")
    assert [c.get("name") for c in cases] == ["OpenMessage"]
    assert cases[0].find("failure") is not None


def test_junit_creates_parent_directory(tmp_path):
    mt = MapiTest()
    stat_add_result(mt.suite_init("Folder"), "CreateFolder", False)

    path = tmp_path / "reports" / "nested" / "junit.xml"
    JUnitReporter(str(path)).emit(mt.suites)

    root = ET.parse(path).getroot()
    assert root.find("testsuite").get("failures") == "1"

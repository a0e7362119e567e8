"""Suite module used by the runner and CLI tests."""


def _ok(mt):
    return True


def _fail(mt):
    return False


def _boom(mt):
    raise RuntimeError("server went away")


def register(mt):
    s = mt.suite_init("Messaging", "Message operations")
    s.add_test("CreateMessage", _ok)
    s.add_test("OpenMessage", _fail)
    s.add_test("SetProps", _ok)
    s.add_test("SubmitMessage", _boom)

    mt.suite_init("Folder", "Folder operations")

    s = mt.suite_init("NoServer", "Offline checks", online=False)
    s.add_test("Lzfu", _ok)

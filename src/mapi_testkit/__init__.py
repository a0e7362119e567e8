# Lightweight package init: resolve exports on first access.
__all__ = ["MapiTest", "Suite", "TestRunner", "StatRecorder", "stat_init", "stat_add_result", "stat_dump"]

def __getattr__(name):
    if name in ("MapiTest", "Suite", "TestRunner"):
        from .runners import runner as _runner
        return getattr(_runner, name)
    if name in ("StatRecorder", "stat_init", "stat_add_result"):
        from .stats import stat as _stat
        return getattr(_stat, name)
    if name == "stat_dump":
        from .stats.dump import stat_dump as _stat_dump
        return _stat_dump
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

from typing import List, Optional
import typer
from .config import load_config, AppConfig
from .errors import MapiTestError
from .logging import setup_logging
from .runners.runner import MapiTest, TestRunner
from .reporters.junit import JUnitReporter
from .reporters.console import ConsoleReporter

app = typer.Typer(add_completion=False, help="MAPI test harness - run suites and report statistics")

@app.callback()
def main():
    pass

@app.command()
def run(
    config: str = typer.Option("mapitest.yaml", "--config", "-c", help="Path to config YAML"),
    module: Optional[List[str]] = typer.Option(None, "--module", "-m", help="Suite module to load (repeatable)"),
    suite: Optional[List[str]] = typer.Option(None, "--suite", "-s", help="Only run this suite (repeatable)"),
    no_server: bool = typer.Option(False, "--no-server", help="Skip suites that need a server"),
    list_suites: bool = typer.Option(False, "--list", help="List suites and tests without running"),
    junit: Optional[str] = typer.Option(None, "--junit", help="Write JUnit XML to this path"),
):
    cfg: AppConfig = load_config(config)
    log = setup_logging(cfg.log_level)
    mt = MapiTest(no_server=no_server or cfg.no_server)
    reporter = ConsoleReporter(line_len=cfg.report.line_len, title_delim=cfg.report.title_delim,
                               end_delim=cfg.report.end_delim)
    runner = TestRunner(mt, reporter)

    try:
        for m in [*cfg.suites, *(module or [])]:
            mt.load(m)
        suites = runner.discover(suite or None)
    except (ImportError, MapiTestError) as e:
        log.error("Cannot set up the run: %s", e)
        raise typer.Exit(code=2)

    if list_suites:
        for s in suites:
            typer.echo(f"{s.name}{'' if s.online else ' (offline)'}")
            for t in s.tests:
                typer.echo(f"  {t.name}")
        raise typer.Exit(code=0)

    failed = runner.run(suite or None)
    junit = junit or cfg.report.junit
    if junit:
        try:
            JUnitReporter(path=junit).emit(mt.suites)
        except OSError as e:
            log.error("Cannot write JUnit report %s: %s", junit, e)
            raise typer.Exit(code=2)
    raise typer.Exit(code=0 if failed == 0 else 1)

import logging
from typing import Optional
from rich.console import Console
from rich.logging import RichHandler

def setup_logging(level: str = "INFO", console: Optional[Console] = None):
    # Logs go to stderr so the statistics report on stdout stays clean.
    handler = RichHandler(console=console or Console(stderr=True), rich_tracebacks=True, show_path=False)
    logging.basicConfig(level=level.upper(), format="%(message)s", datefmt="[%X]", handlers=[handler])
    return logging.getLogger("mapi_testkit")

from rich.console import Console
from rich.logging import RichHandler
import logging

console = Console()


def setup_logger(name: str = "wlm", level: int = logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)]
    )
    return logging.getLogger(name)

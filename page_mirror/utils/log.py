"""
Logging utilities for the page mirror.

Provides colorful CLI logging using the rich library.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn


# Global console instance
console = Console()

# Logger instances cache
_loggers: dict = {}

# Root of the package logger hierarchy
ROOT_LOGGER = "page_mirror"


def setup_logger(
    name: str = ROOT_LOGGER,
    level: int = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up and configure a logger with rich formatting.

    Args:
        name: Logger name
        level: Logging level (default: INFO)
        log_file: Optional file path to write logs

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    console_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    # File handler if specified
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    _loggers[name] = logger
    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """
    Get a component logger.

    Component names are placed under the package logger, so handlers
    installed by setup_logger() apply to all of them.

    Args:
        name: Component name (e.g. 'downloader')

    Returns:
        Logger instance
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)
    return _loggers[name]


def create_progress() -> Progress:
    """
    Create a rich progress bar instance.

    Returns:
        Progress instance bound to the shared console
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True
    )


def print_status(message: str, style: str = "bold blue") -> None:
    """
    Print a styled status message.

    Args:
        message: Message to print
        style: Rich style string
    """
    console.print(message, style=style, markup=False, highlight=False)


def print_error(message: str) -> None:
    """Print an error message."""
    print_status(f"❌ {message}", "bold red")


def print_success(message: str) -> None:
    """Print a success message."""
    print_status(f"✅ {message}", "bold green")


def print_warning(message: str) -> None:
    """Print a warning message."""
    print_status(f"⚠️ {message}", "bold yellow")


def print_info(message: str) -> None:
    """Print an info message."""
    print_status(f"ℹ️ {message}", "bold cyan")

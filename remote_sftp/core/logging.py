"""
Rich-based logging system
"""
import sys
import logging
from typing import Optional
from pathlib import Path

from rich.logging import RichHandler
from rich.console import Console
from rich.traceback import install as install_traceback


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    rich_tracebacks: bool = True,
) -> None:
    """
    Setup Rich logging for the ``remote_sftp`` logger tree.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        rich_tracebacks: Enable rich tracebacks
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    
    package_logger = logging.getLogger("remote_sftp")
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()
    
    if rich_tracebacks:
        install_traceback(width=120)
    
    rich_handler = RichHandler(
        console=Console(file=sys.stderr),
        show_time=True,
        show_path=True,
        rich_tracebacks=rich_tracebacks,
        # remote paths may contain [brackets]
        markup=False,
        show_level=True,
    )
    rich_handler.setLevel(log_level)
    package_logger.addHandler(rich_handler)
    
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        file_handler.setFormatter(file_formatter)
        package_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.
    
    Args:
        name: Logger name (usually __name__)
    
    Returns:
        Logger instance
    """
    return logging.getLogger(name)

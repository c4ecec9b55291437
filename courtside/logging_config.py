"""Logging setup for hosts embedding the courtside league engine.

The engine never configures logging itself. It only emits records on the
``courtside`` logger hierarchy:

    courtside.matchups    WARNING  players left unassigned on a day
    courtside.results     WARNING  unreadable matchup skipped
    courtside.validators  ERROR    misconfigured league
    courtside.*           DEBUG    per-day bookkeeping

Hosts either attach console/file output with ``setup_logging`` or capture
the degraded-state records of a single call with ``collect_degraded_state``
and show them next to the standings or the generated courts.
"""

import logging
import sys
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional

ENGINE_LOGGER = 'courtside'


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.WARNING,
    log_to_file: bool = False,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Attach console and/or file output to the engine logger.

    Args:
        log_dir: Directory for log files (default: ./logs)
        level: Logging level (default: WARNING, so only degraded states and
            misconfiguration are shown)
        log_to_file: Whether to also write a timestamped log file (default: False)
        log_to_console: Whether to log to stderr (default: True)

    Returns:
        The configured ``courtside`` logger

    Example:
        from courtside.logging_config import setup_logging
        setup_logging(level=logging.DEBUG, log_to_file=True)
    """
    logger = logging.getLogger(ENGINE_LOGGER)
    logger.setLevel(level)

    # Replace handlers from an earlier call
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    if log_to_file:
        if log_dir is None:
            log_dir = Path('logs')
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / f'courtside_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
            )
        )
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter('%(levelname)s [%(name)s]: %(message)s'))
        logger.addHandler(console_handler)

    return logger


class DegradedStateHandler(logging.Handler):
    """Keeps the messages of WARNING and ERROR records emitted by the engine."""

    def __init__(self, level: int = logging.WARNING):
        super().__init__(level)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


@contextmanager
def collect_degraded_state(level: int = logging.WARNING) -> Iterator[list[str]]:
    """
    Capture engine warnings raised inside the block.

    The yielded list fills as records arrive, e.g.:

        with collect_degraded_state() as notices:
            plan = plan_daily_matchups(day, ranked, config)
        # notices == ['Day 2: 2 players unassigned (10 players, 2 courts of 4)']

    The engine logger level is lowered to ``level`` for the duration of the
    block when it would otherwise drop those records.
    """
    logger = logging.getLogger(ENGINE_LOGGER)
    handler = DegradedStateHandler(level)
    previous_level = logger.level

    if logger.getEffectiveLevel() > level:
        logger.setLevel(level)
    logger.addHandler(handler)
    try:
        yield handler.messages
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)

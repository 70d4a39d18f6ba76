# logger.py

import os, sys, logging
from typing import Optional, TextIO
from functools import partial

from .style.engine import color

SUCCESS = 25
logging.addLevelName(SUCCESS, 'SUCCESS')

class StyledFormatter(logging.Formatter):
    """Formats records as '[HH:MM:SS] <symbol> message' with per-level colors."""

    SYMBOLS = {
        logging.DEBUG: (color.dim, '🐛 [DEBUG] ', color.dim),
        logging.INFO: (color.blue, 'ⓘ ', None),
        SUCCESS: (color.green, '✔ ', None),
        logging.WARNING: (color.yellow, '▲ ', color.yellow),
        logging.ERROR: (color.red, '✖ ', color.red.bold),
        logging.CRITICAL: (color.red, '✖ ', color.red.bold),
    }

    def format(self, record: logging.LogRecord) -> str:
        symbol_style, symbol, message_style = self.SYMBOLS.get(
            record.levelno, self.SYMBOLS[logging.INFO]
        )
        message = record.getMessage()
        if message_style:
            message = message_style(message)
        timestamp = color.dim(f"[{self.formatTime(record, '%H:%M:%S')}]")
        line = f"{timestamp} {symbol_style(symbol)}{message}"
        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False,
                 log_file: Optional[str] = None, debug: bool = False,
                 stream: Optional[TextIO] = None):
        self._logger = logging.getLogger(name)
        # One handler per named logger, however many wrappers share it
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()
        if logging_enabled:
            self._logger.propagate = False
            self._logger.setLevel(logging.DEBUG if debug else logging.INFO)
            if log_file:
                log_dir = os.path.dirname(log_file)
                if log_dir:
                    os.makedirs(log_dir, exist_ok=True)
                handler = logging.FileHandler(log_file)
                handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
            else:
                handler = logging.StreamHandler(stream or sys.stdout)
                handler.setFormatter(StyledFormatter())
            self._logger.addHandler(handler)
        else:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'success', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        if level == 'success':
            self._logger.log(SUCCESS, msg, exc_info=exc_info)
        else:
            getattr(self._logger, level)(msg, exc_info=exc_info)

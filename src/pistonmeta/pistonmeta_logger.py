"""
Logger used across pistonmeta. Every call emits a single JSON line that records
where the message came from.
"""

import inspect
import json
import logging
from datetime import datetime

from pydantic import BaseModel


class LogLine(BaseModel):
    """
    Represents a line in the pistonmeta log
    """

    time: str
    level: str
    caller_file: str
    caller_name: str
    caller_line: int
    message: str


class PistonMetaLogger:
    """
    Logger class
    """

    def __init__(self, name: str = "pistonmeta") -> None:
        self.logger = logging.getLogger(name)

    def log(self, debug_message: str, level: int) -> None:
        """
        Log the message at the given level
        """
        if not self.logger.isEnabledFor(level):
            return

        debug_message = debug_message.replace("\n", " ")

        # Collect details about the caller
        caller = inspect.stack(0)[1]
        debug_log_line = LogLine(
            time=str(datetime.now()),
            level=logging.getLevelName(level),
            caller_file=caller.filename.replace("\\", "/").split("/")[-1],
            caller_name=caller.function,
            caller_line=caller.lineno,
            message=debug_message,
        )
        self.logger.log(level=level, msg=json.dumps(debug_log_line.model_dump()))

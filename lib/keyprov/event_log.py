"""Timestamped event log for provisioning runs."""

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


class EventLog:
    """Appends '[timestamp] LEVEL: message' lines to a log file.

    A None path disables logging. Write failures only print a warning.
    """

    def __init__(self, log_file: Optional[Path]):
        self.log_file = log_file

    def log_event(self, message: str, level: str = 'INFO') -> None:
        """Log an event to the log file."""
        if self.log_file is None:
            return
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        entry = f'[{timestamp}] {level}: {message}\n'
        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, 'a') as f:
                f.write(entry)
        except (IOError, OSError) as e:
            print(f"Warning: Failed to log event: {e}", file=sys.stderr)

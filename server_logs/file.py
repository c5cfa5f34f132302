from server_logs.base import Logger
from server_logs.json_lines import format_record
from pathlib import Path
import threading


class FileLogger(Logger):
    """Appends one JSON record per line to `<base_path>/<log_type>.log`."""

    def __init__(self, log_type="server", base_path="logs"):
        self.log_type = log_type
        self.path = Path(base_path) / f"{log_type}.log"
        # route handlers run in a threadpool, so appends are serialized
        self._lock = threading.Lock()

        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _write(self, level, msg, data):
        line = format_record(self.log_type, level, msg, data)
        with self._lock:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

    def info(self, msg, **data):
        self._write("INFO", msg, data)

    def debug(self, msg, **data):
        self._write("DEBUG", msg, data)

    def warning(self, msg, **data):
        self._write("WARN", msg, data)

    def error(self, msg, **data):
        self._write("ERROR", msg, data)

from server_logs.base import Logger, utc_timestamp
import json


def format_record(log_type, level, msg, data) -> str:
    # default=str keeps exceptions and other odd values loggable
    return json.dumps({
        "ts": utc_timestamp(),
        "log_type": log_type,
        "level": level,
        "event": msg,
        **data
    }, default=str)


class JSONLogger(Logger):
    def __init__(self, log_type="server"):
        self.log_type = log_type

    def _log(self, level, msg, data):
        print(format_record(self.log_type, level, msg, data))

    def info(self, msg, **data):
        self._log("INFO", msg, data)

    def debug(self, msg, **data):
        self._log("DEBUG", msg, data)

    def warning(self, msg, **data):
        self._log("WARN", msg, data)

    def error(self, msg, **data):
        self._log("ERROR", msg, data)

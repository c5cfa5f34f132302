from server_logs.base import Logger


class CompositeLogger(Logger):
    def __init__(self, *loggers: Logger):
        self.loggers = loggers

    def _fan_out(self, method, msg, data):
        for logger in self.loggers:
            getattr(logger, method)(msg, **data)

    def info(self, msg, **data):
        self._fan_out("info", msg, data)

    def debug(self, msg, **data):
        self._fan_out("debug", msg, data)

    def warning(self, msg, **data):
        self._fan_out("warning", msg, data)

    def error(self, msg, **data):
        self._fan_out("error", msg, data)

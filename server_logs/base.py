from abc import ABC, abstractmethod
from datetime import datetime, timezone

LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class Logger(ABC):
    """Structured event logger: `msg` is a snake_case event name, `data` its fields."""

    @abstractmethod
    def info(self, msg: str, **data): ...

    @abstractmethod
    def debug(self, msg: str, **data): ...

    @abstractmethod
    def warning(self, msg: str, **data): ...

    @abstractmethod
    def error(self, msg: str, **data): ...

from server_logs.stdout import StdoutLogger
from server_logs.file import FileLogger
from server_logs.json_lines import JSONLogger
from server_logs.composite import CompositeLogger

LOG_DIR = "logs"


def get_logger(mode="dev", log_type="server", base_path=LOG_DIR):
    """prod writes to file and stdout JSON; anything else gets readable stdout lines."""
    if mode == "prod":
        return CompositeLogger(
            FileLogger(log_type=log_type, base_path=base_path),
            JSONLogger(log_type=log_type)
        )
    return StdoutLogger(log_type=log_type)

from server_logs.choose_log_type import get_logger
from card_server.config import get_env_mode

env = get_env_mode()

# incoming requests and route outcomes
server_logger = get_logger(mode=env, log_type="server")
# outbound calls to the card catalog
upstream_logger = get_logger(mode=env, log_type="upstream")

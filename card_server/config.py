# Environment lookups. Values are read on every call so a key rotated in the
# environment is picked up without a restart.
import os

API_KEY_ENV = "SUPERCELL_API_KEY"
DEFAULT_CARDS_URL = "https://api.clashroyale.com/v1/cards"


def get_api_key():
    return os.getenv(API_KEY_ENV) or None


def get_cards_url() -> str:
    return os.getenv("CARDS_API_URL", DEFAULT_CARDS_URL)


def get_env_mode() -> str:
    return os.getenv("ENV", "dev")


def get_bind_address() -> tuple[str, int]:
    return os.getenv("HOST", "127.0.0.1"), int(os.getenv("PORT", "8000"))

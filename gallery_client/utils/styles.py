import re
from typing import NamedTuple

RED = '\033[31m'
GREEN = '\033[32m'
CYAN = '\033[36m'
MAGENTA = '\033[35m'
YELLOW = '\033[33m'
WHITE = '\033[37m'
GRAY = '\033[90m'
ORANGE = '\033[38;5;208m'
BOLD = '\033[1m'
DIM = '\033[2m'
RESET = '\033[0m'

ansi_escape = re.compile(r'\x1B\[[0-?]*[ -/]*[@-~]')


class RarityStyle(NamedTuple):
    color: str
    border: str


RARITY_STYLES = {
    'Common': RarityStyle(WHITE, '-'),
    'Rare': RarityStyle(YELLOW, '='),
    'Epic': RarityStyle(MAGENTA, '~'),
    'Legendary': RarityStyle(CYAN, '*'),
    'Champion': RarityStyle(ORANGE, '^'),
}

# upstream may add tiers we don't know about yet
DEFAULT_RARITY_STYLE = RarityStyle(GRAY, '.')

SELECTED_STYLE = RarityStyle(BOLD + GREEN, '#')


def style_for_rarity(rarity) -> RarityStyle:
    return RARITY_STYLES.get(rarity, DEFAULT_RARITY_STYLE)


def visible_len(s: str) -> int:
    return len(ansi_escape.sub('', s))


def colorize(text: str, color: str) -> str:
    return f"{color}{text}{RESET}"

# pretty print display stuff
# render_* functions return lists of lines so they can be checked without a
# terminal; print_* functions write them out.
import shutil

from gallery_client.gallery import DECK_SIZE, has_icon
from gallery_client.videos import embed_url, video_id_for
from gallery_client.utils.styles import (
    BOLD, DIM, GREEN, RED, RESET, SELECTED_STYLE, YELLOW,
    colorize, style_for_rarity, visible_len,
)

TILE_WIDTH = 18
TILE_GAP = 1
MIN_COLUMNS = 2
MAX_COLUMNS = 6

VIDEO_UNAVAILABLE = "Sorry, a video preview for this card is not available yet."


def print_info(message: str):
    print(f"[INFO]: {message}")


def print_border(width: int = 40):
    print("=" * width)
    print()


def print_lines(lines):
    for line in lines:
        print(line)


def pad(text: str, width: int) -> str:
    return text + " " * max(0, width - visible_len(text))


def truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[:width - 1] + "…"


def cost_badge(card: dict) -> str:
    cost = card.get("elixirCost")
    return f"({cost})" if cost is not None else "(?)"


def card_name(card: dict) -> str:
    return str(card.get("name") or "")


def render_header() -> list[str]:
    return [
        colorize("Clash Royale Card Database", BOLD + YELLOW),
        "Explore cards or build your perfect deck.",
    ]


def render_loader() -> list[str]:
    return ["Loading Cards..."]


def render_error_panel(message: str) -> list[str]:
    inner = max(len("An Error Occurred"), len(message)) + 2
    edge = colorize("+" + "-" * inner + "+", RED)
    side = colorize("|", RED)
    return [
        edge,
        f"{side} {pad(colorize('An Error Occurred', BOLD), inner - 1)}{side}",
        f"{side} {pad(message, inner - 1)}{side}",
        edge,
    ]


def render_mode_toggle(deck_mode: bool, selection_count: int) -> list[str]:
    explorer = colorize("Card Explorer", YELLOW) if not deck_mode else colorize("Card Explorer", DIM)
    builder = colorize("Deck Builder", YELLOW) if deck_mode else colorize("Deck Builder", DIM)
    switch = "[  o]" if deck_mode else "[o  ]"
    lines = [f"{explorer} {switch} {builder}"]
    if deck_mode:
        label = f"Find Best Deck ({selection_count} selected)"
        if selection_count < DECK_SIZE:
            lines.append(colorize(f"( {label} )", DIM))
        else:
            lines.append(colorize(f"[ {label} ]", BOLD + YELLOW))
    return lines


def render_tile(card: dict, index: int, selected: bool = False, deck_mode: bool = False):
    """
    Draw one card as a boxed tile. Returns None for a card without a
    medium icon so callers skip it instead of drawing a broken tile.
    """
    if not has_icon(card):
        return None

    style = style_for_rarity(card.get("rarity"))
    if deck_mode and selected:
        style = SELECTED_STYLE
    inner = TILE_WIDTH - 2

    label = f"{index}"
    top = "+" + label + style.border * (inner - len(label)) + "+"
    badge = cost_badge(card)
    name = truncate(card_name(card), inner - len(badge) - 2)
    rows = [f" {badge} {name}"]
    # spells carry no combat stats
    hitpoints = card.get("hitpoints")
    damage = card.get("damage")
    rows.append(f" HP  {hitpoints}" if hitpoints else "")
    rows.append(f" DMG {damage}" if damage else "")
    rows.append(" " + truncate(str(card.get("rarity") or ""), inner - 1))

    side = colorize("|", style.color)
    lines = [colorize(top, style.color)]
    lines += [f"{side}{pad(row, inner)}{side}" for row in rows]
    lines.append(colorize("+" + style.border * inner + "+", style.color))
    return lines


def grid_columns(terminal_width: int) -> int:
    columns = (terminal_width + TILE_GAP) // (TILE_WIDTH + TILE_GAP)
    return max(MIN_COLUMNS, min(MAX_COLUMNS, columns))


def render_grid(cards: list, selection=frozenset(), deck_mode: bool = False, terminal_width: int = None) -> list[str]:
    """Lay tiles out row by row, numbering them from 1 in display order."""
    if terminal_width is None:
        terminal_width = shutil.get_terminal_size().columns
    columns = grid_columns(terminal_width)

    tiles = []
    for card in cards:
        tile = render_tile(card, len(tiles) + 1, card.get("id") in selection, deck_mode)
        if tile is not None:
            tiles.append(tile)

    lines = []
    gap = " " * TILE_GAP
    for start in range(0, len(tiles), columns):
        row = tiles[start:start + columns]
        for parts in zip(*row):
            lines.append(gap.join(parts))
    return lines


def render_deck_strip(deck: list) -> list[str]:
    if not deck:
        return []
    title = "Recommended Deck for You"
    cells = [pad(truncate(f"{cost_badge(card)} {card_name(card)}", 20), 20) for card in deck]
    rows = [" ".join(cells[i:i + 4]) for i in range(0, len(cells), 4)]
    inner = max(len(title), *(visible_len(row) for row in rows)) + 2
    edge = colorize("#" * (inner + 2), GREEN)
    side = colorize("#", GREEN)
    lines = [edge, f"{side} {pad(colorize(title, BOLD + GREEN), inner - 1)}{side}"]
    lines += [f"{side} {pad(row, inner - 1)}{side}" for row in rows]
    lines.append(edge)
    return lines


def render_overlay(card: dict) -> list[str]:
    title = f"{card_name(card)} - Video Preview"
    video_id = video_id_for(card.get("name"))
    body = embed_url(video_id) if video_id else VIDEO_UNAVAILABLE
    controls = "[o] open video  [x] close" if video_id else "[x] close"

    inner = max(len(title), len(body), len(controls)) + 2
    edge = colorize("+" + "=" * inner + "+", YELLOW)
    side = colorize("|", YELLOW)
    return [
        edge,
        f"{side} {pad(colorize(title, BOLD + YELLOW), inner - 1)}{side}",
        f"{side}{' ' * inner}{side}",
        f"{side} {pad(body, inner - 1)}{side}",
        f"{side}{' ' * inner}{side}",
        f"{side} {pad(controls, inner - 1)}{side}",
        edge,
    ]


def render_gallery(view, terminal_width: int = None) -> list[str]:
    """Everything below the header for the current view state."""
    lines = render_mode_toggle(view.deck_builder_mode, len(view.selection))
    if view.notice:
        lines.append(colorize(view.notice, YELLOW))
    if view.loading:
        return lines + render_loader()
    if view.error:
        return lines + render_error_panel(view.error)
    lines += render_deck_strip(view.recommended_deck)
    lines += render_grid(view.cards, view.selection, view.deck_builder_mode, terminal_width)
    return lines

import itertools
import sys
from time import sleep

from gallery_client.utils.styles import CYAN, MAGENTA, ORANGE, RESET, WHITE, YELLOW

CLEAR_LINE = '\033[2K'
HIDE_CURSOR = '\033[?25l'
SHOW_CURSOR = '\033[?25h'

SPINNER_FRAMES = "|/-\\"
# cycles through the rarity colours while waiting
SPINNER_COLORS = (WHITE, YELLOW, MAGENTA, CYAN, ORANGE)


def spinner_frames(text: str):
    """Endless stream of coloured spinner lines for `text`."""
    for frame, color in zip(itertools.cycle(SPINNER_FRAMES), itertools.cycle(SPINNER_COLORS)):
        yield f"{color}{frame}{RESET} {text}"


def animate_until_done(worker, text: str = "Loading Cards...", delay: float = 0.1, out=None):
    """
    Spin on one line until `worker` (a started thread) finishes.

    Args:
        worker: anything with `is_alive()` and `join()`
        text: label shown next to the spinner
        delay: seconds between frames
        out: stream to draw on, stdout by default
    Returns:
        number of frames drawn
    """
    out = out or sys.stdout
    frames = 0
    out.write(HIDE_CURSOR)
    try:
        for line in spinner_frames(text):
            if not worker.is_alive():
                break
            out.write(f"\r{CLEAR_LINE}{line}")
            out.flush()
            frames += 1
            sleep(delay)
        worker.join()
        out.write(f"\r{CLEAR_LINE}")
    finally:
        out.write(SHOW_CURSOR)
        out.flush()
    return frames

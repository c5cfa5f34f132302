# Client-side gallery state: card list, loading/error flags, mode,
# deck-builder selection, recommended deck and the video overlay target.
# Rendering lives in utils/pretty_display; this module never prints.
import random
import threading
import webbrowser

from gallery_client.videos import video_id_for, watch_url

DECK_SIZE = 8

EXPLORER_MODE = "explorer"
DECK_BUILDER_MODE = "deck-builder"

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."
DECK_TOO_SMALL_NOTICE = f"Please select at least {DECK_SIZE} cards to build a deck."


class GalleryFetchError(Exception):
    """The card proxy answered with a non-2xx status."""


def has_icon(card: dict) -> bool:
    icon_urls = card.get("iconUrls") or {}
    return bool(icon_urls.get("medium"))


class GalleryView:
    def __init__(self):
        self.cards = []
        self.loading = True
        self.error = None
        self.mode = EXPLORER_MODE
        self.selection = set()
        self.recommended_deck = []
        self.overlay_card = None
        self.notice = None
        self._dismantled = threading.Event()

    # --- loading ---

    def mount(self, fetch) -> threading.Thread:
        """Start the one and only card fetch in the background."""
        worker = threading.Thread(target=self.load, args=(fetch,), daemon=True)
        worker.start()
        return worker

    def load(self, fetch):
        try:
            cards = list(fetch())
            if not self._dismantled.is_set():
                self.cards = cards
        except Exception as e:
            # any failure ends up on the error panel
            if not self._dismantled.is_set():
                self.error = str(e) or UNKNOWN_ERROR_MESSAGE
        finally:
            if not self._dismantled.is_set():
                self.loading = False

    def dismantle(self):
        """Tear the view down; a fetch still in flight will not touch state."""
        self._dismantled.set()

    @property
    def dismantled(self) -> bool:
        return self._dismantled.is_set()

    @property
    def visible_cards(self) -> list:
        return [card for card in self.cards if has_icon(card)]

    def find_card(self, card_id):
        for card in self.cards:
            if card.get("id") == card_id:
                return card
        return None

    # --- modes ---

    @property
    def deck_builder_mode(self) -> bool:
        return self.mode == DECK_BUILDER_MODE

    def toggle_mode(self):
        if self.deck_builder_mode:
            self.mode = EXPLORER_MODE
        else:
            self.mode = DECK_BUILDER_MODE
            self.selection = set()
        self.notice = None

    def click_card(self, card_id):
        if self.deck_builder_mode:
            self.toggle_selection(card_id)
        else:
            self.overlay_card = self.find_card(card_id)

    # --- explorer overlay ---

    def close_overlay(self):
        self.overlay_card = None

    def open_video(self, opener=webbrowser.open) -> bool:
        """Open the overlay's video externally. The overlay stays open."""
        if self.overlay_card is None:
            return False
        video_id = video_id_for(self.overlay_card.get("name"))
        if video_id is None:
            return False
        opener(watch_url(video_id))
        return True

    # --- deck builder ---

    def toggle_selection(self, card_id):
        if card_id in self.selection:
            self.selection.discard(card_id)
        else:
            self.selection.add(card_id)

    def is_selected(self, card_id) -> bool:
        return card_id in self.selection

    @property
    def selected_cards(self) -> list:
        return [card for card in self.cards if card.get("id") in self.selection]

    @property
    def can_build_deck(self) -> bool:
        return len(self.selected_cards) >= DECK_SIZE

    def build_deck(self, rng=None):
        """
        Recommend a deck by shuffling the whole selection and keeping the
        first eight. This is plain uniform sampling, nothing smarter.

        With fewer than eight selected cards the request is rejected through
        `notice` and the current deck is left alone.
        """
        pool = self.selected_cards
        if len(pool) < DECK_SIZE:
            self.notice = DECK_TOO_SMALL_NOTICE
            return None

        rng = rng or random
        shuffled = list(pool)
        rng.shuffle(shuffled)
        self.recommended_deck = shuffled[:DECK_SIZE]
        self.notice = None
        return self.recommended_deck

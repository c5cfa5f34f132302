import os
import sys

import requests

from gallery_client.gallery import GalleryFetchError, GalleryView
from gallery_client.utils.animations import animate_until_done
from gallery_client.utils.pretty_display import (
    print_border, print_info, print_lines,
    render_error_panel, render_gallery, render_header, render_overlay,
)

DEFAULT_BASE_URL = "http://localhost:8000"
FETCH_FALLBACK_MESSAGE = "Failed to load card data."


class CardsClient:
    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()

    def get_cards(self) -> list:
        """Fetch the card list from the proxy. Raises GalleryFetchError on non-2xx."""
        url = f"{self.base_url}/api/cards"
        response = self.session.get(url)
        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = body.get("message") if isinstance(body, dict) else None
            raise GalleryFetchError(message or FETCH_FALLBACK_MESSAGE)
        body = response.json()
        if not isinstance(body, dict) or not isinstance(body.get("cards"), list):
            raise GalleryFetchError(FETCH_FALLBACK_MESSAGE)
        return body["cards"]


def overlay_main(view: GalleryView):
    """Keep the overlay up until it is dismissed with 'x' or a bare Enter."""
    while view.overlay_card is not None:
        print_lines(render_overlay(view.overlay_card))
        choice = input("> ").strip().lower()
        if choice in ("", "x"):
            view.close_overlay()
        elif choice == "o":
            if not view.open_video():
                print_info("No video to open for this card.")
        else:
            print_info("Use 'o' to open the video or 'x' to close.")


def gallery_main(view: GalleryView):
    while True:
        print_lines(render_gallery(view))
        visible = view.visible_cards

        options = ["'m' switch mode", f"1-{len(visible)} pick a card"]
        if view.deck_builder_mode:
            options.append("'b' find best deck")
        options.append("'q' quit")
        choice = input(f"\nEnter choice ({', '.join(options)}): ").strip().lower()

        match choice:
            case 'q':
                print("Goodbye!")
                return
            case 'm':
                view.toggle_mode()
            case 'b' if view.deck_builder_mode:
                view.build_deck()
            case _:
                try:
                    idx = int(choice)
                except ValueError:
                    print_info("Invalid input.")
                    continue
                if not 1 <= idx <= len(visible):
                    print_info("Invalid selection.")
                    continue
                view.click_card(visible[idx - 1]["id"])
                if view.overlay_card is not None:
                    overlay_main(view)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    base_url = argv[0] if argv else os.getenv("GALLERY_API_URL", DEFAULT_BASE_URL)

    client = CardsClient(base_url)
    view = GalleryView()

    print_border()
    print_lines(render_header())
    print_border()

    try:
        worker = view.mount(client.get_cards)
        animate_until_done(worker)
        if view.error:
            print_lines(render_error_panel(view.error))
            return 1
        gallery_main(view)
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye!")
    finally:
        view.dismantle()
    return 0


if __name__ == "__main__":
    sys.exit(main())

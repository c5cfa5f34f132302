# Static card name -> YouTube video id lookup. Only a handful of cards
# have a preview; everything else falls back to a placeholder.
from types import MappingProxyType

VIDEO_MAP = MappingProxyType({
    'P.E.K.K.A.': 'F66-i5Ohp-w',
    'Hog Rider': '_3_212b_4hA',
    'Wizard': 'Xt_N4m7gJ78',
    'Golem': 'p_dYV5v-sGI',
    'Goblin Barrel': 'fsZ2-pH48yY',
    'Knight': 'i-3-n-p-mBE',
})


def video_id_for(card_name):
    return VIDEO_MAP.get(card_name)


def embed_url(video_id: str) -> str:
    return f"https://www.youtube.com/embed/{video_id}?autoplay=1"


def watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"

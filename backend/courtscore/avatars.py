"""Default avatar catalogue built from DiceBear styles."""

from __future__ import annotations

import random
from urllib.parse import quote

AVATAR_STYLES = [
    "adventurer",
    "adventurer-neutral",
    "avataaars",
    "avataaars-neutral",
    "big-ears",
    "big-ears-neutral",
    "big-smile",
    "bottts",
    "bottts-neutral",
    "croodles",
    "croodles-neutral",
    "fun-emoji",
    "icons",
    "identicon",
    "initials",
    "lorelei",
    "lorelei-neutral",
    "micah",
    "miniavs",
    "notionists",
    "notionists-neutral",
    "open-peeps",
    "personas",
    "pixel-art",
    "pixel-art-neutral",
]

BASE_SEEDS = [
    "alex", "bailey", "casey", "dakota", "emerson", "finley", "grayson", "harlow",
    "indigo", "jordan", "kendall", "logan", "morgan", "noah", "peyton", "quinn",
    "riley", "sawyer", "taylor", "uriel", "valentina", "winston", "xander", "zephyr",
]

DICEBEAR_URL = "https://api.dicebear.com/6.x"
BACKGROUND_COLORS = "b6e3f4,c0aede,d1d4f9,ffd5dc,ffdfbf"


def avatar_url(seed: str, style: str = "adventurer") -> str:
    return (
        f"{DICEBEAR_URL}/{style}/svg?seed={quote(seed, safe='')}"
        f"&backgroundColor={BACKGROUND_COLORS}"
    )


def avatar_options(count: int = 24) -> list[str]:
    """Return ``count`` avatar URLs cycling through styles and seeds."""
    return [
        avatar_url(
            f"{BASE_SEEDS[i % len(BASE_SEEDS)]}-{i}",
            AVATAR_STYLES[i % len(AVATAR_STYLES)],
        )
        for i in range(count)
    ]


DEFAULT_AVATARS = avatar_options(100)


def random_avatar(rng: random.Random | None = None) -> str:
    return (rng or random).choice(DEFAULT_AVATARS)

"""Stock programming excuses attached to envelopes on request."""

import random
from typing import Final

EXCUSES: Final[tuple[str, ...]] = (
    "It works on my machine.",
    "That's weird, it worked yesterday.",
    "It must be a hardware problem.",
    "Somebody must have changed my code.",
    "It's never done that before.",
    "I haven't touched that module in weeks!",
    "It's a caching issue.",
    "The third party API is not responding.",
    "That's a known issue.",
    "It's not a bug, it's a feature.",
    "You must have the wrong version.",
    "The request must have been malformed.",
    "I thought I fixed that.",
    "There must be something wrong with your data.",
    "It worked in staging.",
    "The compiler must have optimized it away.",
    "That code was written by the previous developer.",
    "It's probably a timezone thing.",
    "Must be a race condition.",
    "Did you try turning it off and on again?",
)


def random_excuse() -> str:
    """Pick one excuse at random.

    Returns:
        str: A non-empty excuse.
    """
    return random.choice(EXCUSES)  # noqa: S311 - not used for security

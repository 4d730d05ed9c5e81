"""Name canonicalization for fuzzy matching."""

_STRIPPED = str.maketrans("", "", "-_ ")


def normalize(text: str) -> str:
    """Lowercase and drop hyphens, underscores and spaces.

    "Daily Digest" and "daily-digest" both become "dailydigest".
    """
    return text.lower().translate(_STRIPPED)

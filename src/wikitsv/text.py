"""Whitespace stripping and delimiter splitting shared by the TSV and wikitext readers."""


def strip(s: str) -> str:
    """Return s without leading or trailing whitespace."""
    return s.strip()


def split(s: str, delim: str) -> list[str]:
    """Split s on the delimiter substring and strip every token.

    A delimiter at the start yields a leading empty token, one at the end a
    trailing empty token.  Input without the delimiter (including the empty
    string) yields a single token.
    """
    if not delim:
        raise ValueError("Delimiter must be a non-empty string")
    return [strip(token) for token in s.split(delim)]

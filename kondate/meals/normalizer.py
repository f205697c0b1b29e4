from __future__ import annotations

from .errors import EmptyQueryError

SEPARATOR = ","


def normalize(raw: str) -> set[str]:
    """
    Turn the user's comma-separated ingredient text into query tokens.

    Pieces are stripped and lower-cased; empty pieces are dropped.
    Raises ``EmptyQueryError`` when nothing is left.
    """
    tokens = {piece.strip().lower() for piece in (raw or "").split(SEPARATOR)}
    tokens.discard("")
    if not tokens:
        raise EmptyQueryError(raw)
    return tokens

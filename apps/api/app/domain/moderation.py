"""Chirp body rules: length limit and profanity redaction."""

MAX_CHIRP_LENGTH = 140
REDACTION_MASK = "****"
DENYLIST: frozenset[str] = frozenset({"kerfuffle", "sharbert", "fornax"})


def moderate(text: str) -> str:
    """Mask every whole space-separated word that matches the denylist, ignoring case.

    Only exact single-space splits are considered, so ``kerfuffled`` or
    ``kerfuffle!`` are left alone and runs of spaces survive unchanged.
    """
    words = text.split(" ")
    return " ".join(REDACTION_MASK if word.lower() in DENYLIST else word for word in words)


def exceeds_length_limit(text: str) -> bool:
    return len(text) > MAX_CHIRP_LENGTH

"""
Text normalization for name comparison.

Two projections are used by the matchers:
- fold_case: Unicode case folding with Turkish "İ", full string kept (exact pass)
- normalize: fold_case plus letters-only filtering (fuzzy pass)
"""

# casefold() maps "İ" to "i" + U+0307 (combining dot), which never equals a
# reference name. Fold it to a plain "i" first.
_DOTTED_CAPITAL_I = "İ"


def fold_case(text: str) -> str:
    """Lowercase text for comparison against the Turkish reference alphabet."""
    return text.replace(_DOTTED_CAPITAL_I, "i").casefold()


def normalize(raw: str) -> str:
    """
    Project raw text to a lowercase, letters-only token.

    Digits, punctuation and whitespace are dropped. Total over all strings
    and idempotent: normalize(normalize(s)) == normalize(s).

    :param raw: Text as typed by the user
    :return: Normalized token (may be empty)
    """
    return "".join(ch for ch in fold_case(raw) if ch.isalpha())

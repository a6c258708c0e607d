"""
Text helpers shared by the scoring, diagnosis and recommendation rules.

Survey answers are free text in Portuguese ("Sim, estruturado", "Não
utilizo"), so the rules test for keywords rather than exact values.
"""

from __future__ import annotations

import math


def contains_any(text: str | None, *keywords: str) -> bool:
    """Case-insensitive keyword test over a free-text answer."""
    lowered = (text or "").lower()
    return any(keyword in lowered for keyword in keywords)


def answered_yes(text: str | None) -> bool:
    """True when the answer contains "sim" (yes)."""
    return contains_any(text, "sim")


def answer_is(text: str | None, *options: str) -> bool:
    """Whole-answer match, ignoring case and surrounding blanks: "Não" but not "Não utilizo"."""
    normalized = (text or "").strip().lower()
    return normalized in options


def filled(text: str | None, min_length: int) -> bool:
    """Length heuristic for "this field was meaningfully filled in"."""
    return bool(text) and len(text) > min_length


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def fmt_number(value: float) -> str:
    """Format a metric the way it was typed: ``20.0`` -> ``"20"``, ``12.5`` -> ``"12.5"``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def fmt_brl(value: float) -> str:
    """Brazilian number format without currency symbol: ``400000`` -> ``"400.000"``.

    Up to three fraction digits are kept, trailing zeros dropped.
    """
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return text.replace(",", "\x00").replace(".", ",").replace("\x00", ".")


def truncate(text: str, length: int) -> str:
    return f"{text[:length]}..."

from __future__ import annotations


def zero_pad(number: int, width: int) -> str:
    """String form of a non-negative integer, zero-padded to at least `width`."""
    return str(int(number)).rjust(width, "0")


def ordinal_suffix(number: int) -> str:
    """English ordinal suffix: 1 -> "st", 2 -> "nd", 3 -> "rd", anything else -> "th"."""
    # only the value itself is checked, so 21 -> "th" and 11 -> "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(int(number), "th")

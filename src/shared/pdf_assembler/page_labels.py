"""Page-number labels: lowercase roman for front matter, arabic for the body."""

_ROMAN = [
    (1000, "m"), (900, "cm"), (500, "d"), (400, "cd"),
    (100, "c"), (90, "xc"), (50, "l"), (40, "xl"),
    (10, "x"), (9, "ix"), (5, "v"), (4, "iv"), (1, "i"),
]


def to_roman(num: int) -> str:
    """Lowercase roman numeral for a positive integer.

    >>> to_roman(14)
    'xiv'
    """
    if num < 1:
        raise ValueError(f"Roman numerals need a positive integer, got {num}")
    result = []
    for value, symbol in _ROMAN:
        count, num = divmod(num, value)
        result.append(symbol * count)
    return "".join(result)


def page_label(index: int, front_count: int) -> str | None:
    """Return the stamp for the page at 0-based *index* of the merged book.

    The title page (index 0) gets nothing; the rest of the front matter
    counts on from it in roman numerals (so index 1 is "ii"); the body
    restarts at "1".
    """
    if index == 0:
        return None
    if index < front_count:
        return to_roman(index + 1)
    return str(index - front_count + 1)

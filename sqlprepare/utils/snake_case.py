"""Normalize column names to lowercase, underscore-separated identifiers."""


def snake_case(name: str) -> str:
    """Return name with ``_`` inserted at each lowercase-to-uppercase boundary, lowercased.

    The first character behaves as if preceded by ``_``, so a leading
    capital never gets an extra underscore. Lowercasing a single character
    may yield several characters (e.g. ``"İ"``).
    """
    result = []
    previous = "_"
    for char in name:
        if char.isupper() and previous.islower():
            result.append("_")
        result.append(char.lower())
        previous = char
    return "".join(result)

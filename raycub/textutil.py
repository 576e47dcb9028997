"""Small string helpers used when reading scene descriptions."""

from __future__ import annotations

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = "\t\n\v\f\r "


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the scene reader expects.

    Leading whitespace is skipped and one optional sign is accepted. Digits
    are read until a non-digit is met. A value above the 32-bit signed range
    gives -1 and one below it gives 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]

    value = 0
    for char in stripped:
        if not "0" <= char <= "9":
            break
        if not INT_MIN <= value * sign <= INT_MAX:
            break
        value = value * 10 + (ord(char) - ord("0"))

    if value * sign < INT_MIN:
        return 0
    if value * sign > INT_MAX:
        return -1
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> int:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the index of the first match, or -1 when there is none. An empty
    needle matches at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    return haystack[:length].find(needle)


def flip(text: str) -> str:
    """Swap characters pairwise from the outside in.

    For strings of odd length this is a full reversal. For even lengths the
    two central characters are left in place.
    """
    chars = list(text)
    last = len(chars) - 1
    for i in range(max(last, 0) // 2):
        chars[i], chars[last - i] = chars[last - i], chars[i]
    return "".join(chars)


def strcmp(a: str, b: str) -> int:
    """Compare two strings, returning the code point difference at the
    first mismatch, or 0 when they are equal.

    A string that is a prefix of the other compares as if it ended in a
    zero character.
    """
    for left, right in zip(a, b):
        if left != right:
            return ord(left) - ord(right)
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(b) > len(a):
        return -ord(b[len(a)])
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` leading characters of two strings."""
    if n < 0:
        raise ValueError("n must not be negative")
    return strcmp(a[:n], b[:n])


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` beginning at ``start``.

    A start at or beyond the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]
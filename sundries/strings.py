# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""String casing and formatting helpers."""
import random
import re
import string


DEFAULT_RANDOM_CHARS = string.ascii_uppercase + string.ascii_lowercase + string.digits

# Opening or closing tag, possibly unterminated at end of input
TAG_PATTERN = re.compile(r"</?[^>]+(>|$)")

_rng = random.Random()


def capitalize(text: str) -> str:
    """Upper-case the first non-space character when it is an ASCII letter.

    Unlike ``str.capitalize`` the rest of the string is left alone.

    Example:
        >>> capitalize("  hELLO")
        '  HELLO'
        >>> capitalize("1hello")
        '1hello'
    """
    stripped = text.lstrip(" ")
    offset = len(text) - len(stripped)
    if stripped and stripped[0].isascii() and stripped[0].isalpha():
        return text[:offset] + stripped[0].upper() + stripped[1:]
    return text


def _words(text: str, separators: str) -> list[str]:
    return [word for word in re.split(separators, text) if word]


def camel_case(text: str) -> str:
    """Convert words separated by spaces, hyphens or underscores to camelCase."""
    words = _words(text, r"[\s\-_]+")
    return "".join(
        word.lower() if index == 0 else capitalize(word.lower())
        for index, word in enumerate(words)
    )


def kebab_case(text: str) -> str:
    """Lower-case words separated by spaces or underscores, joined with hyphens."""
    return "-".join(word.lower() for word in _words(text, r"[\s_]+"))


def snake_case(text: str) -> str:
    """Lower-case words separated by spaces or hyphens, joined with underscores."""
    return "_".join(word.lower() for word in _words(text, r"[\s\-]+"))


def reverse(text: str) -> str:
    return text[::-1]


def strip_tags(text: str) -> str:
    """Remove HTML/XML tags, keeping the text between them."""
    return TAG_PATTERN.sub("", text)


def truncate(text: str, length: int, ending: str = "...") -> str:
    """Shorten ``text`` to at most ``length`` characters, ending included.

    When length does not even fit the ending, the ending itself is cut.
    """
    if not text or length <= 0:
        return ""
    if len(text) <= length:
        return text
    if length <= len(ending):
        return ending[:length]
    return text[:length - len(ending)] + ending


def random_string(
    length: int,
    chars: str | None = None,
    rng: random.Random | None = None,
) -> str:
    """Return ``length`` characters drawn uniformly from ``chars``."""
    alphabet = chars or DEFAULT_RANDOM_CHARS
    source = rng or _rng
    return "".join(alphabet[int(source.random() * len(alphabet))] for _ in range(length))

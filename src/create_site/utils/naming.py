"""Name normalisation helpers."""

from __future__ import annotations

import re
import unicodedata

# Letters and digits in any script; ``_`` and punctuation separate words.
_RUN = re.compile(r"[^\W_]+")
_COMBINING_MARKS = re.compile("[\u0300-\u036f\ufe20-\ufe2f\u20d0-\u20ff]")
_LIGATURES = str.maketrans({
    "ß": "ss", "æ": "ae", "Æ": "Ae", "œ": "oe", "Œ": "Oe",
    "ø": "o", "Ø": "O", "ð": "d", "Ð": "D", "þ": "th", "Þ": "Th",
    "đ": "d", "Đ": "D", "ħ": "h", "Ħ": "H", "ł": "l", "Ł": "L", "ı": "i",
})


def _deburr_char(char: str) -> str:
    stripped = _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", char))
    return stripped if stripped.isascii() else char


def _deburr(text: str) -> str:
    """Strip Latin diacritics (``"Café"`` → ``"Cafe"``); other scripts are kept."""
    return "".join(_deburr_char(char) for char in text.translate(_LIGATURES))


def _is_boundary(prev: str, char: str, following: str) -> bool:
    if prev.isdigit() != char.isdigit():
        return True
    if prev.islower() and char.isupper():
        return True
    # "XMLHttp": the last capital of an acronym starts the next word.
    return prev.isupper() and char.isupper() and following.islower()


def _split_run(run: str) -> list[str]:
    words: list[str] = []
    start = 0
    for index in range(1, len(run)):
        following = run[index + 1] if index + 1 < len(run) else ""
        if _is_boundary(run[index - 1], run[index], following):
            words.append(run[start:index])
            start = index
    words.append(run[start:])
    return words


def make_npm_safe(name: str) -> str:
    """Kebab-case *name* so it can be used as a folder and npm package name.

    ``"My Gatsby Site"`` → ``"my-gatsby-site"``,
    ``"fooBar_baz"`` → ``"foo-bar-baz"``,
    ``"Café Münster"`` → ``"cafe-munster"``.
    Letters without case (CJK, for instance) are kept as-is.
    """
    words = (word for run in _RUN.findall(_deburr(name)) for word in _split_run(run))
    return "-".join(word.lower() for word in words)

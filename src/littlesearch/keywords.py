"""Keyword extraction: token normalization and per-document frequency tables."""

from collections.abc import Collection, Iterable
import re

from littlesearch.data_models.occurrence import Occurrence

_TRAILING_RE = re.compile(r"[^a-zA-Z]+$")
_LETTERS_RE = re.compile(r"[a-zA-Z]+")


def get_keyword(word: str, noise_words: Collection[str]) -> str | None:
    """Return word as a keyword, or None if it is not one.

    Only a trailing run of non-letters is stripped; anything else that is not an
    ASCII letter disqualifies the word.

    get_keyword("End.", set())    -> "end"
    get_keyword("a.b", set())     -> None
    get_keyword("?!", set())      -> None
    """
    stripped = _TRAILING_RE.sub("", word)
    if not _LETTERS_RE.fullmatch(stripped):
        return None
    keyword = stripped.lower()
    if keyword in noise_words:
        return None
    return keyword


def load_keywords(
    document: str, lines: Iterable[str], noise_words: Collection[str]
) -> dict[str, Occurrence]:
    """Count the keywords of one document, keyed in order of first appearance."""
    counts: dict[str, int] = {}
    for line in lines:
        for token in line.split():
            keyword = get_keyword(token, noise_words)
            if keyword is not None:
                counts[keyword] = counts.get(keyword, 0) + 1
    return {
        keyword: Occurrence(document=document, frequency=n)
        for keyword, n in counts.items()
    }

"""Two-keyword OR search over a KeywordIndex."""

from littlesearch.data_models.keyword_index import KeywordIndex

TOP_N = 5


def top5_search(
    index: KeywordIndex, kw1: str, kw2: str, limit: int = TOP_N
) -> list[str] | None:
    """Return up to limit documents containing kw1 or kw2, most frequent first.

    Each document appears once, ranked by its higher frequency. Equal frequencies
    favor kw1's occurrences. Returns None when neither keyword matches anything.
    """
    combined = index.get(kw1.lower()) + index.get(kw2.lower())
    # sorted() is stable with reverse=True, so kw1 stays ahead on ties
    combined = sorted(combined, key=lambda occ: occ.frequency, reverse=True)

    result: list[str] = []
    for occ in combined:
        if len(result) == limit:
            break
        if occ.document not in result:
            result.append(occ.document)
    return result or None

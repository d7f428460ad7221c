"""In-memory inverted index: keyword -> occurrences in descending frequency."""

from collections.abc import Iterator, Mapping

import polars as pl

from littlesearch.data_models.occurrence import Occurrence
from littlesearch.merge import insert_last_occurrence

_SCHEMA = {
    "keyword": pl.String,
    "document": pl.String,
    "frequency": pl.Int64,
    "rank": pl.Int64,
}


class KeywordIndex:
    def __init__(self) -> None:
        self._lists: dict[str, list[Occurrence]] = {}
        self._documents: set[str] = set()

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._lists

    def __len__(self) -> int:
        return len(self._lists)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lists)

    def get(self, keyword: str) -> list[Occurrence]:
        """Return a copy of keyword's occurrences; empty if it is not indexed."""
        return list(self._lists.get(keyword, ()))

    def keywords(self) -> list[str]:
        return sorted(self._lists)

    def documents(self) -> set[str]:
        return set(self._documents)

    def has_document(self, document: str) -> bool:
        return document in self._documents

    def add_document(self, document: str) -> None:
        """Record a document as indexed, including one with no keywords."""
        self._documents.add(document)

    def merge(self, kws: Mapping[str, Occurrence]) -> None:
        """Fold one document's keyword table into the index.

        Each occurrence is appended to its keyword's list and moved into place by
        binary search, so every list stays sorted by descending frequency.
        """
        incoming = {occ.document for occ in kws.values()}
        already = sorted(incoming & self._documents)
        if already:
            raise ValueError(f"Documents already indexed: {already!r}")
        for keyword, occ in kws.items():
            occs = self._lists.get(keyword)
            if occs is None:
                self._lists[keyword] = [occ]
            else:
                occs.append(occ)
                insert_last_occurrence(occs)
        self._documents |= incoming

    def to_polars(self) -> pl.DataFrame:
        rows = [
            (keyword, occ.document, occ.frequency, rank)
            for keyword in self.keywords()
            for rank, occ in enumerate(self._lists[keyword])
        ]
        if not rows:
            return pl.DataFrame(schema=_SCHEMA)
        return pl.DataFrame(rows, schema=_SCHEMA, orient="row")

"""LittleSearchEngine: build a keyword index over documents, then search it."""

from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

from littlesearch import sources
from littlesearch.data_models.keyword_index import KeywordIndex
from littlesearch.data_models.occurrence import Occurrence
from littlesearch.keywords import load_keywords
from littlesearch.search import top5_search
from littlesearch.sources import SourceUnavailable


class LittleSearchEngine:
    def __init__(self) -> None:
        self.keywords_index = KeywordIndex()
        self.noise_words: set[str] = set()

    @classmethod
    def from_files(
        cls, docs_file: Path, noise_words_file: Path
    ) -> "LittleSearchEngine":
        """Index the documents named in docs_file, relative to its directory."""
        noise_words = sources.list_noise_words(noise_words_file)
        documents = sources.list_documents(docs_file)
        engine = cls()
        engine.make_index(
            documents, noise_words, sources.line_reader(docs_file.parent)
        )
        return engine

    def make_index(
        self,
        documents: Iterable[str],
        noise_words: Iterable[str],
        read_lines: Callable[[str], Iterable[str]],
    ) -> None:
        """Load and merge each document in order.

        A document already in the index is skipped. Raises SourceUnavailable if a
        document cannot be read; documents merged before the failure stay in the
        index.
        """
        self.noise_words.update(noise_words)
        for document in documents:
            if self.keywords_index.has_document(document):
                continue
            try:
                lines = list(read_lines(document))
            except OSError as err:
                raise SourceUnavailable(document) from err
            self.merge_keywords(self.load_keywords(document, lines))
            self.keywords_index.add_document(document)

    def load_keywords(
        self, document: str, lines: Iterable[str]
    ) -> dict[str, Occurrence]:
        return load_keywords(document, lines, self.noise_words)

    def merge_keywords(self, kws: Mapping[str, Occurrence]) -> None:
        self.keywords_index.merge(kws)

    def search(self, kw1: str, kw2: str) -> list[str] | None:
        return top5_search(self.keywords_index, kw1, kw2)

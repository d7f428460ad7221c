"""Index a document collection and run a two-keyword search.

Usage:
    python -m littlesearch \\
        --docs docs.txt --noise-words noisewords.txt [--show-index] \\
        deep world
"""

import argparse
from pathlib import Path
import sys

from littlesearch.engine import LittleSearchEngine
from littlesearch.sources import SourceUnavailable


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Search documents for two keywords")
    parser.add_argument(
        "--docs", required=True, help="File of whitespace-separated document names"
    )
    parser.add_argument(
        "--noise-words",
        required=True,
        help="File of whitespace-separated noise words",
    )
    parser.add_argument(
        "--show-index", action="store_true", help="Print the keyword index"
    )
    parser.add_argument("keyword1")
    parser.add_argument("keyword2")
    args = parser.parse_args(argv)

    try:
        engine = LittleSearchEngine.from_files(
            Path(args.docs), Path(args.noise_words)
        )
    except SourceUnavailable as err:
        print(f"[littlesearch] {err}", file=sys.stderr)
        sys.exit(1)

    index = engine.keywords_index
    print(f"Loaded {len(engine.noise_words)} noise words")
    print(f"Indexed {len(index.documents())} documents, {len(index)} keywords")
    if args.show_index:
        print(index.to_polars())

    result = engine.search(args.keyword1, args.keyword2)
    if result is None:
        print(f"No matching documents for '{args.keyword1}' or '{args.keyword2}'")
        return
    for rank, document in enumerate(result, start=1):
        print(f"  {rank}. {document}")


if __name__ == "__main__":
    main()

"""
Command line client for the Middle-earth Books catalog.
Fetches the book titles through the projection service and prints them,
optionally filtered by a search term.
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

import httpx

from catalog.book_service import BookProjectionService
from catalog.exceptions import BookServiceError
from catalog.search import filter_books
from utilities.config import config
from utilities.logger import setup_logging, get_logger

USAGE = "Usage: python main.py [--search TERM] [--json]"


def parse_args(argv: List[str]) -> Tuple[Optional[str], bool]:
    """
    Parse command line arguments.

    Returns:
        (search term or None, whether to print JSON)

    Raises:
        ValueError: on an unknown option or a missing search term
    """
    term = None
    as_json = False
    args = list(argv)
    while args:
        arg = args.pop(0)
        if arg == "--json":
            as_json = True
        elif arg == "--search":
            if not args:
                raise ValueError("--search requires a term")
            term = args.pop(0)
        else:
            raise ValueError(f"Unknown argument: {arg}")
    return term, as_json


async def run(term: Optional[str], as_json: bool, client: Optional[httpx.AsyncClient] = None) -> int:
    """Fetch, filter and print the books. Returns the process exit code."""
    logger = get_logger(__name__)
    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(**config.get_client_options())

    try:
        service = BookProjectionService(
            client,
            upstream_url=config.upstream_url,
            expose_transport_errors=config.expose_transport_errors
        )
        books = filter_books(await service.fetch_books(), term or "")
    except BookServiceError as e:
        logger.error("Failed to fetch books", error=e.message)
        print(f"❌ {e.message}")
        return 1
    finally:
        if owns_client:
            await client.aclose()

    if as_json:
        print(json.dumps([book.dict() for book in books], ensure_ascii=False))
        return 0

    suffix = "" if len(books) == 1 else "s"
    print(f"📚 Found {len(books)} book{suffix}")
    for i, book in enumerate(books, 1):
        print(f"{i:3d}. {book.name}")
    if not books and term:
        print(f'No books found matching "{term}"')
    return 0


def main():
    """Main function."""
    try:
        term, as_json = parse_args(sys.argv[1:])
    except ValueError as e:
        print(f"❌ {e}")
        print(USAGE)
        sys.exit(1)

    setup_logging(
        log_level=config.log_level,
        log_format=config.log_format,
        log_file=config.get_log_file_path(),
        debug=config.debug
    )

    sys.exit(asyncio.run(run(term, as_json)))


if __name__ == "__main__":
    main()

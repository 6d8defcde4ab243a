#!/usr/bin/env python3
"""Export the catalog to a JSON backup, or merge a backup into it."""

import argparse
import asyncio
import sys
from pathlib import Path

from src.config import get_settings
from src.core.books.exchange import BookExchange, ExchangeError
from src.core.books.store import get_book_store


def export_backup(exchange: BookExchange, directory: Path) -> None:
    """Write a dated backup file."""
    path = exchange.export_to(directory)
    print(f"Exported {len(exchange.store.read())} books to {path}")


def import_backup(exchange: BookExchange, path: Path) -> None:
    """Merge a backup file, skipping IDs already in the catalog."""
    try:
        result = asyncio.run(exchange.import_data(path))
    except ExchangeError as e:
        print(f"Error importing {path}: {e}")
        sys.exit(1)

    print(f"Imported {result.imported} new books ({result.total} total)")


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Book catalog backup tool")
    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export", help="Write a JSON backup")
    export_parser.add_argument(
        "--dir",
        type=Path,
        default=settings.export_dir,
        help=f"Output directory (default: {settings.export_dir})",
    )

    import_parser = subparsers.add_parser("import", help="Merge a JSON backup")
    import_parser.add_argument("file", type=Path, help="Backup file to import")

    args = parser.parse_args()
    exchange = BookExchange(get_book_store())

    if args.command == "export":
        export_backup(exchange, args.dir)
    else:
        import_backup(exchange, args.file)


if __name__ == "__main__":
    main()

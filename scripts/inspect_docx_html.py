"""Inspect the HTML mammoth produces for a .docx to tune title detection."""

from __future__ import annotations

import argparse
import asyncio
from collections import Counter
from pathlib import Path

import httpx
from bs4 import BeautifulSoup

from docx2sections.converter import convert_docx_to_html
from docx2sections.file_utils import read_docx_bytes
from docx2sections.html_utils import parse_top_level_elements
from docx2sections.sections import find_title


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect tags and title candidates in converted .docx HTML.")
    parser.add_argument("--url", help="URL of a .docx file to download")
    parser.add_argument("--file", help="Local .docx file path")
    parser.add_argument("--headings", action="store_true", help="Treat h1-h6 elements as titles too")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    data = load_docx(url=args.url, file_path=args.file)
    conversion = convert_docx_to_html(data)
    soup = BeautifulSoup(conversion.html, "lxml")
    tags = collect_stats(soup)

    print("Tags:")
    for name, count in tags.most_common():
        print(f"{name}: {count}")

    print("\nTop-level elements:")
    for element in parse_top_level_elements(conversion.html):
        title = find_title(element, include_headings=args.headings)
        marker = f"TITLE {title!r}" if title is not None else ""
        print(f"<{element.name}> {marker}".rstrip())

    if conversion.messages:
        print("\nConverter messages:")
        for message in conversion.messages:
            print(message)


def load_docx(*, url: str | None, file_path: str | None) -> bytes:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.content

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"Document not found: {path}")
    return asyncio.run(read_docx_bytes(path))


def collect_stats(soup: BeautifulSoup) -> Counter:
    tags = Counter()
    for tag in soup.find_all(True):
        tags[tag.name] += 1
    return tags


if __name__ == "__main__":
    main()

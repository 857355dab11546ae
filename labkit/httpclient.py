"""Fetch a URL, show its headers and optionally save or print the body."""

from __future__ import annotations

import sys
import urllib.request
from dataclasses import dataclass
from html.parser import HTMLParser
from pathlib import Path

OUTPUT_FILE = "resp-output.txt"


@dataclass(frozen=True)
class Options:
    url: str
    write_file: bool
    print_file: bool


def parse_args(argv: list[str] | None = None) -> Options:
    """The last argument is the URL; -w and -p may appear anywhere."""
    args = sys.argv[1:] if argv is None else list(argv)
    return Options(args[-1] if args else "", "-w" in args, "-p" in args)


class _TagStripper(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.parts: list[str] = []

    def handle_data(self, data: str) -> None:
        self.parts.append(data)

    def handle_entityref(self, name: str) -> None:
        self.parts.append(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self.parts.append(f"&#{name};")


def strip_tags(text: str) -> str:
    """Remove HTML tags and comments, keeping text and entity references."""
    stripper = _TagStripper()
    stripper.feed(text)
    stripper.close()
    return "".join(stripper.parts)


def clean_for_screen(body: str) -> str:
    return strip_tags(body).replace("\n\n", "")


def fetch(url: str) -> tuple[list[tuple[str, str]], str]:
    """Return the response headers and the body decoded leniently as UTF-8."""
    with urllib.request.urlopen(url) as response:
        headers = [(name.lower(), value) for name, value in response.headers.items()]
        body = response.read().decode("utf-8", errors="replace")
    return headers, body


def _format_headers(headers: list[tuple[str, str]]) -> str:
    lines = [f'    "{name}": "{value}",' for name, value in headers]
    return "{\n" + "".join(line + "\n" for line in lines) + "}"


def main(argv: list[str] | None = None) -> int:
    options = parse_args(argv)
    headers, body = fetch(options.url)
    print(f"Headers:\n{_format_headers(headers)}")
    if options.write_file:
        Path(OUTPUT_FILE).write_text(body, encoding="utf-8")
    if options.print_file:
        print(clean_for_screen(body))
    return 0
"""Small web applications: a greeting server and a hello/bye server."""

from __future__ import annotations

import argparse
import re
from collections.abc import Callable
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import unquote, urlsplit

INDEX = "Welcome to your very own server, but there is nothing at the main branch\n"
NOT_FOUND = (404, "Not Found")
_U8 = re.compile(r"\+?[0-9]+")

Responder = Callable[[str, str, bytes], tuple[int, str]]


def greeting(name: str, age: int) -> str:
    return f"Greetz, {age} year old named {name}!"


def age_check(name: str, age: int) -> str:
    if age > 18:
        return f"Welcome, {name}, your age {age} means you can view this content!"
    return f"Sorry, {name}, you are not the right age, since you are only {age} years old"


def _segments(path: str) -> list[str]:
    return [unquote(part) for part in urlsplit(path).path.split("/") if part]


def _parse_age(text: str) -> int | None:
    if not _U8.fullmatch(text):
        return None
    value = int(text)
    return value if value <= 255 else None


def respond(
    method: str,
    path: str,
    body: bytes = b"",
    bacon_path: str | Path = "bacon.txt",
    upload_path: str | Path = "/tmp/data.txt",
) -> tuple[int, str]:
    """Route a request of the greeting server; return status and text."""
    segments = _segments(path)
    if method == "GET":
        if not segments:
            return 200, INDEX
        if segments == ["bacon"]:
            try:
                return 200, Path(bacon_path).read_text(encoding="utf-8") + "\n"
            except OSError:
                return 500, "Unable to open file"
        if len(segments) == 3 and segments[0] in ("greetz", "ofage"):
            age = _parse_age(segments[2])
            if age is None:
                return NOT_FOUND
            handler = greeting if segments[0] == "greetz" else age_check
            return 200, handler(segments[1], age)
    if method == "POST" and segments == ["upload"]:
        try:
            Path(upload_path).write_bytes(body)
        except OSError as error:
            return 500, str(error)
        return 200, f"Wrote {len(body)} bytes out to file"
    return NOT_FOUND


def hello_respond(path: str, bacon_text: str) -> tuple[int, str]:
    """Route a GET request of the hello/bye server."""
    segments = _segments(path)
    if segments[:1] == ["bacon"]:
        return 200, bacon_text
    if segments == ["hello", "you"]:
        return 200, "Hello, you\n"
    if segments[:1] == ["bye"] and len(segments) >= 2:
        return 200, f"Good bye, {segments[1]}!\n"
    return NOT_FOUND


def serve(host: str, port: int, responder: Responder) -> None:
    """Serve HTTP forever, answering each request with the responder."""

    class Handler(BaseHTTPRequestHandler):
        def _answer(self) -> None:
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length else b""
            status, text = responder(self.command, self.path, body)
            data = text.encode()
            self.send_response(status)
            self.send_header("Content-Type", "text/plain; charset=utf-8")
            self.send_header("Content-Length", str(len(data)))
            self.end_headers()
            self.wfile.write(data)

        do_GET = do_POST = do_PUT = do_DELETE = _answer

    with ThreadingHTTPServer((host, port), Handler) as server:
        server.serve_forever()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="webapp", description="Run a small web server.")
    parser.add_argument("style", nargs="?", choices=("greetz", "hello"), default="greetz")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int)
    args = parser.parse_args(argv)

    if args.style == "greetz":
        serve(args.host, args.port or 8000, lambda m, p, b: respond(m, p, b))
    else:
        bacon_text = Path("bacon.txt").read_text(encoding="utf-8")

        def responder(method: str, path: str, body: bytes) -> tuple[int, str]:
            if method != "GET":
                return 405, "Method Not Allowed"
            return hello_respond(path, bacon_text)

        serve(args.host, args.port or 8080, responder)
    return 0
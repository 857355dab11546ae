"""Fetch a page over a raw TLS connection."""

from __future__ import annotations

import argparse
import socket
import ssl


def build_request(host: str, line_ending: str = "\r\n") -> str:
    return f"GET / HTTP/1.1{line_ending}Host: {host}{line_ending}{line_ending}"


def fetch(host: str, port: int, server_name: str, request: str | bytes) -> bytes:
    """Send the request over TLS and read until the server closes the connection."""
    data = request.encode() if isinstance(request, str) else request
    context = ssl.create_default_context()
    with socket.create_connection((host, port)) as raw:
        with context.wrap_socket(raw, server_hostname=server_name) as tls:
            tls.sendall(data)
            chunks = []
            while chunk := tls.recv(8192):
                chunks.append(chunk)
    return b"".join(chunks)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tlsfetch", description="Fetch a page over TLS.")
    parser.add_argument("--host", default="www.google.com")
    parser.add_argument("--port", type=int, default=443)
    parser.add_argument("--server-name", default="google.com")
    parser.add_argument("--bare-newlines", action="store_true")
    args = parser.parse_args(argv)

    request = build_request(args.host, "\n" if args.bare_newlines else "\r\n")
    response = fetch(args.host, args.port, args.server_name, request)
    print(response.decode("utf-8", errors="replace"))
    return 0
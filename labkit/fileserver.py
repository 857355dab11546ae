"""A tiny TCP command server for listing files and making directories."""

from __future__ import annotations

import argparse
import os
import socket
from pathlib import Path

UNACCEPTABLE = "Unacceptable command"
PROMPT = b"> "


def make_directory(path: str | Path) -> str:
    """Create the directory and its parents; report success or the error text."""
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as error:
        return str(error)
    return "Success"


def file_listing(directory: str | Path = ".") -> str:
    """Concatenate the paths of the directory's entries."""
    with os.scandir(directory) as entries:
        return "".join(os.path.join(str(directory), entry.name) for entry in entries)


def handle_command(request: str, directory: str | Path = ".") -> str:
    """Answer one request line."""
    params = request.split()
    if not params:
        raise ValueError("empty request")
    command = params[0]
    if command == "flist":
        return file_listing(directory)
    if command == "md":
        if len(params) < 2:
            raise ValueError("md needs a directory name")
        return make_directory(os.path.join(str(directory), params[1]))
    return UNACCEPTABLE


def _serve_connection(conn: socket.socket, directory: str | Path = ".") -> None:
    try:
        conn.sendall(PROMPT)
    except OSError as error:
        print(f"Received an error on write! {error}")
    data = conn.recv(512)
    if not data:
        return
    request = data.decode("utf-8")
    print(f"Received: {request}")
    response = handle_command(request, directory)
    try:
        conn.sendall(response.encode())
    except OSError as error:
        print(f"Received an error on write! {error}")


def serve(host: str = "0.0.0.0", port: int = 3333) -> None:
    """Accept connections forever, answering one request on each."""
    with socket.create_server((host, port)) as listener:
        while True:
            conn, _ = listener.accept()
            with conn:
                _serve_connection(conn)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fileserver", description="Serve file commands.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=3333)
    args = parser.parse_args(argv)
    serve(args.host, args.port)
    return 0
"""Interactive client for the file command server."""

from __future__ import annotations

import argparse
import re
import socket
import sys
from collections.abc import Iterable
from typing import TextIO

_EXIT = re.compile(r"^[eE][xX][iI][tT]$")
_COMMANDS = ("flist", "md")


def validate_input(line: str) -> bool:
    """Tell whether the line starts with a known command."""
    params = line.split()
    if not params:
        raise ValueError("empty command")
    return params[0] in _COMMANDS


def is_exit(line: str) -> bool:
    return _EXIT.match(line) is not None


def run_session(sock: socket.socket, lines: Iterable[str], output: TextIO) -> None:
    """Print the server's greeting, then send each valid line and print the answer."""
    print(sock.recv(4096).decode("utf-8", errors="replace"), file=output)
    for raw in lines:
        line = raw.strip()
        if is_exit(line):
            break
        try:
            valid = validate_input(line)
        except ValueError:
            valid = False
        if not valid:
            print("Not a valid command", file=output)
            continue
        try:
            sock.sendall(line.encode())
        except OSError as error:
            raise ConnectionError("Unable to write to server") from error
        print(sock.recv(4096).decode("utf-8", errors="replace"), file=output)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fileclient", description="Talk to a file server.")
    parser.add_argument("server", help="host:port")
    args = parser.parse_args(argv)

    host, _, port = args.server.rpartition(":")
    try:
        sock = socket.create_connection((host, int(port)))
    except (OSError, ValueError) as error:
        raise ConnectionError(f"Unable to connect to {args.server}") from error
    with sock:
        print(f"Successfully connected to {args.server}")
        run_session(sock, sys.stdin, sys.stdout)
    return 0
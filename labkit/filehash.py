"""SHA-256 digests of the files in a directory."""

from __future__ import annotations

import argparse
import hashlib
import os
import socket
import threading
from pathlib import Path


def hash_files(directory: str | Path) -> list[tuple[str, str]]:
    """Return (path, hex digest) for each non-directory entry of the directory.

    File contents must be valid UTF-8 text.
    """
    results = []
    with os.scandir(directory) as entries:
        for entry in entries:
            path = os.path.join(directory, entry.name)
            if os.path.isdir(path):
                continue
            data = Path(path).read_bytes()
            data.decode("utf-8")
            results.append((path, hashlib.sha256(data).hexdigest()))
    return results


def _drain(sock: socket.socket, received: list[bytes]) -> None:
    while chunk := sock.recv(4096):
        received.append(chunk)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="filehash", description="Hash the files in a directory.")
    parser.add_argument("directory", nargs="?", default=os.getcwd())
    args = parser.parse_args(argv)

    reader, writer = socket.socketpair()
    received: list[bytes] = []
    thread = threading.Thread(target=_drain, args=(reader, received))
    thread.start()
    with reader, writer:
        for path, digest in hash_files(args.directory):
            writer.sendall(f"{path} : {digest}".encode())
        writer.shutdown(socket.SHUT_WR)
        thread.join()
    print(b"".join(received).decode("utf-8", errors="replace"))
    return 0
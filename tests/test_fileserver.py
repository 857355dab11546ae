import os
import socket
import threading

import pytest

from labkit.fileserver import (
    UNACCEPTABLE,
    _serve_connection,
    file_listing,
    handle_command,
    make_directory,
)


def test_make_directory_creates_nested(tmp_path):
    target = tmp_path / "a" / "b"
    assert make_directory(target) == "Success"
    assert target.is_dir()


def test_make_directory_reports_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    assert make_directory(blocker / "sub") != "Success"
    assert not (blocker / "sub").exists()


def test_file_listing_concatenates(tmp_path):
    (tmp_path / "one").write_text("")
    listing = file_listing(str(tmp_path))
    assert listing == os.path.join(str(tmp_path), "one")


def test_handle_command(tmp_path):
    assert handle_command("bogus", tmp_path) == UNACCEPTABLE
    assert handle_command("md newdir", tmp_path) == "Success"
    assert (tmp_path / "newdir").is_dir()
    assert "newdir" in handle_command("flist", tmp_path)


def test_handle_command_errors(tmp_path):
    with pytest.raises(ValueError):
        handle_command("   ", tmp_path)
    with pytest.raises(ValueError):
        handle_command("md", tmp_path)


def test_connection_round_trip(tmp_path):
    server, client = socket.socketpair()
    thread = threading.Thread(target=_serve_connection, args=(server, tmp_path))
    thread.start()
    assert client.recv(16) == b"> "
    client.sendall(b"nope")
    thread.join()
    assert client.recv(100) == UNACCEPTABLE.encode()
    server.close()
    client.close()
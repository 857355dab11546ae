import pytest

from labkit.webapp import INDEX, NOT_FOUND, age_check, greeting, hello_respond, respond


def test_greeting_and_age_check():
    assert greeting("Ann", 30) == "Greetz, 30 year old named Ann!"
    assert age_check("Ann", 19).startswith("Welcome, Ann")
    assert age_check("Ann", 18).startswith("Sorry, Ann")


def test_index_and_routes(tmp_path):
    assert respond("GET", "/") == (200, INDEX)
    assert respond("GET", "/greetz/Bo/7") == (200, greeting("Bo", 7))
    assert respond("GET", "/ofage/Bo/40") == (200, age_check("Bo", 40))
    assert respond("GET", "/nothing") == NOT_FOUND


@pytest.mark.parametrize("age", ["256", "-1", "x"])
def test_bad_age_is_not_found(age):
    assert respond("GET", f"/greetz/Bo/{age}") == NOT_FOUND


def test_bacon_and_upload(tmp_path):
    bacon = tmp_path / "bacon.txt"
    bacon.write_text("crispy")
    assert respond("GET", "/bacon", bacon_path=bacon) == (200, "crispy\n")
    target = tmp_path / "up.txt"
    status, text = respond("POST", "/upload", b"hello", upload_path=target)
    assert (status, text) == (200, "Wrote 5 bytes out to file")
    assert target.read_bytes() == b"hello"
    assert respond("GET", "/bacon", bacon_path=tmp_path / "missing")[0] == 500


def test_hello_respond():
    assert hello_respond("/bacon", "b") == (200, "b")
    assert hello_respond("/hello/you", "b") == (200, "Hello, you\n")
    assert hello_respond("/bye/Sam", "b") == (200, "Good bye, Sam!\n")
    assert hello_respond("/bye", "b") == NOT_FOUND
    assert hello_respond("/hello/you/more", "b") == NOT_FOUND
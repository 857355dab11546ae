from labkit.tlsfetch import build_request, fetch


def test_build_request_crlf():
    assert build_request("www.google.com") == "GET / HTTP/1.1\r\nHost: www.google.com\r\n\r\n"


def test_build_request_lf():
    assert build_request("www.wrox.com", "\n") == "GET / HTTP/1.1\nHost: www.wrox.com\n\n"


def test_fetch_reads_until_close(mocker):
    connect = mocker.patch("socket.create_connection")
    context = mocker.patch("ssl.create_default_context").return_value
    tls = context.wrap_socket.return_value.__enter__.return_value
    tls.recv.side_effect = [b"HTTP/1.1 200", b" OK", b""]
    result = fetch("host.example.com", 443, "example.com", "GET")
    assert result == b"HTTP/1.1 200 OK"
    connect.assert_called_once_with(("host.example.com", 443))
    tls.sendall.assert_called_once_with(b"GET")
    assert context.wrap_socket.call_args.kwargs["server_hostname"] == "example.com"
import socket

import pytest

from tcpchat.cli import main, parse_address


def test_default_port():
    assert parse_address([]) == ":8989"


def test_given_port():
    assert parse_address(["1234"]) == ":1234"


def test_too_many_arguments_raise():
    with pytest.raises(ValueError, match=r"\[USAGE\]: ./TCPChat \$port"):
        parse_address(["1", "2"])


def test_main_usage_error(capsys):
    assert main(["1", "2"]) == 1
    assert capsys.readouterr().out == "[USAGE]: ./TCPChat $port\n"


def test_main_bad_port_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["notaport"]) == 1
    captured = capsys.readouterr()
    assert "Server online..." in captured.out
    assert "Server error:" in captured.err


def test_main_port_in_use_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "logs").mkdir()
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as busy:
        busy.bind(("0.0.0.0", 0))
        busy.listen()
        port = busy.getsockname()[1]
        status = main([str(port)])
    assert status == 1
    assert "Server error:" in capsys.readouterr().err
    assert (tmp_path / "logs" / f"log{port}").exists()
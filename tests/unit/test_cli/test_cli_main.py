"""Tests for the rfcnav command line interface."""

from unittest.mock import MagicMock, patch

import pytest

from rfcnav.cli.main import create_parser, main

RFC_TEXT = "Title\n\n1.  Introduction\n\n2.  Terminology\n   text\n"


@pytest.fixture
def cli_env(monkeypatch, tmp_path):
    """Isolate configuration to tmp_path/cache."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("RFC_CACHE_DIR", str(tmp_path / "cache"))
    monkeypatch.delenv("RFC_DOWNLOAD_ENABLED", raising=False)
    monkeypatch.delenv("RFC_DOWNLOAD_SOURCE", raising=False)
    monkeypatch.delenv("RFC_REQUEST_TIMEOUT", raising=False)
    return tmp_path / "cache"


@pytest.fixture
def paged_file(tmp_path, paged):
    path = tmp_path / "rfc3.txt"
    path.write_text(paged(3), encoding="utf-8")
    return path


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: rfcnav" in capsys.readouterr().out


def test_parser_lists_commands():
    help_text = create_parser().format_help()

    for command in ("open-rfc", "go-to-page", "next-page", "prev-page", "cache-dir"):
        assert command in help_text


def test_cache_dir(cli_env, capsys):
    assert main(["cache-dir"]) == 0
    assert capsys.readouterr().out.strip() == str(cli_env)


def test_open_rfc_from_cache(cli_env, capsys):
    cli_env.mkdir()
    (cli_env / "rfc2223.txt").write_text(RFC_TEXT, encoding="utf-8")

    exit_code = main(["open-rfc", "rfc:2223#section-1", "--context", "1"])
    stdout = capsys.readouterr().out

    assert exit_code == 0
    assert "rfc2223.txt: page 1/1, line 3, column 1" in stdout
    assert ">     3  1.  Introduction" in stdout


def test_open_rfc_fragment_option(cli_env, capsys):
    cli_env.mkdir()
    (cli_env / "rfc2223.txt").write_text(RFC_TEXT, encoding="utf-8")

    assert main(["open-rfc", "2223", "--fragment", "L5", "--context", "0"]) == 0
    assert "line 5, column 1" in capsys.readouterr().out


def test_open_rfc_missing_without_download(cli_env, capsys):
    exit_code = main(["open-rfc", "9999", "--no-download"])

    assert exit_code == 1
    assert "not cached and downloads are disabled" in capsys.readouterr().out
    assert not (cli_env / "rfc9999.txt").exists()


def test_open_rfc_downloads(cli_env, capsys):
    response = MagicMock(status_code=200, content=RFC_TEXT.encode())

    with patch("rfcnav.collection.fetcher.requests.get", return_value=response) as mock_get:
        exit_code = main(["open-rfc", "2223"])

    stdout = capsys.readouterr().out
    assert exit_code == 0
    assert "Downloaded to" in stdout
    assert (cli_env / "rfc2223.txt").read_text(encoding="utf-8") == RFC_TEXT
    assert mock_get.call_args.args[0] == "https://www.rfc-editor.org/rfc/rfc2223.txt"


def test_open_rfc_download_failure(cli_env, capsys):
    response = MagicMock(status_code=404, content=b"")

    with patch("rfcnav.collection.fetcher.requests.get", return_value=response):
        exit_code = main(["open-rfc", "2223"])

    assert exit_code == 1
    assert "status 404" in capsys.readouterr().out


def test_open_rfc_invalid_reference(cli_env, capsys):
    assert main(["open-rfc", "not-an-rfc"]) == 1
    assert "Not a valid RFC reference" in capsys.readouterr().out


def test_go_to_page(paged_file, capsys):
    exit_code = main(["go-to-page", str(paged_file), "2", "--rows-per-page", "5"])

    assert exit_code == 0
    assert "page 2/3, line 14" in capsys.readouterr().out


def test_next_page(paged_file, capsys):
    assert main(["next-page", str(paged_file), "--row", "5"]) == 0
    assert "page 2/3, line 11" in capsys.readouterr().out


def test_prev_page(paged_file, capsys):
    assert main(["prev-page", str(paged_file), "--row", "25"]) == 0
    assert "page 3/3, line 22" in capsys.readouterr().out


def test_page_command_on_missing_file(tmp_path, capsys):
    exit_code = main(["go-to-page", str(tmp_path / "missing.txt"), "2"])

    assert exit_code == 1
    assert "go-to-page failed" in capsys.readouterr().out

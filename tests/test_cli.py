from unittest import mock

import pytest

from q3logcatcher.cli import build_parser, main, parse_duration

LOG = (
    "Game_Start: FFA in arena 0\n"
    "Kill: 1 2 6: JavaScripter killed twist by MOD_ROCKET 5 in arena 0\n"
    "Exit: Timelimit hit.\n"
)


def test_parse_duration_default_value():
    assert parse_duration("10s") == 10


def test_parse_duration_units_agree():
    assert parse_duration("1h") == parse_duration("60m") == parse_duration("3600s")
    assert parse_duration("1m30s") == parse_duration("90s")
    assert parse_duration("1500ms") == pytest.approx(parse_duration("1.5s"))
    assert parse_duration("-2s") == -parse_duration("2s")
    assert parse_duration("0") == 0


@pytest.mark.parametrize("text", ["", "abc", "10", "s", "1x", "1s2"])
def test_parse_duration_invalid(text):
    with pytest.raises(ValueError):
        parse_duration(text)


def test_parser_defaults():
    args = build_parser().parse_args(["--dbconn", "mongodb://localhost:27017", "--path", "/qconsole.log"])
    assert args.dbname == "quake3"
    assert args.container == "quake3-server"
    assert args.interval == 10
    assert args.socket is False
    assert args.path == "/qconsole.log"


def test_parser_equals_form_and_socket():
    args = build_parser().parse_args(
        ["--dbconn=mongodb://mongodb:27017", "--container=quake3-server", "--path=/run/docker.sock", "--socket"]
    )
    assert args.socket is True
    assert args.dbconn == "mongodb://mongodb:27017"
    assert args.path == "/run/docker.sock"


def test_parser_requires_path():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--dbconn", "mongodb://localhost:27017"])


def test_main_missing_file(tmp_path, capsys):
    code = main(["--dbconn", "mongodb://localhost:27017", "--path", str(tmp_path / "unknown.log")])
    captured = capsys.readouterr()
    assert code == 1
    assert "Revision: unknown" in captured.out
    assert "[ERROR] NewClient" in captured.err


def test_main_missing_socket(tmp_path, capsys):
    code = main(["--dbconn", "mongodb://localhost:27017", "--path", str(tmp_path / "d.sock"), "--socket"])
    assert code == 1
    assert "does not exist" in capsys.readouterr().err


def test_main_bad_dbconn(tmp_path, capsys):
    path = tmp_path / "qconsole.log"
    path.write_text(LOG)
    code = main(["--dbconn", "mongo://localhost:27017", "--path", str(path)])
    assert code == 1
    assert "[ERROR] catcher.New" in capsys.readouterr().err


@mock.patch("pymongo.MongoClient")
def test_main_parses_file(mongo_client, tmp_path):
    path = tmp_path / "qconsole.log"
    path.write_text(LOG)
    code = main(["--dbconn", "mongodb://localhost:27017", "--path", str(path)])
    assert code == 0
    mongo_client.assert_called_once_with("mongodb://localhost:27017")
    collection = mongo_client.return_value.__getitem__.return_value.__getitem__.return_value
    assert collection.insert_one.call_count == 1
    document = collection.insert_one.call_args.args[0]
    assert document["kills"] == [{"killer": "JavaScripter", "victim": "twist"}]
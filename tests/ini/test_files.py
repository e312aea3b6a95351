import json

import pytest

from rawini import (
    IniError,
    IniJsonParser,
    IniParser,
    IniYamlParser,
    dump,
    dumps,
    load,
    loads,
)
from rawini.ini import parser

TEST_INI = """\
; 头部注释
[General]
name=世界
yes=no
list=a, b,c

# dummy line
[Empty]
"""


def test_file_round_trip(tmp_path):
    path = tmp_path / "test.ini"
    path.write_text(TEST_INI, encoding="utf-8")

    doc = load(str(path), "utf-8")
    assert doc.header == ["; 头部注释"]
    assert doc.has_value("General", "list", "b")

    doc.append_entry("General", "list", "d")
    dump(doc, str(path))
    assert path.read_text(encoding="utf-8") == TEST_INI.replace(
        "list=a, b,c", "list=a, b,c,d")


def test_parser_newline(tmp_path):
    path = tmp_path / "crlf.ini"
    IniParser(str(path), "utf-8", "\r\n").write(loads("[s]\nk=v\n"))

    assert path.read_bytes() == b"[s]\r\nk=v\r\n"
    assert dumps(IniParser(str(path), "utf-8").read()) == "[s]\nk=v\n"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load(str(tmp_path / "missing.ini"))


def test_write_into_missing_dir(tmp_path):
    with pytest.raises(OSError):
        dump(loads(TEST_INI), str(tmp_path / "nope" / "out.ini"))


def test_encoding_guess(tmp_path, monkeypatch):
    path = tmp_path / "gbk.ini"
    path.write_bytes(TEST_INI.encode("gbk"))
    monkeypatch.setattr(
        parser, "guess_codec",
        lambda raw: {"encoding": "gbk", "confidence": 0.99})

    doc = IniParser(str(path), "ascii").read()
    assert doc.section("General").entry("name").value == "世界"


def test_encoding_fallback(tmp_path, monkeypatch):
    path = tmp_path / "gbk.ini"
    path.write_bytes(TEST_INI.encode("gbk"))
    monkeypatch.setattr(
        parser, "guess_codec",
        lambda raw: {"encoding": "no-such-codec", "confidence": 0.99})

    doc = IniParser(str(path), "ascii").read()
    assert dumps(doc) == TEST_INI


def test_parser_str():
    assert str(IniParser("a.ini", "utf-8")) == "INI file: a.ini(utf-8)"


@pytest.mark.parametrize("handler", [IniJsonParser, IniYamlParser])
def test_snapshot_round_trip(tmp_path, handler):
    doc = loads(TEST_INI)
    snapshot = handler(str(tmp_path / "snapshot"))
    snapshot.write(doc)

    copy = snapshot.read()
    assert copy.header == doc.header
    assert copy.sections == doc.sections
    assert dumps(copy) == TEST_INI


def test_json_snapshot_layout(tmp_path):
    path = tmp_path / "snapshot.json"
    IniJsonParser(str(path)).write(loads("top\n[s]\nk=v=w\n; c\n\n"))

    with open(path, encoding="utf-8") as fp:
        data = json.load(fp)

    assert data == {
        "header": ["top"],
        "sections": [
            {
                "name": "s",
                "entries": [{"key": "k", "value": "v=w"}, "; c", ""],
            }
        ],
    }


def test_json_snapshot_dummy_lines_stay_raw(tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_text(
        '{"sections": [{"name": "s", "entries": ["no equals", "# a=b"]}]}',
        encoding="utf-8")

    doc = IniJsonParser(str(path)).read()
    assert doc.header == []
    assert [i.semantic for i in doc.section("s")] == [False, False]
    assert dumps(doc) == "[s]\nno equals\n# a=b\n"


def test_empty_yaml_snapshot(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    doc = IniYamlParser(str(path)).read()
    assert doc.header == []
    assert len(doc) == 0
    assert dumps(doc) == ""


def test_snapshot_not_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(IniError):
        IniYamlParser(str(path)).read()


def test_load_with_separator(tmp_path):
    path = tmp_path / "sep.ini"
    path.write_text("[s]\nk=a|b\n", encoding="utf-8")

    doc = load(str(path), "utf-8", separator="|")
    assert doc.separator == "|"
    assert doc.has_value("s", "k", "b")

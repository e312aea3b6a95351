import pytest

from rawini.ini import is_section_header, is_semantic_line, parse_section_name


@pytest.mark.parametrize(
    "line",
    ["[title]", "[title] ", " [title] ", "\t[title]", "[]", "[a] ; comment"],
)
def test_section_header(line):
    assert is_section_header(line)


@pytest.mark.parametrize(
    "line",
    [";[]", "#[x]", "key=[value]", "[hanging bracket", "title]", "", "x [a]"],
)
def test_not_section_header(line):
    assert not is_section_header(line)


def test_section_name():
    names = {
        "[title]": "title",
        "[title] ": "title",
        " title] ": "title",
        " [title] ": "title",
        " [ti tle] ": "title",
        "[]": "",
    }
    for line, name in names.items():
        assert parse_section_name(line) == name


def test_section_name_keeps_tabs():
    # only brackets and spaces are deleted
    assert parse_section_name("[a\tb]") == "a\tb"


def test_semantic_line():
    assert is_semantic_line("key=value")
    assert is_semantic_line("=")
    assert is_semantic_line(" key = value ")
    assert is_semantic_line("a=b=c")


def test_non_semantic_line():
    assert not is_semantic_line("")
    assert not is_semantic_line("; key=value")
    assert not is_semantic_line("# key=value")
    assert not is_semantic_line("just some words")
    assert not is_semantic_line(" ")

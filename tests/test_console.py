import io

import pytest

from exprtree.console import (
    BAN_CORN_CHAR,
    BAN_VERT_CHAR,
    CONSOLE_WIDTH,
    DIV_CHAR,
    banner,
    divider,
)


def test_plain_divider_is_full_rule():
    buf = io.StringIO()
    divider(file=buf)
    assert buf.getvalue() == "-" * 80 + "\n"


@pytest.mark.parametrize("message", ["", "a", "ab", "Tokens", "String Expression", "x" * 79])
def test_divider_with_message_is_centred(message):
    buf = io.StringIO()
    divider(message, file=buf)
    text = buf.getvalue()
    assert text.endswith("\n")
    line = text[:-1]
    assert len(line) == CONSOLE_WIDTH
    left = len(line) - len(line.lstrip(DIV_CHAR))
    right = len(line) - len(line.rstrip(DIV_CHAR))
    assert line[left:len(line) - right] == message
    assert left - right == len(message) % 2


def test_divider_writes_to_stdout_by_default(capsys):
    divider("Tree")
    out = capsys.readouterr().out
    assert "Tree" in out
    assert len(out.rstrip("\n")) == CONSOLE_WIDTH


def test_plain_banner_shape():
    buf = io.StringIO()
    banner(file=buf)
    lines = buf.getvalue().splitlines()
    assert len(lines) == 3
    assert lines[0] == lines[2]
    assert lines[0] == BAN_CORN_CHAR + "-" * 78 + BAN_CORN_CHAR
    assert lines[1] == BAN_VERT_CHAR + " " * 78 + BAN_VERT_CHAR


@pytest.mark.parametrize("message", ["Expression Parser", "odd", "even", ""])
def test_banner_with_message(message):
    buf = io.StringIO()
    banner(message, file=buf)
    lines = buf.getvalue().splitlines()
    assert len(lines) == 3
    assert all(len(line) == CONSOLE_WIDTH for line in lines)
    middle = lines[1]
    assert middle[0] == BAN_VERT_CHAR and middle[-1] == BAN_VERT_CHAR
    inner = middle[1:-1]
    left = len(inner) - len(inner.lstrip(" "))
    right = len(inner) - len(inner.rstrip(" "))
    assert inner.strip(" ") == message.strip(" ")
    if message:
        assert left - right == len(message) % 2
import io
from unittest import mock

from triage_desk.extra import (
    MAX_FIELDS,
    clear_screen,
    read_csv_line,
    split_string,
    wait_for_key,
)


def test_read_csv_line_plain_fields():
    stream = io.StringIO("a,b,c\n")
    assert read_csv_line(stream, ",") == ["a", "b", "c"]


def test_read_csv_line_returns_none_at_end():
    stream = io.StringIO("x\n")
    assert read_csv_line(stream, ",") == ["x"]
    assert read_csv_line(stream, ",") is None


def test_read_csv_line_quoted_field_keeps_separator():
    stream = io.StringIO('"x,y",z\n')
    assert read_csv_line(stream, ",") == ["x,y", "z"]


def test_read_csv_line_custom_separator():
    stream = io.StringIO("one;two;three\n")
    assert read_csv_line(stream, ";") == ["one", "two", "three"]


def test_read_csv_line_empty_line_has_no_fields():
    assert read_csv_line(io.StringIO("\nnext\n"), ",") == []


def test_read_csv_line_reads_successive_lines():
    stream = io.StringIO("a,b\nc,d\n")
    assert read_csv_line(stream, ",") == ["a", "b"]
    assert read_csv_line(stream, ",") == ["c", "d"]


def test_split_string_trims_spaces():
    assert split_string("a, b ,c", ",") == ["a", "b", "c"]


def test_split_string_any_delimiter_character():
    assert split_string("a b,c", " ,") == ["a", "b", "c"]


def test_split_string_skips_empty_tokens():
    assert split_string(",,x,,y,", ",") == ["x", "y"]


def test_split_string_empty_text():
    assert split_string("", ",") == []


def test_clear_screen_runs_clear():
    with mock.patch("triage_desk.extra.subprocess.run") as run:
        result = clear_screen()
    assert result is None
    assert run.call_count == 1
    assert run.call_args.args[0] == ["clear"]


def test_clear_screen_tolerates_missing_command():
    with mock.patch(
        "triage_desk.extra.subprocess.run", side_effect=FileNotFoundError
    ) as run:
        result = clear_screen()
    assert result is None
    assert run.call_count == 1
    assert run.call_args.args[0] == ["clear"]


def test_wait_for_key_consumes_one_line():
    stream = io.StringIO("x\nrest")
    assert wait_for_key(stream) == "x\n"
    assert stream.read() == "rest"
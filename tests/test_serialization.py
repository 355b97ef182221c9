from __future__ import annotations

import io
import json
import os
import stat

import pytest

from carbon_headlines.exceptions import SerializationError
from carbon_headlines.models import Headline
from carbon_headlines.serialization import read_json_file, write_json, write_json_file

HEADLINES = [
    Headline(
        source="Politico EU",
        title="EU agrees ETS2 delay",
        url="https://www.politico.eu/article/ets2-delay/",
        published_at="2026-01-05T12:00:00Z",
        excerpt="Full article body with “quotes” über",
    ),
    Headline(
        source="UK ETS",
        title="Consultation outcome",
        url="https://www.gov.uk/x",
        published_at="2026-01-04T10:00:00Z",
    ),
]


def test_write_json_to_stream_uses_two_space_indent():
    buf = io.StringIO()
    write_json(HEADLINES[:1], buf)

    text = buf.getvalue()
    assert text.startswith('[\n  {\n    "source": "Politico EU",')
    assert text.endswith("\n")
    assert json.loads(text)[0] == {
        "source": "Politico EU",
        "title": "EU agrees ETS2 delay",
        "url": "https://www.politico.eu/article/ets2-delay/",
        "publishedAt": "2026-01-05T12:00:00Z",
        "excerpt": "Full article body with “quotes” über",
        "isHeadline": True,
    }


def test_write_json_defaults_to_stdout(capsys):
    write_json({"ok": True})
    assert json.loads(capsys.readouterr().out) == {"ok": True}


def test_file_round_trip(tmp_path):
    path = str(tmp_path / "headlines.json")

    write_json_file(path, HEADLINES)
    back = read_json_file(path, Headline.list_from_json)

    assert back == HEADLINES
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o644


def test_read_without_decoder_returns_plain_json(tmp_path):
    path = tmp_path / "state.json"
    path.write_text('{"seen": ["a", "b"]}', encoding="utf-8")
    assert read_json_file(str(path)) == {"seen": ["a", "b"]}


def test_unencodable_value_is_serialization_error(tmp_path):
    with pytest.raises(SerializationError):
        write_json_file(str(tmp_path / "x.json"), {"bad": object()})
    with pytest.raises(SerializationError):
        write_json({1, 2}, io.StringIO())


def test_invalid_json_is_serialization_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SerializationError) as exc_info:
        read_json_file(str(path))
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_shape_mismatch_is_serialization_error(tmp_path):
    path = tmp_path / "wrong.json"
    path.write_text('["just", "strings"]', encoding="utf-8")

    with pytest.raises(SerializationError):
        read_json_file(str(path), Headline.list_from_json)


def test_missing_file_is_os_error(tmp_path):
    with pytest.raises(OSError):
        read_json_file(str(tmp_path / "absent.json"))
    with pytest.raises(OSError):
        write_json_file(str(tmp_path / "no-such-dir" / "out.json"), [])


def test_non_utf8_file_is_serialization_error(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"title": "\xe9t\xe9"}')

    with pytest.raises(SerializationError) as exc_info:
        read_json_file(str(path))
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_nan_is_rejected_instead_of_written():
    out = io.StringIO()
    with pytest.raises(SerializationError):
        write_json({"score": float("nan")}, out)
    assert out.getvalue() == ""

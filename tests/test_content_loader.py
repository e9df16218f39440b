import json
from pathlib import Path

import pytest

from dnsquiz.content_loader import OPTION_COUNT, load_question_set, load_question_set_from_path


def _write(path: Path, payload: dict) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def _question(question_id: str = "q1", **overrides) -> dict:
    raw = {
        "id": question_id,
        "question": "Which record maps a name to IPv4?",
        "options": ["AAAA", "A", "CNAME", "PTR"],
        "correct": 1,
        "explanation": "A records hold IPv4 addresses for ${domains.example}.",
    }
    raw.update(overrides)
    return raw


def test_load_bundled_question_set() -> None:
    question_set = load_question_set()
    assert question_set.id == "dns-knowledge"
    assert question_set.title == "DNS Knowledge Quiz"
    assert len(question_set.templates) == 59
    first = question_set.templates[0]
    assert first.id == "dns-01"
    assert first.options[first.correct_index] == "A record"
    for template in question_set.templates:
        assert len(template.options) == OPTION_COUNT
        assert 0 <= template.correct_index < OPTION_COUNT
    assert len({template.id for template in question_set.templates}) == len(question_set.templates)


def test_load_question_set_from_path(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "set.json",
        {"id": "s", "title": "S", "content_version": 2, "questions": [_question("q1"), _question("q2")]},
    )
    question_set = load_question_set_from_path(path)
    assert question_set.content_version == 2
    assert [template.id for template in question_set.templates] == ["q1", "q2"]
    assert question_set.templates[0].options == ("AAAA", "A", "CNAME", "PTR")
    assert question_set.templates[0].correct_index == 1


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"options": ["a", "b", "c"]}, "must have 4 options"),
        ({"correct": 4}, "out of range"),
        ({"correct": -1}, "out of range"),
        ({"correct": "x"}, "no valid correct index"),
        ({"question": "  "}, "has no text"),
        ({"id": ""}, "missing an id"),
    ],
)
def test_load_question_set_rejects_invalid_questions(tmp_path: Path, overrides: dict, message: str) -> None:
    path = _write(tmp_path / "bad.json", {"id": "s", "questions": [_question(**overrides)]})
    with pytest.raises(ValueError, match=message):
        load_question_set_from_path(path)


def test_load_question_set_rejects_missing_correct(tmp_path: Path) -> None:
    raw = _question()
    del raw["correct"]
    path = _write(tmp_path / "bad.json", {"id": "s", "questions": [raw]})
    with pytest.raises(ValueError, match="no valid correct index"):
        load_question_set_from_path(path)


def test_load_question_set_rejects_duplicate_ids(tmp_path: Path) -> None:
    path = _write(tmp_path / "dup.json", {"id": "s", "questions": [_question("q1"), _question("q1")]})
    with pytest.raises(ValueError, match="Duplicate question id: q1"):
        load_question_set_from_path(path)


def test_load_question_set_rejects_empty_set(tmp_path: Path) -> None:
    path = _write(tmp_path / "empty.json", {"id": "s", "questions": []})
    with pytest.raises(ValueError, match="has no questions"):
        load_question_set_from_path(path)

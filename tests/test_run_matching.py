"""Tests del script run_matching."""

import json

import pytest

from qixi_match.catalog import default_catalog
from qixi_match.scripts import run_matching


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return str(path)


@pytest.fixture
def selections(tmp_path):
    user1 = [
        {"id": "movies", "name": "看电影", "category": "entertainment", "importance": 5},
        {"id": "coffee", "name": "咖啡", "category": "food"},
    ]
    user2 = {"interests": [{"id": "movies", "name": "看电影", "category": "entertainment", "importance": 5}]}
    return _write(tmp_path, "a.json", user1), _write(tmp_path, "b.json", user2)


def _run(argv):
    with pytest.raises(SystemExit) as excinfo:
        run_matching.main(argv)
    return excinfo.value.code


def test_prints_json_payload(selections, capsys):
    user1, user2 = selections
    assert _run(["--user1", user1, "--user2", user2]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["overallScore"] == 30
    assert [i["id"] for i in payload["commonInterests"]] == ["movies"]
    assert [i["id"] for i in payload["uniqueInterests"]["user1"]] == ["coffee"]


def test_prints_summary(selections, tmp_path, capsys):
    user1, user2 = selections
    catalog = tmp_path / "catalog.json"
    catalog.write_text(default_catalog().model_dump_json(by_alias=True), encoding="utf-8")

    code = _run([
        "--user1", user1,
        "--user2", user2,
        "--catalog", str(catalog),
        "--summary",
        "--name1", "小明",
        "--name2", "小红",
    ])
    assert code == 0
    out = capsys.readouterr().out
    assert "小明 & 小红" in out
    assert "娱乐：100%" in out


def test_invalid_selection_exits_with_2(tmp_path, selections):
    user1, _ = selections
    empty = _write(tmp_path, "empty.json", [])
    assert _run(["--user1", user1, "--user2", empty]) == 2


def test_missing_file_exits_with_1(tmp_path, selections):
    user1, _ = selections
    assert _run(["--user1", user1, "--user2", str(tmp_path / "nope.json")]) == 1


def test_malformed_json_exits_with_2(tmp_path, selections):
    user1, _ = selections
    broken = tmp_path / "broken.json"
    broken.write_text('[{"id": "movies",', encoding="utf-8")
    assert _run(["--user1", user1, "--user2", str(broken)]) == 2

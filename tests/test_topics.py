import sys

from everydayread.topics import (
    ranked_labels,
    read_topics_file,
    run_crawler,
    search_link,
)


def test_read_topics_file_joins_lines(tmp_path):
    target = tmp_path / "data.json"
    target.write_text('{"topic":\n["a",\n"b"]}\n', encoding="utf-8")
    assert read_topics_file(target) == '{"topic":["a","b"]}'


def test_read_topics_file_keeps_korean(tmp_path):
    target = tmp_path / "data.json"
    target.write_text('{"topic": ["날씨"]}', encoding="utf-8")
    assert read_topics_file(target) == '{"topic": ["날씨"]}'


def test_read_topics_file_missing_returns_empty(tmp_path):
    assert read_topics_file(tmp_path / "absent.json") == ""


def test_search_link_appends_topic():
    link = search_link("날씨")
    assert link == "https://search.naver.com/search.naver?query=날씨"


def test_ranked_labels():
    assert ranked_labels(["날씨", "뉴스"]) == ["1위 날씨", "2위 뉴스"]


def test_ranked_labels_empty():
    assert ranked_labels([]) == []


def test_run_crawler_runs_script(tmp_path):
    output = tmp_path / "data.json"
    script = tmp_path / "crawler.py"
    script.write_text(
        "from pathlib import Path\n"
        f"Path({str(output)!r}).write_text('{{\"topic\": [\"x\"]}}')\n",
        encoding="utf-8",
    )
    assert run_crawler(script, sys.executable) == 0
    assert read_topics_file(output) == '{"topic": ["x"]}'


def test_run_crawler_reports_exit_code(tmp_path):
    script = tmp_path / "fail.py"
    script.write_text("raise SystemExit(3)\n", encoding="utf-8")
    assert run_crawler(script) == 3
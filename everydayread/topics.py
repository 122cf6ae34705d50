"""Trending-topic support: running the crawler and reading its output."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

__all__ = ["run_crawler", "read_topics_file", "search_link", "ranked_labels"]

SEARCH_URL = "https://search.naver.com/search.naver?query="
DEFAULT_CRAWLER = Path("python") / "crawler.py"
DEFAULT_TOPICS_FILE = Path("data.json")


def run_crawler(script: str | Path = DEFAULT_CRAWLER, python: str | None = None) -> int:
    """Run the crawler script with a Python interpreter and return its exit code."""
    interpreter = python or sys.executable
    completed = subprocess.run([interpreter, str(script)], check=False)
    return completed.returncode


def read_topics_file(path: str | Path = DEFAULT_TOPICS_FILE) -> str:
    """Return the file's contents with line breaks removed, or "" if it cannot be opened."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read().replace("\n", "")
    except OSError:
        return ""


def search_link(topic: str) -> str:
    """Return the web search address for ``topic``."""
    return SEARCH_URL + topic


def ranked_labels(topics: list[str]) -> list[str]:
    """Prefix each topic with its rank, starting at 1."""
    return [f"{rank}위 {topic}" for rank, topic in enumerate(topics, start=1)]
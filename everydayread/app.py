"""Interactive daily-reading session: guideline sentences, trending topics and sample sources."""

from __future__ import annotations

import argparse
import random
import sys
import webbrowser
from pathlib import Path

from everydayread.dirlist import ensure_sources_dir, list_cpp_files
from everydayread.fetch import FetchError, fetch_text
from everydayread.sentences import parse_string_list
from everydayread.shuffle import ShuffleRandom
from everydayread.topics import (
    DEFAULT_CRAWLER,
    DEFAULT_TOPICS_FILE,
    ranked_labels,
    read_topics_file,
    run_crawler,
    search_link,
)

__all__ = ["Session", "read_source_file", "load_sentences", "main"]

SENTENCES_KEY = "cppguidelines"
TOPICS_KEY = "topic"
NOT_FOUND_BODY = "404: Not Found"

_HELP = (
    "commands: next (or empty line), cpp, crawl, topics, open <rank>, help, quit"
)


def read_source_file(path: str | Path) -> str:
    """Return the whole text of a source file, decoded as UTF-8."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def load_sentences(url: str, key: str = SENTENCES_KEY) -> list[str]:
    """Download the JSON document at ``url`` and return its list of sentences under ``key``."""
    text = fetch_text(url)
    if text == NOT_FOUND_BODY:
        raise FetchError(f"raw data download failed: {url}", status=404, body=text)
    return parse_string_list(text, key)


class Session:
    """State of one reading session: a shuffled sentence order, source files and topics."""

    def __init__(
        self,
        sentences: list[str],
        cpp_files: list[Path],
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.sentences = list(sentences)
        self.cpp_files = list(cpp_files)
        self.topics: list[str] = []
        self._order = ShuffleRandom(len(self.sentences), self.rng)

    @property
    def position(self) -> int:
        """Number of the sentence shown last within the current cycle (0 before any)."""
        return self._order.count

    def next_sentence(self) -> str:
        """Return the next guideline sentence in shuffled order."""
        return self.sentences[self._order.next_index()]

    def random_cpp_file(self) -> tuple[Path, str]:
        """Pick a random source file and return its path and contents."""
        if not self.cpp_files:
            raise IndexError("no source files to choose from")
        picker = ShuffleRandom(len(self.cpp_files), self.rng)
        path = Path(self.cpp_files[picker.next_index()])
        return path, read_source_file(path)

    def load_topics(self, path: str | Path = DEFAULT_TOPICS_FILE) -> list[str]:
        """Read the crawler's topic file, remember the topics and return ranked labels."""
        self.topics = parse_string_list(read_topics_file(path), TOPICS_KEY)
        return ranked_labels(self.topics)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="everydayread",
        description="Read a random guideline sentence, trending topics and sample sources.",
    )
    parser.add_argument("url", help="address of the JSON document holding the sentences")
    parser.add_argument("--key", default=SENTENCES_KEY, help="JSON key of the sentence list")
    parser.add_argument(
        "--root", type=Path, default=None, help="directory holding 'sources' and the topic file"
    )
    return parser


def _run_command(session: Session, command: str, root: Path) -> bool:
    """Execute one command; return False when the session should end."""
    name, _, argument = command.strip().partition(" ")
    if name in ("", "next"):
        sentence = session.next_sentence()
        print(f"[{session.position}] {sentence}")
    elif name == "cpp":
        path, content = session.random_cpp_file()
        print(path)
        print(content)
    elif name == "crawl":
        code = run_crawler(root / DEFAULT_CRAWLER)
        if code != 0:
            print(f"crawler exited with status {code}", file=sys.stderr)
    elif name == "topics":
        for label in session.load_topics(root / DEFAULT_TOPICS_FILE):
            print(label)
    elif name == "open":
        try:
            rank = int(argument)
        except ValueError:
            print("usage: open <rank>", file=sys.stderr)
            return True
        if not 1 <= rank <= len(session.topics):
            print(f"no topic with rank {rank}", file=sys.stderr)
            return True
        webbrowser.open(search_link(session.topics[rank - 1]))
    elif name == "help":
        print(_HELP)
    elif name == "quit":
        return False
    else:
        print(f"unknown command: {name}", file=sys.stderr)
    return True


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session reading commands from standard input."""
    args = _parser().parse_args(argv)
    root = Path.cwd() if args.root is None else args.root

    try:
        sentences = load_sentences(args.url, args.key)
    except (FetchError, ValueError, KeyError, TypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    ensure_sources_dir(root)
    session = Session(sentences, list_cpp_files(root))

    for line in sys.stdin:
        try:
            if not _run_command(session, line, root):
                break
        except (IndexError, OSError, ValueError, KeyError, TypeError) as exc:
            print(f"error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
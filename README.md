# everydayread

A small console companion for daily reading. It:

- downloads a JSON document holding a list of C++ guideline sentences and
  shows them one at a time in a shuffled order that does not repeat until
  every sentence has been shown;
- picks a random `.cpp` file below a local `sources/` directory and prints
  its path and contents;
- reads a list of trending topics from a JSON file and shows them ranked,
  and can open a web search for any of them.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Start an interactive session, giving the address of the sentence document:

```
everydayread https://example.com/sentences.json
```

Options:

- `--key KEY` — JSON key of the sentence list (default `cppguidelines`).
- `--root DIR` — directory holding `sources/`, `data.json` and
  `python/crawler.py` (default: the current directory).

On start the document is fetched and the list under the key is read; if the
download fails, the body is `404: Not Found`, or the JSON does not hold a list
of strings under the key, an error is printed and the command exits with
status 1. Then `<root>/sources/` is created if missing and every `.cpp` file
below it is collected.

Commands are read line by line from standard input:

- `next` or an empty line — print the next sentence, prefixed by its position
  in the current cycle;
- `cpp` — print the path and contents of a randomly chosen `.cpp` file;
- `crawl` — run `<root>/python/crawler.py` with the current Python
  interpreter;
- `topics` — read `<root>/data.json`, take the list under the key `topic` and
  print it ranked (`1위 ...`, `2위 ...`);
- `open <rank>` — open a web search for the topic with that rank;
- `help` — list the commands;
- `quit` — end the session (end of input does the same).

The package also ships a small binary-search exercise. It takes a number as
argument, or reads one from standard input, and looks it up in the sorted
list `1, 3, 5, 7, 9`, printing the index where it was found or a message that
it was not:

```
everydayread-binsearch 7
```

## Library use

- `everydayread.fetch.fetch_text(url, timeout=10.0)` downloads a URL and
  decodes it as UTF-8, raising `FetchError` (with `status` and `body` for HTTP
  errors) on failure; `decode_utf8` decodes bytes.
- `everydayread.sentences.parse_string_list(text, key)` returns the list of
  strings stored under `key` in a JSON object, raising `ValueError`,
  `KeyError` or `TypeError` for bad input.
- `everydayread.shuffle.ShuffleRandom(size, rng=None)` hands out the indices
  `0..size-1` in shuffled order through `next_index()`, starting over after
  the last; `count` is the position in the cycle and `count_digits()` its
  printed width. `random_index(size, rng=None)` picks one index.
- `everydayread.dirlist.ensure_sources_dir(root=None)` creates
  `<root>/sources`; `list_cpp_files(root=None)` returns the sorted `.cpp`
  paths below it.
- `everydayread.topics` provides `run_crawler`, `read_topics_file`,
  `search_link` and `ranked_labels`.
- `everydayread.binsearch.binary_search(data, target)` returns an index of
  `target` in sorted `data`, or `None`.
- `everydayread.app.Session(sentences, cpp_files, rng=None)` ties these
  together with `next_sentence()`, `random_cpp_file()`, `load_topics(path)`
  and the `position` property; `load_sentences(url, key)` and
  `read_source_file(path)` are available as well.

## What it does not do

The package does not collect trending topics itself. The `crawl` command only
runs a script at `python/crawler.py`, which is not included; the `topics`
command expects that script, or something else, to have written `data.json`
with a `"topic"` list. There is no graphical window: everything happens on
the console, and the arithmetic quiz window is not provided.
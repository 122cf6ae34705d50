import pytest

from everydayread.dirlist import ensure_sources_dir, list_cpp_files


def test_ensure_creates_directory(tmp_path):
    created = ensure_sources_dir(tmp_path)
    assert created == tmp_path / "sources"
    assert created.is_dir()


def test_ensure_is_idempotent(tmp_path):
    first = ensure_sources_dir(tmp_path)
    (first / "keep.cpp").write_text("int main() {}")
    second = ensure_sources_dir(tmp_path)
    assert second == first
    assert (second / "keep.cpp").exists()


def test_list_finds_nested_cpp_only(tmp_path):
    sources = ensure_sources_dir(tmp_path)
    nested = sources / "Algorithm" / "Search"
    nested.mkdir(parents=True)
    (nested / "BinarySearch.cpp").write_text("int main() {}")
    (sources / "top.cpp").write_text("")
    (sources / "header.h").write_text("")
    (nested / "notes.txt").write_text("")
    found = list_cpp_files(tmp_path)
    assert set(found) == {nested / "BinarySearch.cpp", sources / "top.cpp"}
    assert found == sorted(found)


def test_list_empty_directory(tmp_path):
    ensure_sources_dir(tmp_path)
    assert list_cpp_files(tmp_path) == []


def test_list_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_cpp_files(tmp_path)


def test_default_root_is_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    sources = ensure_sources_dir()
    (sources / "a.cpp").write_text("")
    assert [p.name for p in list_cpp_files()] == ["a.cpp"]
    assert (tmp_path / "sources").is_dir()
import pytest

from srcfmt_cli.errors import InvalidInputError
from srcfmt_cli.resolver import PathResolver


def test_directory_yields_immediate_children_only(tmp_path):
    src = tmp_path / "src"
    nested = src / "nested"
    nested.mkdir(parents=True)
    (src / "B.groovy").write_text("b")
    (src / "A.java").write_text("a")
    (nested / "Deep.java").write_text("deep")

    files = PathResolver(tmp_path).resolve("src")

    assert files == [src / "A.java", src / "B.groovy", nested]
    assert nested / "Deep.java" not in files


def test_single_file(tmp_path):
    (tmp_path / "A.java").write_text("a")
    assert PathResolver(tmp_path).resolve("A.java") == [tmp_path / "A.java"]


def test_absolute_path_ignores_cwd(tmp_path):
    target = tmp_path / "A.java"
    target.write_text("a")
    assert PathResolver(tmp_path / "elsewhere").resolve(str(target)) == [target]


def test_empty_directory(tmp_path):
    (tmp_path / "empty").mkdir()
    assert PathResolver(tmp_path).resolve("empty") == []


def test_missing_path(tmp_path):
    with pytest.raises(InvalidInputError):
        PathResolver(tmp_path).resolve("does-not-exist")


def test_defaults_to_process_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "A.java").write_text("a")
    assert PathResolver().resolve("A.java") == [tmp_path / "A.java"]

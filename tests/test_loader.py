import pytest

from flati18n import FormatError, Translator, load
from flati18n.loader import load_entries


def test_load_reads_every_language_file(locales):
    tr = load(locales, "en")
    assert len(tr) == 4
    assert tr.table.get("en", "bye") == "Goodbye"
    assert tr.table.get("es", "greet") == "Hola"


def test_comment_and_blank_lines_never_produce_entries(tmp_path):
    (tmp_path / "en").write_text("# hello=ignored\n\n   \nhello=Hello\n", encoding="utf-8")
    entries = load_entries(tmp_path)
    # a whitespace-only line has no separator and is skipped
    assert entries == [("en", "hello", "Hello")]


def test_load_twice_overwrites(locales):
    tr = load(locales, "en")
    size = len(tr)
    tr.load(locales, "en")
    assert len(tr) == size

    (locales / "en").write_text("bye=See you\nnew=New\n", encoding="utf-8")
    tr.load(locales, "es")
    assert tr.default_language == "es"
    assert tr.table.get("en", "bye") == "See you"
    assert tr.table.get("en", "hello") == "Hello {0}"
    assert len(tr) == size + 1


def test_file_name_is_normalized_tag(tmp_path):
    (tmp_path / "es-MX").write_text("greet=Qué onda\n", encoding="utf-8")
    (tmp_path / "pt-BR-extra").write_text("greet=Oi\n", encoding="utf-8")
    tr = load(tmp_path, "en")
    assert "es-mx:greet" in tr.table
    assert "pt-br:greet" in tr.table


def test_empty_separator_and_comment_use_defaults(tmp_path):
    (tmp_path / "en").write_text("#c=ignored\nk=v\n", encoding="utf-8")
    tr = load(tmp_path, "en", "", "")
    assert tr.table.snapshot() == {"en:k": "v"}


def test_custom_separator_and_comment(tmp_path):
    (tmp_path / "en").write_text("// note\ntitle: Hello: world\n", encoding="utf-8")
    tr = load(tmp_path, "en", ": ", "//")
    assert tr.println("en", "title") == "Hello: world"


def test_subdirectories_skipped_by_default(tmp_path):
    (tmp_path / "en").write_text("a=top\n", encoding="utf-8")
    nested = tmp_path / "extra"
    nested.mkdir()
    (nested / "fr").write_text("a=nested\n", encoding="utf-8")
    tr = load(tmp_path, "en")
    assert tr.table.get("fr", "a") is None


def test_recursive_uses_file_name_as_tag(tmp_path):
    (tmp_path / "en").write_text("a=top\n", encoding="utf-8")
    deep = tmp_path / "x" / "y"
    deep.mkdir(parents=True)
    (deep / "fr").write_text("a=nested\n", encoding="utf-8")
    tr = load(tmp_path, "en", recursive=True)
    assert tr.table.get("fr", "a") == "nested"


def test_recursive_does_not_follow_symlinked_directories(tmp_path):
    (tmp_path / "en").write_text("a=top\n", encoding="utf-8")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "fr").write_text("a=nested\n", encoding="utf-8")
    (sub / "loop").symlink_to(tmp_path, target_is_directory=True)
    tr = load(tmp_path, "en", recursive=True)
    assert tr.table.get("fr", "a") == "nested"
    assert len(tr) == 2


def test_malformed_lines_skipped_in_lenient_mode(tmp_path):
    (tmp_path / "en").write_text("garbage\nok=yes\n", encoding="utf-8")
    (tmp_path / ".DS_Store").write_bytes(b"\x00\x01\xff\xfebinary")
    tr = load(tmp_path, "en")
    assert tr.println("en", "ok") == "yes"


def test_malformed_line_raises_in_strict_mode(tmp_path):
    (tmp_path / "en").write_text("ok=yes\ngarbage\n", encoding="utf-8")
    with pytest.raises(FormatError) as exc:
        load(tmp_path, "en", strict=True)
    assert exc.value.lineno == 2
    assert exc.value.source.endswith("en")


def test_missing_directory_raises_oserror(tmp_path):
    tr = Translator()
    with pytest.raises(FileNotFoundError):
        tr.load(tmp_path / "nope", "de")
    # default language is set before the directory is read
    assert tr.default_language == "de"
    assert len(tr) == 0


def test_failed_load_commits_nothing(tmp_path, monkeypatch):
    (tmp_path / "en").write_text("a=1\n", encoding="utf-8")
    (tmp_path / "fr").write_text("a=2\n", encoding="utf-8")
    from flati18n import loader

    real = loader.read_lines

    def flaky(path, *args, **kwargs):
        if path.name == "fr":
            raise PermissionError(path)
        return real(path, *args, **kwargs)

    monkeypatch.setattr(loader, "read_lines", flaky)
    tr = Translator()
    with pytest.raises(PermissionError):
        tr.load(tmp_path, "en")
    assert len(tr) == 0

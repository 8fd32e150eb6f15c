import pytest


@pytest.fixture
def locales(tmp_path):
    d = tmp_path / "locales"
    d.mkdir()
    (d / "en").write_text("# English\nhello=Hello {0}\nbye=Goodbye\n", encoding="utf-8")
    (d / "es").write_text("hello=Hola {0}\n\ngreet=Hola\n", encoding="utf-8")
    return d

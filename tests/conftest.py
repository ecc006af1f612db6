from pathlib import Path

import pytest

from heritage_xml import codec

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _isolated_codec_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep HERITAGE_XML_* settings of the developer's shell out of the tests.

    The module-level codec caches its environment-derived config, so it is
    reset around every test as well.
    """
    for name in (
        "HERITAGE_XML_STRICT",
        "HERITAGE_XML_PRETTY_PRINT",
        "HERITAGE_XML_INDENT",
        "HERITAGE_XML_ENCODING",
        "HERITAGE_XML_XML_DECLARATION",
        "HERITAGE_XML_LAX_ATTRIBUTE_FORM",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(codec, "_default", None)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR

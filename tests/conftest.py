import pytest

from charsetutil.settings import ENV_DEFAULT_ENCODING, ENV_ON_DECODE_ERROR, get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    # Keep a developer's .env or shell overrides out of the tests.
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(ENV_DEFAULT_ENCODING, raising=False)
    monkeypatch.delenv(ENV_ON_DECODE_ERROR, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def malformed_samples():
    return [
        b"",
        b"hello",
        b"Clich\xe9 caf\xe9",
        b"a\x80\x80b",
        b"\x01\x80",
        b"\xc0\xafx",
        b"\xc3",
        b"\xc3\xa9\xa9",
        b"\xe2\x82",
        b"\xe2\x82\xac\xac",
        b"\xe0\x80\x80",
        b"\xed\xa0\x80",
        b"\xf0\x9f\x98\x80",
        b"\xff\xfe\x00\x7f",
        b"ok \xc3\xa9 \xe2\x82\xac \x80\x80 \xc2",
        bytes(range(256)),
    ]

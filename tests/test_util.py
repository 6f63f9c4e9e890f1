import dataclasses

import pytest

from optional_explanation import util
from optional_explanation.option import EMPTY
from optional_explanation.option import Option


@dataclasses.dataclass(frozen=True)
class Settings:
    name: str = util.env("TEST_NAME:anonymous")
    retries: int = util.env("TEST_RETRIES:3", convert=int)


def test_getenv(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TEST_PORT", "8080")
    monkeypatch.delenv("TEST_MISSING", raising=False)

    assert util.getenv("TEST_PORT", int) == Option(8080)
    assert util.getenv("TEST_MISSING") == EMPTY


def test_env_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("TEST_NAME", raising=False)
    monkeypatch.delenv("TEST_RETRIES", raising=False)

    assert Settings() == Settings(name="anonymous", retries=3)


def test_env_loads_and_converts(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TEST_NAME", "david")
    monkeypatch.setenv("TEST_RETRIES", "5")

    assert Settings() == Settings(name="david", retries=5)


def test_env_empty_default(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("TEST_BLANK", raising=False)

    @dataclasses.dataclass(frozen=True)
    class Blank:
        value: str = util.env("TEST_BLANK:")

    assert Blank().value == ""


def test_env_missing_raises(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("TEST_REQUIRED", raising=False)

    @dataclasses.dataclass(frozen=True)
    class Required:
        value: str = util.env("TEST_REQUIRED")

    with pytest.raises(KeyError) as ex:
        Required()

    assert ex.value.args == ("TEST_REQUIRED",)

from pathlib import Path

import pytest

from seealso_client.config import ClientConfig
from seealso_client.errors import ConfigError
from seealso_client.validation import (
    is_class_token,
    is_supported_url,
    load_lines_from_file,
    parse_named_value,
    validate_runtime_constraints,
)

VALID = {
    "services": (("isbn", "https://example.org/seealso"),),
    "views": (("list", "list"),),
    "view_flavours": ("csv", "list"),
    "default_view": "csv",
    "workers": 2,
    "request_timeout": None,
    "max_items": 10,
}


def test_is_supported_url() -> None:
    assert is_supported_url("https://example.com/a") is True
    assert is_supported_url("ftp://example.com/file") is False
    assert is_supported_url("/relative") is False


def test_is_class_token() -> None:
    assert is_class_token("isbn2wikipedia") is True
    assert is_class_token("seealso-container") is True
    assert is_class_token("two words") is False
    assert is_class_token("") is False


def test_parse_named_value() -> None:
    assert parse_named_value(" isbn = http://s/?a=b ") == ("isbn", "http://s/?a=b")
    with pytest.raises(ConfigError):
        parse_named_value("isbn")
    with pytest.raises(ConfigError):
        parse_named_value("=http://s/")


def test_validate_runtime_constraints_accepts_valid_values() -> None:
    validate_runtime_constraints(**VALID)


@pytest.mark.parametrize(
    "override",
    [
        {"services": ()},
        {"services": (("bad name", "http://s/"),)},
        {"services": (("isbn", "file:///tmp/x"),)},
        {"views": (("list", "table"),)},
        {"views": (("a b", "list"),)},
        {"default_view": "table"},
        {"workers": 0},
        {"request_timeout": 0},
        {"max_items": -1},
    ],
)
def test_validate_runtime_constraints_rejects_invalid_values(override: dict) -> None:
    with pytest.raises(ConfigError):
        validate_runtime_constraints(**{**VALID, **override})


def test_client_config_validates_on_construction() -> None:
    with pytest.raises(ConfigError):
        ClientConfig(services=(("isbn", "http://s/"),), workers=0)
    config = ClientConfig(services=(("isbn", "http://s/"),))
    assert config.default_view == "csv"
    assert config.request_timeout is None


def test_load_lines_from_file(tmp_path: Path) -> None:
    sample = tmp_path / "sample.txt"
    sample.write_text("one\n\n two \n# comment\n", encoding="utf-8")
    assert load_lines_from_file(str(sample)) == ["one", "two"]

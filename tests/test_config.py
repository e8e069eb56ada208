import dataclasses

import pytest

from passgen.config import (
    DEFAULT_CONFIG,
    MAX_LENGTH,
    MIN_LENGTH,
    ConfigError,
    LengthOutOfRange,
    NoCategorySelected,
    PasswordConfig,
    validate,
)

NO_CATEGORIES = dict(
    allow_symbols=False,
    allow_numbers=False,
    allow_uppercase=False,
    allow_lowercase=False,
)


def test_defaults():
    assert DEFAULT_CONFIG.length == 8
    assert DEFAULT_CONFIG.allow_symbols
    assert DEFAULT_CONFIG.allow_numbers
    assert DEFAULT_CONFIG.allow_uppercase
    assert DEFAULT_CONFIG.allow_lowercase
    assert validate(DEFAULT_CONFIG) is DEFAULT_CONFIG


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.length = 20


@pytest.mark.parametrize("length", [MIN_LENGTH, 18, MAX_LENGTH])
def test_length_in_range(length):
    config = PasswordConfig(length=length)
    assert validate(config) is config


@pytest.mark.parametrize("length", [0, -1, 7, 129, 1000])
def test_length_out_of_range(length):
    with pytest.raises(LengthOutOfRange) as excinfo:
        validate(PasswordConfig(length=length))
    assert excinfo.value.length == length
    assert "8" in str(excinfo.value)
    assert "128" in str(excinfo.value)


@pytest.mark.parametrize("length", [True, 8.0, "8", None])
def test_length_must_be_int(length):
    with pytest.raises(LengthOutOfRange):
        validate(PasswordConfig(length=length))


def test_no_category_selected():
    with pytest.raises(NoCategorySelected, match="At least one"):
        validate(PasswordConfig(length=8, **NO_CATEGORIES))


def test_length_error_reported_first():
    with pytest.raises(LengthOutOfRange):
        validate(PasswordConfig(length=7, **NO_CATEGORIES))


def test_errors_share_base_class():
    assert issubclass(LengthOutOfRange, ConfigError)
    assert issubclass(NoCategorySelected, ConfigError)
    assert issubclass(ConfigError, ValueError)

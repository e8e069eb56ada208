import pytest

from passgen.config import PasswordConfig


@pytest.fixture
def all_categories() -> PasswordConfig:
    return PasswordConfig(length=18)

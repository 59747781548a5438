import pytest

from chatcore.domain.exceptions import DomainValidationError
from chatcore.domain.value_objects import Permission


def test_bits():
    assert Permission.MEMBER == 0b001
    assert Permission.ADMIN == 0b010
    assert Permission.OWNER == 0b100
    assert Permission.ALL == 0b111


def test_from_names_combines_with_xor():
    assert Permission.from_names(["member", "admin"]) == 0b011
    assert Permission.from_names(["Owner"]) == 0b100
    assert Permission.from_names(["admin", "admin"]) == 0, "Repeated name cancels out"
    assert Permission.from_names([]) == 0


def test_from_names_rejects_unknown():
    with pytest.raises(DomainValidationError):
        Permission.from_names(["moderator"])


@pytest.mark.parametrize("value", [0, 1, 0b011, 0b111])
def test_validate_accepts_defined_bits(value):
    assert Permission.validate(value) == value


@pytest.mark.parametrize("value", [-1, 8, 0b1001, "1", True])
def test_validate_rejects_out_of_range(value):
    with pytest.raises(DomainValidationError):
        Permission.validate(value)

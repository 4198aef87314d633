import pytest

from chromapix.errors import (
    ChromapixError,
    ContractViolation,
    UnsupportedChannel,
    MissingBlendConstant,
    LookupMiss,
    NotFound,
    IndexNotFound,
    RangeInvalid,
    InvalidIndexRange,
    IndexOutOfBounds,
)


@pytest.mark.parametrize(
    "error, family, builtin",
    [
        (UnsupportedChannel, ContractViolation, ValueError),
        (MissingBlendConstant, ContractViolation, ValueError),
        (NotFound, LookupMiss, KeyError),
        (IndexNotFound, LookupMiss, KeyError),
        (InvalidIndexRange, RangeInvalid, ValueError),
        (IndexOutOfBounds, RangeInvalid, ValueError),
    ],
)
def test_error_families(error, family, builtin):
    assert issubclass(error, family)
    assert issubclass(error, builtin)
    assert issubclass(error, ChromapixError)


def test_lookup_miss_message_is_not_quoted():
    assert str(NotFound("Color name 'mauve' not found")) == "Color name 'mauve' not found"
    assert str(IndexNotFound()) == ""


def test_catch_as_builtin():
    with pytest.raises(KeyError):
        raise IndexNotFound("Index 300 not found in colormap")

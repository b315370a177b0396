"""Tests for error types and their formatting."""

from calcline.core.errors import (
    AllocationFailureError,
    CalcError,
    ErrorContext,
    ExpectedNumberError,
    InvalidNumberError,
    ParseError,
    ParseErrorKind,
    TrailingInputError,
    make_parse_error,
)


def test_hierarchy():
    for error_type in (
        TrailingInputError,
        ExpectedNumberError,
        InvalidNumberError,
        AllocationFailureError,
    ):
        assert issubclass(error_type, ParseError)
        assert issubclass(error_type, CalcError)


def test_default_messages():
    assert TrailingInputError().message == "invalid expression"
    assert ExpectedNumberError().message == "expected number"
    assert InvalidNumberError().message == "invalid number"
    assert AllocationFailureError().message == "failed to allocate memory"


def test_kinds():
    assert TrailingInputError.kind == ParseErrorKind.TRAILING_INPUT
    assert ExpectedNumberError.kind == ParseErrorKind.EXPECTED_NUMBER
    assert InvalidNumberError.kind == ParseErrorKind.INVALID_NUMBER
    assert AllocationFailureError.kind == ParseErrorKind.ALLOCATION_FAILURE


def test_message_without_context():
    error = ExpectedNumberError(pos=3)
    assert str(error) == "expected number"
    assert error.pos == 3


def test_context_caret_under_column():
    context = ErrorContext(source="1 + x", column=5)
    lines = context.format().splitlines()
    assert lines[0] == "column 5"
    assert lines[1].endswith("1 + x")
    assert lines[2].index("^") == lines[1].index("1 + x") + 4


def test_make_parse_error():
    error = make_parse_error(TrailingInputError, "1 2", 2)
    assert isinstance(error, TrailingInputError)
    assert error.pos == 2
    assert error.context is not None
    assert error.context.column == 3
    assert str(error).endswith("\ninvalid expression")

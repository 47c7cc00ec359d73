import pytest
from pydantic import ValidationError

from netfence.models import ParseResult


def test_parse_result_defaults_to_valid_and_empty() -> None:
    result = ParseResult()
    assert result.patterns == []
    assert result.is_valid is True
    assert result.errors == []


def test_validity_must_match_errors() -> None:
    ParseResult(patterns=["example.com"], is_valid=False, errors=["bad"])
    with pytest.raises(ValidationError):
        ParseResult(is_valid=False)
    with pytest.raises(ValidationError):
        ParseResult(is_valid=True, errors=["bad"])


def test_patterns_must_be_host_patterns() -> None:
    ParseResult(patterns=["*.example.com", "127.0.0.1", "localhost"])
    with pytest.raises(ValidationError):
        ParseResult(patterns=["https://example.com"])
    with pytest.raises(ValidationError):
        ParseResult(patterns=["Example.com"])

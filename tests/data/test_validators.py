"""Tests for request boundary validation."""

import pytest

from token_insights.config.defaults import LimitsParams
from token_insights.data.validators import RequestValidator
from token_insights.errors import DataQualityError, MalformedDataError


@pytest.fixture
def validator() -> RequestValidator:
    return RequestValidator()


class TestValidatePayload:
    """Test suite for payload validation."""

    def test_valid_payload_returns_data(self, validator) -> None:
        """Test that a valid payload yields its data array."""
        payload = {"data": ["1", "a", 2], "file": {"file_valid": True}}
        assert validator.validate_payload(payload) == ["1", "a", 2]

    @pytest.mark.parametrize("payload", [None, {}, [], "data"])
    def test_missing_body(self, validator, payload) -> None:
        """Test that an absent or empty body is rejected."""
        with pytest.raises(MalformedDataError, match="Request body is required"):
            validator.validate_payload(payload)

    def test_missing_data(self, validator) -> None:
        """Test that the data field is required."""
        with pytest.raises(MalformedDataError, match="data field is required"):
            validator.validate_payload({"file": {}})

    def test_file_must_be_object(self, validator) -> None:
        """Test that a non-dict file field is rejected."""
        with pytest.raises(MalformedDataError, match="file must be an object"):
            validator.validate_payload({"data": ["1"], "file": "x.png"})


class TestValidateTokens:
    """Test suite for token array validation."""

    def test_not_an_array(self, validator) -> None:
        """Test that data must be a list."""
        with pytest.raises(MalformedDataError, match="must be an array"):
            validator.validate_tokens("1,2,3")

    def test_empty_array(self, validator) -> None:
        """Test that an empty array is rejected."""
        with pytest.raises(MalformedDataError, match="cannot be empty"):
            validator.validate_tokens([])

    def test_too_many_tokens(self) -> None:
        """Test the maximum array length."""
        validator = RequestValidator(LimitsParams(max_tokens=3))
        validator.validate_tokens(["1", "2", "3"])

        with pytest.raises(MalformedDataError, match="maximum allowed length of 3"):
            validator.validate_tokens(["1", "2", "3", "4"])

    @pytest.mark.parametrize("item", [True, None, ["1"], {"a": 1}])
    def test_invalid_element_types(self, validator, item) -> None:
        """Test that only strings and numbers are accepted, bools excluded."""
        with pytest.raises(MalformedDataError, match="only strings and numbers"):
            validator.validate_tokens(["1", item])

    def test_string_too_long(self, validator) -> None:
        """Test the maximum string element length."""
        validator.validate_tokens(["x" * 100])

        with pytest.raises(MalformedDataError, match="cannot exceed 100 characters"):
            validator.validate_tokens(["x" * 101])

    @pytest.mark.parametrize("item", [1_000_000_000, -1_000_000_000, float("inf"), float("nan")])
    def test_number_out_of_range(self, validator, item) -> None:
        """Test that numbers must be finite and inside the configured range."""
        with pytest.raises(MalformedDataError, match="must be finite"):
            validator.validate_tokens([item])

    def test_boundary_numbers_accepted(self, validator) -> None:
        """Test that the range limits themselves are valid."""
        validator.validate_tokens([999_999_999, -999_999_999, 0.5])

    def test_errors_are_recoverable_data_quality_issues(self, validator) -> None:
        """Test the error classification of boundary failures."""
        with pytest.raises(DataQualityError) as exc_info:
            validator.validate_tokens([])
        assert exc_info.value.recoverable is True

    @pytest.mark.parametrize("item", ["1e200", "-1000000000", "170141183460469231731687303715884105727"])
    def test_numeric_string_out_of_range(self, validator, item) -> None:
        """Test that numeric strings are held to the same range as numbers."""
        with pytest.raises(MalformedDataError, match="must be finite"):
            validator.validate_tokens(["1", item])

    def test_numeric_string_at_boundary_accepted(self, validator) -> None:
        """Test that in-range numeric strings and non-numeric strings pass."""
        validator.validate_tokens(["999999999", " -999999999 ", "9.99e8", "1e999x", "abc"])

    def test_huge_native_integer_rejected(self, validator) -> None:
        """Test that an integer too large for a float is rejected, not crashed on."""
        with pytest.raises(MalformedDataError, match="must be finite"):
            validator.validate_tokens([10 ** 400])

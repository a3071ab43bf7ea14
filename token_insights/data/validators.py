"""
Request boundary validation for analysis payloads.

The analysis core assumes well-typed input; this module enforces the size
and range limits before any token reaches the classifier. Numeric strings
are held to the same range as native numbers.
"""

import math
from typing import Any, Optional

from ..config.defaults import LimitsParams
from ..errors import MalformedDataError
from .classifier import parse_number


class RequestValidator:
    """Validates analysis request payloads against configured limits."""

    def __init__(self, limits: Optional[LimitsParams] = None):
        self.limits = limits or LimitsParams()

    def validate_payload(self, payload: Any) -> list:
        """
        Validate a request payload and return its data array.

        Args:
            payload: Decoded request body

        Returns:
            The validated token list

        Raises:
            MalformedDataError: If the payload breaks any boundary rule
        """
        if not isinstance(payload, dict) or not payload:
            raise MalformedDataError("Request body is required", expected_format="object")

        if "data" not in payload or payload["data"] is None:
            raise MalformedDataError("data field is required", expected_format="array")

        data = payload["data"]
        self.validate_tokens(data)

        file_info = payload.get("file")
        if file_info is not None and not isinstance(file_info, dict):
            raise MalformedDataError("file must be an object", raw_data=str(file_info)[:100],
                                     expected_format="object")

        return data

    def validate_tokens(self, data: Any) -> None:
        """Validate the token array itself."""
        if not isinstance(data, list):
            raise MalformedDataError("data must be an array", raw_data=str(data)[:100],
                                     expected_format="array")

        if not data:
            raise MalformedDataError("data array cannot be empty")

        if len(data) > self.limits.max_tokens:
            raise MalformedDataError(
                f"data array exceeds maximum allowed length of {self.limits.max_tokens} elements",
                context={"length": len(data)}
            )

        for item in data:
            if isinstance(item, bool) or not isinstance(item, (str, int, float)):
                raise MalformedDataError(
                    "data array must contain only strings and numbers",
                    raw_data=repr(item)[:100]
                )

            if isinstance(item, str):
                if len(item) > self.limits.max_string_length:
                    raise MalformedDataError(
                        f"string elements in data array cannot exceed {self.limits.max_string_length} characters",
                        raw_data=item[:100]
                    )
                number = parse_number(item)
            else:
                number = item

            if number is not None and self._out_of_range(number):
                raise MalformedDataError(
                    "number elements must be finite and between "
                    f"-{self.limits.max_abs_number} and {self.limits.max_abs_number}",
                    raw_data=repr(item)[:100]
                )

    def _out_of_range(self, number) -> bool:
        return abs(number) > self.limits.max_abs_number or not math.isfinite(number)

"""
Token ingestion module.

Classifies raw request tokens into typed buckets and validates request
payloads at the boundary.
"""

from .classifier import classify, format_number, is_alphabet_token, parse_number
from .models import ClassifiedTokens, FileInfo, Number, RawToken

__all__ = [
    "ClassifiedTokens",
    "FileInfo",
    "Number",
    "RawToken",
    "classify",
    "format_number",
    "is_alphabet_token",
    "parse_number",
]

"""Pattern and anomaly detection over classified tokens"""

from .alphabetic import analyze_text, detect_alphabetical_patterns, is_alphabetical_sequence
from .anomalies import detect_anomalies, detect_clusters
from .detector import detect_patterns
from .numeric import detect_numerical_patterns, is_arithmetic_sequence, is_geometric_sequence
from .repetition import concatenate_tokens, find_repeating_pattern

__all__ = [
    "analyze_text",
    "concatenate_tokens",
    "detect_alphabetical_patterns",
    "detect_anomalies",
    "detect_clusters",
    "detect_numerical_patterns",
    "detect_patterns",
    "find_repeating_pattern",
    "is_alphabetical_sequence",
    "is_arithmetic_sequence",
    "is_geometric_sequence",
]

#!/usr/bin/env python3
"""
Basic Usage Example - Token Insights Engine

This script demonstrates the basic usage of the token insights engine. It
shows how to:
- Analyze a mixed token list directly
- Process a request payload with a file attachment
- Load a configuration profile and attach the HTTP labeler

Run: python examples/basic_usage.py
"""

import json

from token_insights import InsightEngine, analyze
from token_insights.logging import configure_logging


def print_report_summary(report) -> None:
    """Print the headline fields of a report."""
    print(f"  Numbers:   {list(report.numbers)}")
    print(f"  Alphabets: {list(report.alphabets)}")
    print(f"  Highest lowercase: {report.highest_lowercase_alphabet}")

    if report.math:
        print(f"  Sum={report.math.sum} LCM={report.math.lcm} HCF={report.math.hcf}")
        print(f"  Primes: {list(report.math.primes)}")
    if report.stats:
        print(f"  Mean={report.stats.mean:.2f} StdDev={report.stats.std_dev:.2f}")

    print(f"  Patterns: {[p.type.value for p in report.patterns.numerical + report.patterns.alphabetical]}")
    print(f"  Anomalies: {list(report.anomalies.anomalies)} ({report.anomalies.method})")
    print(f"  Labels: {report.labels.analysis}/{report.labels.sentiment}/{report.labels.recommendation}")
    print(f"  Confidence: {report.confidence_score:.2f}")


def main():
    """Run the basic usage example."""
    configure_logging(level="WARNING")

    print("🚀 Direct analysis")
    report = analyze(["1", "2", "a", "b", "3"])
    print_report_summary(report)

    print("\n📦 Request processing")
    engine = InsightEngine()
    response = engine.process_request({
        "data": [2, "4", "6", "8", "1", "A", "e", "i", "hello"],
        "file": {"file_valid": True, "mime_type": "application/json", "size_kb": 42},
    })
    print(json.dumps(response["metadata"], indent=2))
    print(json.dumps(response["report"]["patterns"], indent=2))

    print("\n⚙️  Configured engine (strict_outliers profile)")
    configured = InsightEngine.from_config_dir(profile="strict_outliers")
    print(f"  Labeler available: {bool(configured.labeler and configured.labeler.available)}")
    print_report_summary(configured.analyze([1, 2, 3, 4, 100]))


if __name__ == "__main__":
    main()

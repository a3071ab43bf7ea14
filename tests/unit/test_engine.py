"""Unit tests for the insight engine."""

from unittest.mock import patch

import pytest

import token_insights
from token_insights.data.models import FileInfo
from token_insights.engine import ALGORITHM_VERSION, InsightEngine, analyze
from token_insights.errors import AnalysisError, ConfigurationError, MalformedDataError
from token_insights.labeling.http_labeler import HttpTextLabeler


class TestInsightEngine:
    """Test suite for the engine coordinator."""

    def test_package_exports(self) -> None:
        """Test the top-level entry points."""
        assert token_insights.analyze is analyze
        assert token_insights.InsightEngine is InsightEngine

    def test_mixed_example(self, engine) -> None:
        """Test the canonical mixed input end to end."""
        report = engine.analyze(["1", "2", "a", "b", "3"])

        assert report.numbers == (1, 2, 3)
        assert report.alphabets == ("a", "b")
        assert report.highest_lowercase_alphabet == "b"
        assert report.math.sum == 6
        assert report.math.lcm == 6
        assert report.math.hcf == 1
        assert report.stats.mean == 2
        assert report.category_counts.prime_numbers == 2
        assert report.clusters.potential_clusters == 1
        assert report.confidence_score == pytest.approx(0.7)
        assert report.labels.enabled is False

    def test_letters_only(self, engine) -> None:
        """Test that numeric blocks are suppressed without numbers."""
        report = engine.analyze(["x", "Y", "z"])

        assert report.math is None
        assert report.stats is None
        assert report.category_counts is None
        assert report.clusters is None
        assert report.anomalies.method == "insufficient_data"
        assert report.highest_lowercase_alphabet == "z"
        assert report.text_analysis.uppercase == 1

    def test_nothing_classified(self, engine) -> None:
        """Test that a fully dropped input still yields a report."""
        report = engine.analyze(["hello", "$$"])

        assert report.numbers == ()
        assert report.alphabets == ()
        assert report.quality is None
        assert report.dropped_tokens == 2

    def test_unexpected_stage_failure(self, engine) -> None:
        """Test that an unexpected stage error becomes an AnalysisError."""
        with patch("token_insights.engine.summarize", side_effect=ValueError("bad")):
            with pytest.raises(AnalysisError) as exc_info:
                engine.analyze(["1", "2"])

        assert exc_info.value.stage == "stats"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_module_level_analyze(self, stub_labeler) -> None:
        """Test the one-off analyze helper with a labeler."""
        report = analyze(["4", "8"], file_info=FileInfo(file_valid=True, mime_type="image/png"),
                         labeler=stub_labeler)

        assert report.labels.sentiment == "positive"
        assert report.file_insights.type_category == "image"


class TestFromConfigDir:
    """Test suite for configured engine construction."""

    def test_labeler_without_key(self, tmp_path) -> None:
        """Test that a missing API key degrades to fallback labels."""
        engine = InsightEngine.from_config_dir(str(tmp_path), environ={})

        assert isinstance(engine.labeler, HttpTextLabeler)
        assert not engine.labeler.available
        assert engine.analyze(["1", "2", "3"]).labels.analysis == "unavailable"

    def test_labeler_disabled(self, tmp_path) -> None:
        """Test that a disabled labeler section attaches no collaborator."""
        engine = InsightEngine.from_config_dir(str(tmp_path),
                                               overrides={"labeler": {"enabled": False}})
        assert engine.labeler is None

    def test_profile_applied(self) -> None:
        """Test that profile settings reach the pipeline."""
        engine = InsightEngine.from_config_dir(profile="strict_outliers", environ={})
        report = engine.analyze([1, 2, 3, 4, 100])

        assert report.anomalies.anomalies == (100,)

    def test_unknown_profile_rejected(self) -> None:
        """Test that a misspelled profile fails instead of running on defaults."""
        with pytest.raises(ConfigurationError) as exc_info:
            InsightEngine.from_config_dir(profile="strict_outlier", environ={})
        assert exc_info.value.field == "profile"


class TestProcessRequest:
    """Test suite for request processing."""

    def test_success_response(self, engine) -> None:
        """Test the response envelope and metadata."""
        response = engine.process_request({
            "data": ["1", "2", "a", "b", "3", "word"],
            "file": {"file_valid": True, "file_mime_type": "text/plain", "file_size_kb": 12},
        })

        assert response["is_success"] is True
        report = response["report"]
        assert report["numbers"] == [1, 2, 3]
        assert report["highest_lowercase_alphabet"] == "b"
        assert report["file_insights"]["size_category"] == "medium"

        metadata = response["metadata"]
        assert metadata["algorithm_version"] == ALGORITHM_VERSION
        assert metadata["data_count"] == 6
        assert metadata["dropped_count"] == 1
        assert metadata["labeler_status"] == "disabled"
        assert metadata["processing_time_ms"] >= 0
        assert metadata["analysis_timestamp"].endswith("Z")

    @pytest.mark.parametrize("payload", [
        None,
        {"data": "1,2"},
        {"data": []},
        {"data": ["1"] * 1001},
        {"data": [True]},
        {"data": ["x" * 101]},
        {"data": [1e12]},
        {"data": ["1e200", "1", "2"]},
        {"data": ["170141183460469231731687303715884105727"]},
    ])
    def test_malformed_payloads(self, engine, payload) -> None:
        """Test that boundary violations raise before any analysis."""
        with pytest.raises(MalformedDataError):
            engine.process_request(payload)

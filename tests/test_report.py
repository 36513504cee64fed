import json
from datetime import datetime

import pytest

from data_designer_ai_detector.core import MetricResult, analyze, assess
from data_designer_ai_detector.report import (
    ContentStats,
    content_stats,
    render_text_report,
    report_filename,
    report_from_json,
    report_to_json,
    report_to_payload,
    summarize,
)


FORMAL_TEXT = (
    "However, it is important to note that this is clearly a well-structured example. "
    "Moreover, it utilizes formal language. Furthermore, the approach is optimized."
)

CODE_TEXT = "def foo():\n    return 1\n"


class TestJsonExport:
    @pytest.mark.parametrize("content", [FORMAL_TEXT, CODE_TEXT, ""])
    def test_round_trip_preserves_scores_and_detail_keys(self, content):
        report = analyze(content)
        restored = report_from_json(report_to_json(report))
        assert list(restored) == list(report)
        for name, metric in report.items():
            assert restored[name].score == metric.score
            assert list(restored[name].details) == list(metric.details)

    def test_payload_includes_overall(self):
        report = analyze(FORMAL_TEXT, "text")
        payload = report_to_payload(report)
        assert set(payload) == {"metrics", "overall"}
        assert payload["overall"]["confidence"] in ("Low", "Medium", "High")
        assert payload["overall"]["score"] == assess(report).score

    def test_json_is_indented(self):
        text = report_to_json({"linguistic": MetricResult(score=25.0, details={"total_words": 4})})
        assert text.startswith("{\n  ")
        assert json.loads(text)["metrics"]["linguistic"]["details"] == {"total_words": 4}

    def test_missing_metrics_is_rejected(self):
        with pytest.raises(ValueError):
            report_from_json('{"overall": {}}')


class TestTextReport:
    def test_sections_and_headers(self):
        report = analyze(FORMAL_TEXT, "text")
        text = render_text_report(report, generated_at=datetime(2026, 1, 2, 3, 4, 5))
        lines = text.splitlines()
        assert lines[0] == "AI CONTENT DETECTION REPORT"
        assert lines[1] == "=" * 51
        assert "Generated: 2026-01-02 03:04:05" in lines
        for name in ("PERPLEXITY", "BURSTINESS", "LINGUISTIC", "OVERALL ASSESSMENT"):
            assert lines[lines.index(name) + 1] == "-" * 30
        assert f"Score: {report['perplexity'].score:.1f}% AI Likelihood" in lines
        assert f"  - patterns: {report['perplexity'].details['patterns']}" in lines

    def test_overall_block(self):
        report = {"a": MetricResult(score=80.0), "b": MetricResult(score=90.0)}
        text = render_text_report(report, generated_at=datetime(2026, 1, 1))
        assert "Score: 85.0% AI Generated" in text
        assert "Confidence: High" in text
        assert "Recommendation: Content shows strong indicators of AI generation" in text

    def test_report_filename(self):
        now = datetime(2026, 10, 19, 8, 30, 0)
        assert report_filename("json", now) == "ai-detection-report-2026-10-19T08-30-00.json"
        assert report_filename("txt", now).endswith(".txt")
        with pytest.raises(ValueError):
            report_filename("pdf", now)


class TestSummary:
    def test_content_stats(self):
        assert content_stats("one two\n\nthree") == ContentStats(
            word_count=3, character_count=14, line_count=3, non_empty_lines=2
        )

    def test_summary_shape(self):
        result = summarize(FORMAL_TEXT)
        expected_keys = {
            "score", "confidence", "content_type", "indicators",
            "recommendation", "stats", "pattern_categories", "metrics",
        }
        assert expected_keys == set(result.keys())
        assert result["content_type"] == "text"
        assert result["pattern_categories"]["transitions"] == 3
        assert result["stats"]["word_count"] == len(FORMAL_TEXT.split())

    def test_summary_detects_code(self):
        result = summarize(CODE_TEXT)
        assert result["content_type"] == "code"
        assert list(result["metrics"]) == ["code", "linguistic", "perplexity"]

    def test_summary_report_is_opt_in(self):
        assert "report" not in summarize(FORMAL_TEXT)
        result = summarize(FORMAL_TEXT, include_report=True)
        assert result["report"].startswith("AI CONTENT DETECTION REPORT\n")

# Report export: JSON payloads, the plain-text report, and the flat per-row
# summary consumed by the column generator.

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Literal

from data_designer_ai_detector.core import (
    AnalysisReport,
    ContentType,
    Hyperparameters,
    MetricResult,
    OverallAssessment,
    analyze,
    assess,
    resolve_content_type,
)
from data_designer_ai_detector.patterns import count_patterns_by_category

_REPORT_RULE = "=" * 51
_SECTION_RULE = "-" * 30


@dataclass(frozen=True)
class ContentStats:
    word_count: int
    character_count: int
    line_count: int
    non_empty_lines: int


def content_stats(content: str) -> ContentStats:
    lines = content.split("\n")
    return ContentStats(
        word_count=len(content.split()),
        character_count=len(content),
        line_count=len(lines),
        non_empty_lines=sum(1 for line in lines if line.strip()),
    )


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def report_to_payload(report: AnalysisReport, assessment: OverallAssessment | None = None) -> dict[str, object]:
    """Plain-dict form of a report, with the overall assessment under ``overall``."""
    overall = assessment or assess(report)
    return {
        "metrics": {name: metric.to_payload() for name, metric in report.items()},
        "overall": overall.to_payload(),
    }


def report_to_json(report: AnalysisReport, assessment: OverallAssessment | None = None) -> str:
    return json.dumps(report_to_payload(report, assessment), indent=2)


def report_from_json(text: str) -> AnalysisReport:
    """Rebuild an AnalysisReport from :func:`report_to_json` output.

    The ``overall`` block is derived data and is ignored; call ``assess`` on
    the result to recompute it.
    """
    payload = json.loads(text)
    metrics = payload.get("metrics")
    if not isinstance(metrics, dict):
        raise ValueError("report JSON has no 'metrics' object")
    return {
        name: MetricResult(score=float(item["score"]), details=dict(item.get("details", {})))
        for name, item in metrics.items()
    }


# ---------------------------------------------------------------------------
# Plain text
# ---------------------------------------------------------------------------


def render_text_report(
    report: AnalysisReport,
    assessment: OverallAssessment | None = None,
    generated_at: datetime | None = None,
) -> str:
    overall = assessment or assess(report)
    stamp = (generated_at or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")

    lines = ["AI CONTENT DETECTION REPORT", _REPORT_RULE, "", f"Generated: {stamp}", ""]
    for name, metric in report.items():
        lines.append(name.upper())
        lines.append(_SECTION_RULE)
        lines.append(f"Score: {metric.score:.1f}% AI Likelihood")
        lines.append("Details:")
        lines.extend(f"  - {key}: {value}" for key, value in metric.details.items())
        lines.append("")

    lines.append("OVERALL ASSESSMENT")
    lines.append(_SECTION_RULE)
    lines.append(f"Score: {overall.score:.1f}% AI Generated")
    lines.append(f"Confidence: {overall.confidence}")
    lines.append(f"Indicators: {', '.join(overall.indicators)}")
    lines.append(f"Recommendation: {overall.recommendation}")
    return "\n".join(lines) + "\n"


def report_filename(fmt: Literal["json", "txt"], now: datetime | None = None) -> str:
    if fmt not in ("json", "txt"):
        raise ValueError(f"unknown report format {fmt!r}")
    stamp = (now or datetime.now()).strftime("%Y-%m-%dT%H-%M-%S")
    return f"ai-detection-report-{stamp}.{fmt}"


# ---------------------------------------------------------------------------
# Row summary
# ---------------------------------------------------------------------------


def summarize(
    content: str,
    content_type: ContentType = "auto",
    hyperparameters: Hyperparameters | None = None,
    include_report: bool = False,
) -> dict:
    """Analyze ``content`` and flatten the result into one JSON-friendly dict.

    Returns:
        Dict with keys: score, confidence, content_type, indicators,
        recommendation, stats, pattern_categories, metrics, plus ``report``
        (the rendered plain-text report) when ``include_report`` is set.
    """
    report = analyze(content, content_type, hyperparameters)
    overall = assess(report, hyperparameters)
    summary = {
        "score": round(overall.score, 2),
        "confidence": overall.confidence,
        "content_type": resolve_content_type(content, content_type),
        "indicators": list(overall.indicators),
        "recommendation": overall.recommendation,
        "stats": asdict(content_stats(content)),
        "pattern_categories": count_patterns_by_category(content),
        "metrics": {name: metric.to_payload() for name, metric in report.items()},
    }
    if include_report:
        summary["report"] = render_text_report(report, overall)
    return summary

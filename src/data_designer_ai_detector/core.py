# Heuristic AI-content scoring engine.
#
# Every analyzer is a pure function over a string that returns a MetricResult
# (score 0-100 plus a flat details mapping). `analyze` routes content to the
# text or code triplet of analyzers and `assess` folds the metrics into one
# overall verdict.

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Literal, Union

from data_designer_ai_detector.patterns import (
    AI_COMMENT_PATTERNS,
    CLAUSE_PUNCT_RE,
    CODE_INDICATOR_PATTERNS,
    COMMA_RE,
    CONJUNCTION_RE,
    CONTROL_STRUCTURE_PATTERNS,
    FUNCTION_DECL_RE,
    IDENTIFIER_RE,
    LEADING_WS_RE,
    SENTENCE_SPLIT_RE,
    SPACING_PATTERNS,
    SUBCLAUSE_RE,
    TRANSITION_WORDS,
    count_patterns,
)

logger = logging.getLogger(__name__)

ContentType = Literal["auto", "text", "code"]
CONTENT_TYPES: tuple[str, ...] = ("auto", "text", "code")

DetailValue = Union[str, int, float, list]

# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Hyperparameters:
    """Weights and thresholds used by the analyzers."""

    score_min: float = 0.0
    score_max: float = 100.0

    # Perplexity
    ngram_sizes: tuple[int, ...] = (2, 3)
    repeated_ngram_threshold: int = 3
    pattern_weight: float = 10.0
    long_sentence_chars: float = 80.0
    long_sentence_bonus: float = 15.0
    uniform_length_cv: float = 0.3
    uniform_length_bonus: float = 20.0
    repetition_weight: float = 5.0
    semantic_weight: float = 15.0

    # Burstiness
    burstiness_min_sentences: int = 3
    burstiness_sample_size: int = 5
    word_weight: int = 1
    comma_weight: int = 2
    subclause_weight: int = 3
    conjunction_weight: int = 2
    clause_punct_weight: int = 2

    # Linguistic
    diversity_threshold: float = 0.7
    diversity_bonus: float = 25.0
    complex_word_min_chars: int = 8
    complex_ratio_threshold: float = 0.15
    complex_ratio_bonus: float = 30.0
    transition_weight: float = 5.0

    # Code
    comment_weight: float = 10.0
    descriptive_min_chars: int = 8
    descriptive_weight: float = 30.0
    blank_ratio_threshold: float = 0.8
    blank_ratio_bonus: float = 20.0
    control_density_basis: float = 0.1
    complexity_weight: float = 20.0
    style_weight: float = 15.0

    # Overall assessment bands (exclusive lower bounds)
    band_high_min: float = 75.0
    band_medium_min: float = 50.0


DEFAULT_HYPERPARAMETERS = Hyperparameters()


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MetricResult:
    score: float
    details: dict[str, DetailValue] = field(default_factory=dict)

    def to_payload(self) -> dict[str, object]:
        return {"score": self.score, "details": dict(self.details)}


AnalysisReport = dict[str, MetricResult]


@dataclass(frozen=True)
class OverallAssessment:
    score: float
    confidence: Literal["Low", "Medium", "High"]
    indicators: list[str]
    recommendation: str

    def to_payload(self) -> dict[str, object]:
        return {
            "score": self.score,
            "confidence": self.confidence,
            "indicators": list(self.indicators),
            "recommendation": self.recommendation,
        }


_ASSESSMENT_BANDS = {
    "High": (
        ["High perplexity", "Low burstiness", "Formal language patterns"],
        "Content shows strong indicators of AI generation",
    ),
    "Medium": (
        ["Mixed patterns", "Some AI-like structures"],
        "Content shows moderate AI indicators, further review recommended",
    ),
    "Low": (
        ["Natural variation", "Human-like patterns"],
        "Content appears to be human-generated",
    ),
}

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _require_str(content: object) -> str:
    if not isinstance(content, str):
        raise TypeError(f"content must be a str, got {type(content).__name__}")
    return content


def _clamp(value: float, hp: Hyperparameters) -> float:
    return float(max(hp.score_min, min(hp.score_max, value)))


def _words(text: str) -> list[str]:
    return text.lower().split()


def coefficient_of_variation(values: list[float]) -> float:
    """Population standard deviation divided by the mean.

    Returns 0 for fewer than two values or a zero mean.
    """
    if len(values) < 2:
        return 0.0
    mean = sum(values) / len(values)
    if mean == 0:
        return 0.0
    variance = sum((x - mean) ** 2 for x in values) / len(values)
    return math.sqrt(variance) / mean


def split_sentences(text: str) -> list[str]:
    return [s.strip() for s in SENTENCE_SPLIT_RE.split(text) if s.strip()]


# ---------------------------------------------------------------------------
# N-gram repetition
# ---------------------------------------------------------------------------


def generate_ngrams(text: str, n: int) -> list[str]:
    words = _words(text)
    return [" ".join(words[i : i + n]) for i in range(len(words) - n + 1)]


def count_repetitive_ngrams(text: str, hyperparameters: Hyperparameters | None = None) -> int:
    """Number of distinct bigrams/trigrams seen more than the repetition threshold."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    frequency: dict[str, int] = {}
    for n in hp.ngram_sizes:
        for gram in generate_ngrams(text, n):
            frequency[gram] = frequency.get(gram, 0) + 1
    return sum(1 for count in frequency.values() if count > hp.repeated_ngram_threshold)


# ---------------------------------------------------------------------------
# Sentence structure
# ---------------------------------------------------------------------------


def semantic_consistency(text: str) -> float:
    """Average word-set overlap between adjacent sentences.

    The ratio for each pair is ``|A & B| / (|A| + |B|)``, so two sentences with
    identical vocabularies score 0.5, not 1.0. This only approximates topical
    continuity; it knows nothing about meaning, synonyms or word order.
    """
    sentences = split_sentences(text)
    if len(sentences) < 2:
        return 0.0

    total = 0.0
    for prev, curr in zip(sentences, sentences[1:]):
        prev_words = set(_words(prev))
        curr_words = set(_words(curr))
        size = len(prev_words) + len(curr_words)
        if size > 0:
            total += len(prev_words & curr_words) / size
    return total / (len(sentences) - 1)


def sentence_complexity(sentence: str, hyperparameters: Hyperparameters | None = None) -> int:
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    return (
        len(sentence.split()) * hp.word_weight
        + len(COMMA_RE.findall(sentence)) * hp.comma_weight
        + len(SUBCLAUSE_RE.findall(sentence)) * hp.subclause_weight
        + len(CONJUNCTION_RE.findall(sentence)) * hp.conjunction_weight
        + len(CLAUSE_PUNCT_RE.findall(sentence)) * hp.clause_punct_weight
    )


def _structure_diversity(sentences: list[str]) -> float:
    shapes = {(bool(SUBCLAUSE_RE.search(s)), bool(CONJUNCTION_RE.search(s))) for s in sentences}
    return round(len(shapes) / len(sentences), 2)


def analyze_perplexity(text: str, hyperparameters: Hyperparameters | None = None) -> MetricResult:
    """Score phrase patterns, sentence-length uniformity, repetition and overlap.

    Uniform sentence lengths, long sentences, stock phrases and repeated
    n-grams all push the score up.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    text = _require_str(text)
    sentences = split_sentences(text)
    if not sentences:
        return MetricResult(score=0.0, details={
            "patterns": 0, "avg_sentence_length": 0, "length_variation": 0.0,
            "total_sentences": 0, "repetitive_patterns": 0, "semantic_consistency": 0.0,
        })

    patterns = count_patterns(text)
    repetitive = count_repetitive_ngrams(text, hp)
    lengths = [len(s) for s in sentences]
    avg_length = sum(lengths) / len(lengths)
    length_variation = coefficient_of_variation(lengths)
    semantic = semantic_consistency(text)

    raw = (
        patterns * hp.pattern_weight
        + (hp.long_sentence_bonus if avg_length > hp.long_sentence_chars else 0)
        + (hp.uniform_length_bonus if length_variation < hp.uniform_length_cv else 0)
        + repetitive * hp.repetition_weight
        + semantic * hp.semantic_weight
    )
    return MetricResult(score=_clamp(raw, hp), details={
        "patterns": patterns,
        "avg_sentence_length": round(avg_length),
        "length_variation": round(length_variation, 2),
        "total_sentences": len(sentences),
        "repetitive_patterns": repetitive,
        "semantic_consistency": round(semantic, 2),
    })


def analyze_burstiness(text: str, hyperparameters: Hyperparameters | None = None) -> MetricResult:
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    text = _require_str(text)
    sentences = split_sentences(text)
    if len(sentences) < hp.burstiness_min_sentences:
        return MetricResult(score=0.0, details={})

    complexities = [sentence_complexity(s, hp) for s in sentences]
    variation = coefficient_of_variation(complexities)
    score = max(0.0, hp.score_max - variation * 100)
    return MetricResult(score=_clamp(score, hp), details={
        "sentence_complexities": complexities[: hp.burstiness_sample_size],
        "variation": round(variation, 3),
        "avg_complexity": round(sum(complexities) / len(complexities), 1),
        "structure_diversity": _structure_diversity(sentences),
    })


# ---------------------------------------------------------------------------
# Lexical diversity
# ---------------------------------------------------------------------------


def analyze_linguistic(text: str, hyperparameters: Hyperparameters | None = None) -> MetricResult:
    """Vocabulary diversity, long-word usage and transition words.

    A high type/token ratio counts toward the AI score here. That is a
    heuristic choice, not an established property of generated text.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    words = _words(_require_str(text))
    if not words:
        return MetricResult(score=0.0, details={
            "vocabulary_diversity": 0.0, "complex_word_ratio": 0.0,
            "transition_words": 0, "total_words": 0,
        })

    diversity = len(set(words)) / len(words)
    complex_ratio = sum(1 for w in words if len(w) > hp.complex_word_min_chars) / len(words)
    transitions = sum(1 for w in words if w in TRANSITION_WORDS)

    raw = (
        (hp.diversity_bonus if diversity > hp.diversity_threshold else 0)
        + (hp.complex_ratio_bonus if complex_ratio > hp.complex_ratio_threshold else 0)
        + transitions * hp.transition_weight
    )
    return MetricResult(score=_clamp(raw, hp), details={
        "vocabulary_diversity": round(diversity, 3),
        "complex_word_ratio": round(complex_ratio, 3),
        "transition_words": transitions,
        "total_words": len(words),
    })


# ---------------------------------------------------------------------------
# Code style
# ---------------------------------------------------------------------------


def is_code_content(content: str) -> bool:
    return any(pat.search(content) for pat in CODE_INDICATOR_PATTERNS)


def _blank_line_ratio(lines: list[str]) -> float:
    blank = sum(1 for line in lines if not line.strip())
    return blank / max(len(lines), 1)


def _control_density(code: str, lines: list[str], hp: Hyperparameters) -> float:
    count = sum(len(pat.findall(code)) for pat in CONTROL_STRUCTURE_PATTERNS)
    return min(1.0, count / (len(lines) * hp.control_density_basis))


def _style_consistency(code: str, lines: list[str]) -> float:
    indents = [len(LEADING_WS_RE.match(line).group(0)) for line in lines]
    consistency = 1 - coefficient_of_variation(indents)
    checks = 1
    for pat in SPACING_PATTERNS:
        matches = len(pat.findall(code))
        # Spacing styles that never occur are skipped rather than scored as perfect.
        if matches:
            consistency += 1 - matches / len(lines)
            checks += 1
    return consistency / checks


def analyze_code(code: str, hyperparameters: Hyperparameters | None = None) -> MetricResult:
    """Score stereotyped comments, naming verbosity, spacing and control flow."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    code = _require_str(code)
    if not code.strip():
        return MetricResult(score=0.0, details={
            "comment_patterns": 0, "descriptive_var_ratio": 0.0, "function_count": 0,
            "code_structure_score": 0.0, "complexity_score": 0.0, "style_consistency": 0.0,
        })

    lines = code.split("\n")
    comment_matches = sum(len(pat.findall(code)) for pat in AI_COMMENT_PATTERNS)

    identifiers = IDENTIFIER_RE.findall(code)
    descriptive = [v for v in identifiers if len(v) > hp.descriptive_min_chars and "_" not in v]
    descriptive_ratio = len(descriptive) / max(len(identifiers), 1)

    blank_ratio = _blank_line_ratio(lines)
    complexity = _control_density(code, lines, hp)
    style = _style_consistency(code, lines)

    raw = (
        comment_matches * hp.comment_weight
        + descriptive_ratio * hp.descriptive_weight
        + (hp.blank_ratio_bonus if blank_ratio > hp.blank_ratio_threshold else 0)
        + complexity * hp.complexity_weight
        + style * hp.style_weight
    )
    return MetricResult(score=_clamp(raw, hp), details={
        "comment_patterns": comment_matches,
        "descriptive_var_ratio": round(descriptive_ratio, 2),
        "function_count": len(FUNCTION_DECL_RE.findall(code)),
        "code_structure_score": round(blank_ratio, 2),
        "complexity_score": round(complexity, 2),
        "style_consistency": round(style, 2),
    })


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def resolve_content_type(content: str, content_type: str = "auto") -> Literal["text", "code"]:
    """Map a requested content type to the analyzer family that will run."""
    if content_type not in CONTENT_TYPES:
        raise ValueError(f"content_type must be one of {CONTENT_TYPES}, got {content_type!r}")
    if content_type == "auto":
        return "code" if is_code_content(content) else "text"
    return content_type


def analyze(
    content: str,
    content_type: ContentType = "auto",
    hyperparameters: Hyperparameters | None = None,
) -> AnalysisReport:
    """Run the metric triplet for ``content``.

    Args:
        content: Prose or source code.
        content_type: ``"text"`` or ``"code"`` to force an analyzer family,
            ``"auto"`` to pick one with :func:`is_code_content`.
        hyperparameters: Optional tuning overrides.

    Returns:
        Ordered mapping of metric name to MetricResult. Code yields
        ``code, linguistic, perplexity``; text yields
        ``perplexity, burstiness, linguistic``.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    content = _require_str(content)
    resolved = resolve_content_type(content, content_type)
    logger.debug(f"Analyzing {len(content)} chars as {resolved} (requested {content_type!r})")

    if resolved == "code":
        return {
            "code": analyze_code(content, hp),
            "linguistic": analyze_linguistic(content, hp),
            "perplexity": analyze_perplexity(content, hp),
        }
    return {
        "perplexity": analyze_perplexity(content, hp),
        "burstiness": analyze_burstiness(content, hp),
        "linguistic": analyze_linguistic(content, hp),
    }


def _confidence(score: float, hp: Hyperparameters) -> Literal["Low", "Medium", "High"]:
    if score > hp.band_high_min:
        return "High"
    if score > hp.band_medium_min:
        return "Medium"
    return "Low"


def assess(report: AnalysisReport, hyperparameters: Hyperparameters | None = None) -> OverallAssessment:
    """Average the metric scores and attach the band's indicators and advice."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    scores = [metric.score for metric in report.values()]
    score = sum(scores) / len(scores) if scores else 0.0
    confidence = _confidence(score, hp)
    indicators, recommendation = _ASSESSMENT_BANDS[confidence]
    return OverallAssessment(
        score=score,
        confidence=confidence,
        indicators=list(indicators),
        recommendation=recommendation,
    )

"""ReplyParserPolicy — turns the model's four-line reply into an AnalysisResult."""

from __future__ import annotations

from review_analyzer.domain.entities.analysis_result import AnalysisResult
from review_analyzer.domain.value_objects.enums import ReplyLabel


def split_emotions(value: str) -> list[str]:
    """Split a comma-separated emotion list, dropping blank fragments.

    No upper bound is applied: the prompt asks for 1-3 emotions, but the
    model's compliance is what limits the count.
    """
    return [part.strip() for part in value.split(",") if part.strip()]


def _match_label(line: str) -> tuple[ReplyLabel, str] | None:
    """Return (label, trimmed value) for a labeled line, else None."""
    for label in ReplyLabel:
        if line.startswith(label.value):
            return label, line[len(label.value):].strip()
    return None


def parse_reply(text: str | None) -> AnalysisResult:
    """Pure function: best-effort parse of a model completion.

    Rules:
      1. The text is split on "\\n" only; lines that are blank after
         trimming are skipped.
      2. A line is labeled when it starts with one of the ``ReplyLabel``
         prefixes (literal, case-sensitive); the first matching label in
         enum order is used.
      3. Later labeled lines overwrite earlier ones for the same field.
      4. Unlabeled lines are ignored.
      5. Fields never seen stay empty.

    Never raises: a reply that ignores the format yields an empty result.
    """
    found: dict[ReplyLabel, str] = {}

    for line in (text or "").split("\n"):
        if not line.strip():
            continue
        match = _match_label(line)
        if match is None:
            continue
        label, value = match
        found[label] = value

    return AnalysisResult(
        sentiment=found.get(ReplyLabel.SENTIMENT, ""),
        emotions=split_emotions(found.get(ReplyLabel.EMOTIONS, "")),
        main_issue=found.get(ReplyLabel.MAIN_ISSUE, ""),
        customer_wants=found.get(ReplyLabel.CUSTOMER_WANTS, ""),
    )

"""Analysis result — structured breakdown of a single customer review."""

from dataclasses import dataclass, field


@dataclass
class AnalysisResult:
    sentiment: str = ""
    emotions: list[str] = field(default_factory=list)
    main_issue: str = ""
    customer_wants: str = ""

    def to_dict(self) -> dict:
        """Serialize using the wire field names expected by the frontend."""
        return {
            "sentiment": self.sentiment,
            "emotions": list(self.emotions),
            "mainIssue": self.main_issue,
            "customerWants": self.customer_wants,
        }

"""ChatMessage value object — immutable role-tagged prompt message."""

from dataclasses import dataclass

from review_analyzer.domain.value_objects.enums import MessageRole


@dataclass(frozen=True)
class ChatMessage:
    role: MessageRole
    content: str

    def as_dict(self) -> dict[str, str]:
        """Payload shape accepted by chat-completion APIs."""
        return {"role": self.role.value, "content": self.content}

"""
In-memory session state: the current profile and the chat transcript.

Nothing here mutates a model in place. Every update produces a new value that
replaces the old one, so a view holding an earlier profile never sees it change.
"""
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional, Tuple

from models import BodyShape, ChatMessage, DEFAULT_PROFILE, Outfit, UserProfile

MAX_CHAT_HISTORY = 10


def build_message(role: str, text: str, outfit: Optional[Outfit] = None) -> ChatMessage:
    return ChatMessage(
        id=uuid.uuid4().hex,
        role=role,
        text=text,
        timestamp=datetime.now(timezone.utc),
        outfit=outfit,
    )


def welcome_message(profile: UserProfile) -> ChatMessage:
    return ChatMessage(
        id="welcome",
        role="model",
        text=(
            f"Hello {profile.name}. I'm Ixora. How are you feeling today? "
            "I can help you style a look for an upcoming event or just refresh your daily vibe."
        ),
        timestamp=datetime.now(timezone.utc),
    )


class ProfileStore:
    def __init__(self, profile: Optional[UserProfile] = None):
        self._profile = profile or DEFAULT_PROFILE.model_copy(deep=True)

    def get(self) -> UserProfile:
        return self._profile

    def replace(self, profile: UserProfile) -> UserProfile:
        self._profile = profile
        return self._profile

    def update(self, **changes) -> UserProfile:
        """Replace the profile with a copy carrying ``changes``, re-validated."""
        data = self._profile.model_dump()
        data.update(changes)
        return self.replace(UserProfile.model_validate(data))

    def toggle_favorite_shade(self, hex_color: str) -> UserProfile:
        shades = list(self._profile.favorite_shades)
        if hex_color in shades:
            shades = [s for s in shades if s != hex_color]
        else:
            shades.append(hex_color)
        return self.update(favorite_shades=shades)

    def apply_body_shape(self, shape: BodyShape) -> UserProfile:
        return self.update(body_shape=shape)


class ChatTranscript:
    """Append-only, ordered conversation."""

    def __init__(self, messages: Iterable[ChatMessage] = ()):
        self._messages: Tuple[ChatMessage, ...] = tuple(messages)

    @classmethod
    def start(cls, profile: UserProfile) -> "ChatTranscript":
        return cls([welcome_message(profile)])

    @property
    def messages(self) -> Tuple[ChatMessage, ...]:
        return self._messages

    def append(self, message: ChatMessage) -> "ChatTranscript":
        return ChatTranscript(self._messages + (message,))

    def recent(self, limit: int = MAX_CHAT_HISTORY) -> Tuple[ChatMessage, ...]:
        if limit <= 0:
            return ()
        return self._messages[-limit:]

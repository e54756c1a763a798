import pytest
from pydantic import ValidationError

from models import BodyShape, DEFAULT_PROFILE
from session_state import ChatTranscript, ProfileStore, build_message


def test_store_starts_with_default_profile():
    store = ProfileStore()

    assert store.get() == DEFAULT_PROFILE
    assert store.get() is not DEFAULT_PROFILE


def test_update_replaces_instead_of_mutating(profile):
    store = ProfileStore(profile)
    before = store.get()

    after = store.update(location="Porto")

    assert after.location == "Porto"
    assert before.location == "Lisbon"
    assert store.get() is after


def test_update_is_validated(profile):
    store = ProfileStore(profile)

    with pytest.raises(ValidationError):
        store.update(age=-3)
    assert store.get() is profile


def test_toggle_favorite_shade_adds_then_removes(profile):
    store = ProfileStore(profile)

    added = store.toggle_favorite_shade("#556B2F")
    assert added.favorite_shades == ["#B7410E", "#556B2F"]

    removed = store.toggle_favorite_shade("#B7410E")
    assert removed.favorite_shades == ["#556B2F"]
    assert profile.favorite_shades == ["#B7410E"]


def test_apply_body_shape(profile):
    store = ProfileStore(profile)

    assert store.apply_body_shape(BodyShape.apple).body_shape == BodyShape.apple


def test_transcript_starts_with_welcome(profile):
    transcript = ChatTranscript.start(profile)

    assert len(transcript.messages) == 1
    assert transcript.messages[0].role == "model"
    assert "Hello Maya" in transcript.messages[0].text


def test_transcript_append_returns_new_transcript(profile):
    transcript = ChatTranscript.start(profile)

    longer = transcript.append(build_message("user", "Something for brunch?"))

    assert len(transcript.messages) == 1
    assert len(longer.messages) == 2
    assert longer.messages[-1].text == "Something for brunch?"


def test_transcript_recent_window():
    transcript = ChatTranscript()
    for i in range(14):
        transcript = transcript.append(build_message("user", f"m{i}"))

    assert [m.text for m in transcript.recent()] == [f"m{i}" for i in range(4, 14)]
    assert len(transcript.recent(3)) == 3
    assert transcript.recent(0) == ()


def test_build_message_ids_are_unique():
    first = build_message("user", "a")
    second = build_message("model", "b")

    assert first.id != second.id
    assert first.timestamp.tzinfo is not None

import json
from types import SimpleNamespace

import pytest

from gemini_service import GeminiService
from models import BodyShape, Budget, Gender, SkinTone, UserProfile, WeatherData


class FakeModels:
    def __init__(self):
        self.calls = []
        self.reply = None
        self.error = None

    def generate_content(self, model, contents, config):
        self.calls.append(SimpleNamespace(model=model, contents=contents, config=config))
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.reply)


class FakeChat:
    def __init__(self, owner):
        self.owner = owner

    def send_message(self, message):
        self.owner.sent.append(message)
        if self.owner.error:
            raise self.owner.error
        return SimpleNamespace(text=self.owner.reply)


class FakeChats:
    def __init__(self):
        self.created = []
        self.sent = []
        self.reply = ""
        self.error = None

    def create(self, model, config=None, history=None):
        self.created.append(SimpleNamespace(model=model, config=config, history=history or []))
        return FakeChat(self)


class FakeGenaiClient:
    """Stands in for ``genai.Client`` with the two surfaces the service uses."""

    def __init__(self):
        self.models = FakeModels()
        self.chats = FakeChats()

    def reply_with(self, payload):
        self.models.reply = payload if isinstance(payload, str) else json.dumps(payload)


@pytest.fixture
def fake_client():
    return FakeGenaiClient()


@pytest.fixture
def service(fake_client):
    return GeminiService(client=fake_client, model="gemini-test")


@pytest.fixture
def profile():
    return UserProfile(
        name="Maya",
        age=31,
        gender=Gender.female,
        body_shape=BodyShape.pear,
        skin_tone=SkinTone.deep_warm,
        height_cm=170,
        location="Lisbon",
        style_preferences=["Boho", "Streetwear"],
        budget=Budget.high,
        favorite_shades=["#B7410E"],
    )


@pytest.fixture
def weather():
    return WeatherData(temp=12.5, condition="Light Rain", location="Lisbon")


@pytest.fixture
def outfit_payload():
    return {
        "title": "Rainy Day Rust",
        "description": "Earthy layers that shrug off drizzle.",
        "reasoning": "A structured top balances a pear silhouette and rust flatters deep warm skin.",
        "tags": ["Rainy Day", "Casual"],
        "items": [
            {"name": "Cropped Trench", "brand": "Cos", "price": 190, "currency": "EUR"},
            {"name": "Wide Leg Trousers", "brand": "Arket", "price": 89, "currency": "EUR"},
        ],
    }


# 1x1 red PNG
PNG_BASE64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="


@pytest.fixture
def png_base64():
    return PNG_BASE64

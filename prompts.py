"""
Prompt builders for the stylist requests sent to Gemini.
"""
import json
from typing import List

from models import UserProfile, WeatherData

SYSTEM_INSTRUCTION_BASE = """
You are Ixora, a world-class personal fashion designer and stylist.
Your goal is to help the user feel seen and styled.
You understand body types, skin tones (color analysis), and face shapes deeply.
You are empathetic, direct, and confident. Avoid fluff.
When suggesting outfits, explain "Why it works for you" based on their specific profile.
Respect budget and constraints.
Do NOT give medical advice.
"""

BODY_SHAPE_PROMPT = (
    "Analyze the body shape of the person in this photo. "
    "Determine if they are Hourglass, Pear, Apple, Rectangle, or Inverted Triangle. "
    "Be objective and kind."
)

BEAUTY_PROMPT = (
    "Analyze this face for personal color analysis. "
    "Determine the face shape, skin tone and undertone. "
    "Suggest 4 specific lipstick hex color codes that would suit them best, "
    "plus 3 blush and 3 eyeshadow hex color codes. "
    "Suggest 2 hairstyle keywords. "
    "Give short placement tips for blush, contour and highlight that flatter the face shape."
)

COLOR_PALETTE_PROMPT = (
    "Perform a seasonal color analysis of the person in this photo. "
    "Look at skin, eye and hair coloring and assign one of the 12 seasonal types (e.g. Deep Autumn, Light Summer). "
    "Describe why the season fits in 2-3 sentences. "
    "Return 8 best colors, 4 neutrals and 4 colors to avoid, each with a name and a hex code, "
    "plus 3 style keywords for dressing in this palette."
)


def _format_list(values: List[str], empty: str = "none") -> str:
    return ", ".join(values) if values else empty


def build_daily_outfit_prompt(profile: UserProfile, weather: WeatherData) -> str:
    return f"""
Create a daily outfit for {profile.name}.
Profile: Age {profile.age}, {profile.gender.value}, Body: {profile.body_shape.value}, Skin: {profile.skin_tone.value}, Height: {profile.height_cm:g} cm.
Style: {_format_list(profile.style_preferences, "open to suggestions")}.
Budget: {profile.budget.value}.
Favorite shades: {_format_list(profile.favorite_shades)}.
Context: Weather is {weather.condition}, {weather.temp:g}°C in {weather.location}.

Provide a complete look including accessories.
For image URLs, use "https://picsum.photos/300/400?random=1" (increment random number).
""".strip()


def build_chat_system_instruction(profile: UserProfile, outfit_schema: dict) -> str:
    return f"""{SYSTEM_INSTRUCTION_BASE}
User Profile: {profile.model_dump_json()}

Before proposing concrete items, ask one or two clarifying questions (fabric, occasion, dress code)
unless the request is already specific enough to style.

If the user specifically asks for an outfit recommendation, specific clothing items, or a "look",
you MUST include exactly one JSON block at the END of your response, fenced as ```json ... ```,
strictly following this schema:
{json.dumps(outfit_schema)}

Otherwise, just reply with helpful text advice and no JSON.
"""


def build_workout_prompt(profile: UserProfile) -> str:
    shape = profile.body_shape.value
    return f"""
Create a body-type specific workout plan for a {profile.age} year old {profile.gender.value} with a {shape} body shape.
The goal is aesthetic symmetry and general fitness, not bodybuilding.
Focus on balancing proportions suitable for a {shape} (e.g., if Pear, focus on upper body width; if Apple, focus on core definition and leg toning; if Inverted Triangle, focus on lower body volume; if Rectangle, focus on creating waist definition; if Hourglass, focus on balanced full-body toning).
State the emphasis explicitly in the focus area and goal.
Keep it accessible for a home workout.
""".strip()

import asyncio
import logging
from typing import List, Optional, Type, TypeVar

from google import genai
from google.genai import types
from pydantic import BaseModel

from config import settings
from image_utils import decode_image_payload
from models import (
    BeautyAnalysis,
    BodyShapeAnalysis,
    ChatMessage,
    ChatReply,
    ColorPaletteAnalysis,
    Outfit,
    UserProfile,
    WeatherData,
    WorkoutPlan,
)
from prompts import (
    BEAUTY_PROMPT,
    BODY_SHAPE_PROMPT,
    COLOR_PALETTE_PROMPT,
    SYSTEM_INSTRUCTION_BASE,
    build_chat_system_instruction,
    build_daily_outfit_prompt,
    build_workout_prompt,
)
from response_parser import DecodeFailure, decode_structured, split_outfit_reply
from response_schemas import (
    BEAUTY_ANALYSIS_SCHEMA,
    BODY_SHAPE_SCHEMA,
    COLOR_PALETTE_SCHEMA,
    OUTFIT_SCHEMA,
    WORKOUT_SCHEMA,
)
from session_state import MAX_CHAT_HISTORY, ChatTranscript

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

CHAT_FALLBACK_TEXT = "I'm having a little trouble connecting to my fashion sense right now. Please try again."


class GeminiService:
    def __init__(self, api_key: Optional[str] = None, client=None, model: Optional[str] = None):
        if client is None:
            # Try to get API key from settings if not provided
            api_key = api_key or settings.GOOGLE_GENAI_API_KEY
            try:
                client = genai.Client(api_key=api_key) if api_key else genai.Client()
            except Exception as e:
                # Every operation degrades to its fallback until a key is configured
                logger.error(f"Gemini client unavailable: {e}")
                client = None
        self.client = client
        self.model = model or settings.GEMINI_MODEL

    def _require_client(self):
        if self.client is None:
            raise RuntimeError("Gemini client is not configured (set GOOGLE_GENAI_API_KEY)")
        return self.client

    def _generate_structured(
        self,
        contents,
        schema: dict,
        result_model: Type[T],
        system_instruction: Optional[str] = None,
    ) -> Optional[T]:
        """
        Send a request constrained to ``schema`` and decode the reply.

        Transport errors propagate to the caller; a reply that does not decode
        into ``result_model`` is logged and returned as None.
        """
        response = self._require_client().models.generate_content(
            model=self.model,
            contents=contents,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                response_mime_type="application/json",
                response_schema=schema,
                thinking_config=types.ThinkingConfig(thinking_budget=0),  # Disables thinking
            ),
        )
        result = decode_structured(response.text, result_model)
        if isinstance(result, DecodeFailure):
            logger.warning(
                f"Could not decode {result_model.__name__} from Gemini response ({result.reason}). "
                f"Response text: {result.raw[:500]}"
            )
            return None
        return result.value

    @staticmethod
    def _image_contents(image_payload: str, instruction: str) -> list:
        image = decode_image_payload(image_payload)
        return [
            types.Part.from_bytes(data=image.data, mime_type=image.mime_type),
            instruction,
        ]

    @staticmethod
    def _history_contents(history: List[ChatMessage]) -> List[types.Content]:
        return [
            types.Content(role=msg.role, parts=[types.Part(text=msg.text)])
            for msg in ChatTranscript(history).recent(MAX_CHAT_HISTORY)
        ]

    def generate_daily_outfit(self, profile: UserProfile, weather: WeatherData) -> Optional[Outfit]:
        """
        Generate today's look for the profile and weather.

        Returns:
            Outfit with every card field populated, or None on any failure
        """
        try:
            outfit = self._generate_structured(
                build_daily_outfit_prompt(profile, weather),
                OUTFIT_SCHEMA,
                Outfit,
                system_instruction=SYSTEM_INSTRUCTION_BASE,
            )
        except Exception as e:
            logger.error(f"Error generating daily outfit: {e}")
            return None

        if outfit is None:
            return None
        if not outfit.is_complete():
            logger.warning(f"Discarding incomplete daily outfit '{outfit.title}'")
            return None
        return outfit

    def chat_with_stylist(
        self,
        history: List[ChatMessage],
        profile: UserProfile,
        new_message: str,
    ) -> ChatReply:
        """
        Continue the stylist conversation.

        Only the last ``MAX_CHAT_HISTORY`` messages are sent as context. When
        the reply ends with an outfit block it is split off into ``outfit``.
        """
        try:
            chat = self._require_client().chats.create(
                model=self.model,
                config=types.GenerateContentConfig(
                    system_instruction=build_chat_system_instruction(profile, OUTFIT_SCHEMA),
                ),
                history=self._history_contents(history),
            )
            result = chat.send_message(new_message)
            response_text = result.text or ""
        except Exception as e:
            logger.error(f"Error in chat: {e}")
            return ChatReply(text=CHAT_FALLBACK_TEXT)

        text, outfit = split_outfit_reply(response_text)
        return ChatReply(text=text, outfit=outfit)

    def analyze_body_shape(self, image_payload: str) -> Optional[BodyShapeAnalysis]:
        try:
            return self._generate_structured(
                self._image_contents(image_payload, BODY_SHAPE_PROMPT),
                BODY_SHAPE_SCHEMA,
                BodyShapeAnalysis,
            )
        except Exception as e:
            logger.error(f"Error analyzing body shape: {e}")
            return None

    def generate_workout_plan(self, profile: UserProfile) -> Optional[WorkoutPlan]:
        try:
            return self._generate_structured(
                build_workout_prompt(profile),
                WORKOUT_SCHEMA,
                WorkoutPlan,
            )
        except Exception as e:
            logger.error(f"Error generating workout plan: {e}")
            return None

    def analyze_beauty_profile(self, image_payload: str) -> Optional[BeautyAnalysis]:
        try:
            return self._generate_structured(
                self._image_contents(image_payload, BEAUTY_PROMPT),
                BEAUTY_ANALYSIS_SCHEMA,
                BeautyAnalysis,
            )
        except Exception as e:
            logger.error(f"Error analyzing beauty profile: {e}")
            return None

    def analyze_color_palette(self, image_payload: str) -> Optional[ColorPaletteAnalysis]:
        try:
            return self._generate_structured(
                self._image_contents(image_payload, COLOR_PALETTE_PROMPT),
                COLOR_PALETTE_SCHEMA,
                ColorPaletteAnalysis,
            )
        except Exception as e:
            logger.error(f"Error analyzing color palette: {e}")
            return None

    # Async versions run the blocking SDK call in an executor

    async def _run_in_executor(self, func, *args):
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, func, *args)

    async def generate_daily_outfit_async(self, profile: UserProfile, weather: WeatherData) -> Optional[Outfit]:
        return await self._run_in_executor(self.generate_daily_outfit, profile, weather)

    async def chat_with_stylist_async(
        self, history: List[ChatMessage], profile: UserProfile, new_message: str
    ) -> ChatReply:
        return await self._run_in_executor(self.chat_with_stylist, history, profile, new_message)

    async def analyze_body_shape_async(self, image_payload: str) -> Optional[BodyShapeAnalysis]:
        return await self._run_in_executor(self.analyze_body_shape, image_payload)

    async def generate_workout_plan_async(self, profile: UserProfile) -> Optional[WorkoutPlan]:
        return await self._run_in_executor(self.generate_workout_plan, profile)

    async def analyze_beauty_profile_async(self, image_payload: str) -> Optional[BeautyAnalysis]:
        return await self._run_in_executor(self.analyze_beauty_profile, image_payload)

    async def analyze_color_palette_async(self, image_payload: str) -> Optional[ColorPaletteAnalysis]:
        return await self._run_in_executor(self.analyze_color_palette, image_payload)

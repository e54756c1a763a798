import logging
from functools import lru_cache
from typing import List

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from gemini_service import GeminiService
from models import (
    BeautyAnalysisResponse,
    BodyShapeRequest,
    BodyShapeResponse,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ColorPaletteResponse,
    DailyOutfitRequest,
    DailyOutfitResponse,
    ImageRequest,
    ShadeToggleRequest,
    UserProfile,
    WeatherData,
    WorkoutPlanRequest,
    WorkoutPlanResponse,
)
from session_state import ChatTranscript, ProfileStore, build_message
from weather_service import WeatherClient

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Ixora API",
    description="Styling assistant backed by Gemini",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_profile_store = ProfileStore()


@lru_cache()
def get_gemini_service() -> GeminiService:
    return GeminiService()


def get_profile_store() -> ProfileStore:
    return _profile_store


def get_weather_client() -> WeatherClient:
    return WeatherClient()


@app.get("/")
async def root():
    return {"message": "Ixora styling API"}


@app.get("/health")
async def health():
    return {"status": "ok", "gemini_configured": settings.gemini_configured}


# Profile

@app.get("/profile", response_model=UserProfile)
async def get_profile(store: ProfileStore = Depends(get_profile_store)):
    return store.get()


@app.put("/profile", response_model=UserProfile)
async def replace_profile(profile: UserProfile, store: ProfileStore = Depends(get_profile_store)):
    return store.replace(profile)


@app.post("/profile/favorite-shades", response_model=UserProfile)
async def toggle_favorite_shade(request: ShadeToggleRequest, store: ProfileStore = Depends(get_profile_store)):
    return store.toggle_favorite_shade(request.hex)


# Weather

@app.get("/weather", response_model=WeatherData)
async def weather(
    location: str = "",
    store: ProfileStore = Depends(get_profile_store),
    weather_client: WeatherClient = Depends(get_weather_client),
):
    return await weather_client.get_weather_async(location or store.get().location)


# Stylist

@app.post("/daily-outfit", response_model=DailyOutfitResponse)
async def daily_outfit(
    request: DailyOutfitRequest,
    store: ProfileStore = Depends(get_profile_store),
    gemini_service: GeminiService = Depends(get_gemini_service),
    weather_client: WeatherClient = Depends(get_weather_client),
):
    profile = request.profile or store.get()
    weather_data = request.weather or await weather_client.get_weather_async(profile.location)
    outfit = await gemini_service.generate_daily_outfit_async(profile, weather_data)
    if outfit is None:
        logger.info(f"No daily outfit generated for {profile.name}")
    return DailyOutfitResponse(weather=weather_data, outfit=outfit)


@app.get("/chat/welcome", response_model=List[ChatMessage])
async def chat_welcome(store: ProfileStore = Depends(get_profile_store)):
    return list(ChatTranscript.start(store.get()).messages)


@app.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    store: ProfileStore = Depends(get_profile_store),
    gemini_service: GeminiService = Depends(get_gemini_service),
):
    profile = request.profile or store.get()
    reply = await gemini_service.chat_with_stylist_async(request.history, profile, request.message)
    model_message = build_message("model", reply.text, reply.outfit)
    transcript = (
        ChatTranscript(request.history)
        .append(build_message("user", request.message))
        .append(model_message)
    )
    return ChatResponse(
        text=reply.text,
        outfit=reply.outfit,
        message=model_message,
        history=list(transcript.messages),
    )


@app.post("/analysis/body-shape", response_model=BodyShapeResponse)
async def analyze_body_shape(
    request: BodyShapeRequest,
    store: ProfileStore = Depends(get_profile_store),
    gemini_service: GeminiService = Depends(get_gemini_service),
):
    analysis = await gemini_service.analyze_body_shape_async(request.image_base64)
    profile = store.get()
    if analysis is not None and request.apply_to_profile:
        profile = store.apply_body_shape(analysis.shape)
    return BodyShapeResponse(analysis=analysis, profile=profile)


@app.post("/workout-plan", response_model=WorkoutPlanResponse)
async def workout_plan(
    request: WorkoutPlanRequest,
    store: ProfileStore = Depends(get_profile_store),
    gemini_service: GeminiService = Depends(get_gemini_service),
):
    profile = request.profile or store.get()
    plan = await gemini_service.generate_workout_plan_async(profile)
    return WorkoutPlanResponse(plan=plan)


@app.post("/analysis/beauty", response_model=BeautyAnalysisResponse)
async def analyze_beauty(
    request: ImageRequest,
    gemini_service: GeminiService = Depends(get_gemini_service),
):
    analysis = await gemini_service.analyze_beauty_profile_async(request.image_base64)
    return BeautyAnalysisResponse(analysis=analysis)


@app.post("/analysis/color-palette", response_model=ColorPaletteResponse)
async def analyze_color_palette(
    request: ImageRequest,
    gemini_service: GeminiService = Depends(get_gemini_service),
):
    analysis = await gemini_service.analyze_color_palette_async(request.image_base64)
    return ColorPaletteResponse(analysis=analysis)

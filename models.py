from pydantic import BaseModel, Field
from typing import List, Optional, Literal
from datetime import datetime
from enum import Enum
import uuid


class Gender(str, Enum):
    female = "Female"
    male = "Male"
    non_binary = "Non-Binary"
    prefer_not_to_say = "Prefer not to say"


class BodyShape(str, Enum):
    hourglass = "Hourglass"
    pear = "Pear"
    apple = "Apple"
    rectangle = "Rectangle"
    inverted_triangle = "Inverted Triangle"


class SkinTone(str, Enum):
    fair_cool = "Fair (Cool Undertone)"
    fair_warm = "Fair (Warm Undertone)"
    medium_neutral = "Medium (Neutral)"
    medium_warm = "Medium (Warm)"
    deep_cool = "Deep (Cool)"
    deep_warm = "Deep (Warm)"


class Budget(str, Enum):
    low = "Low"
    medium = "Medium"
    high = "High"
    luxury = "Luxury"


class Marketplace(str, Enum):
    amazon = "Amazon"
    myntra = "Myntra"
    ajio = "Ajio"
    other = "Other"


class UserProfile(BaseModel):
    name: str
    age: int = Field(..., ge=0, le=130)
    gender: Gender
    body_shape: BodyShape
    skin_tone: SkinTone
    height_cm: float = Field(..., gt=0)
    location: str
    style_preferences: List[str] = []
    budget: Budget = Budget.medium
    favorite_shades: List[str] = []


DEFAULT_PROFILE = UserProfile(
    name="Alex",
    age=28,
    gender=Gender.female,
    body_shape=BodyShape.hourglass,
    skin_tone=SkinTone.medium_neutral,
    height_cm=165,
    location="New York",
    style_preferences=["Minimalist", "Chic"],
    budget=Budget.medium,
    favorite_shades=[],
)


class ProductItem(BaseModel):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    name: str
    brand: str
    price: float
    currency: str = "USD"
    image_url: str = ""
    url: str = ""
    tracking: bool = False
    rating: Optional[float] = None
    review_count: Optional[int] = None
    source: Optional[Marketplace] = None


class Outfit(BaseModel):
    title: str
    description: str = ""
    reasoning: str = ""
    items: List[ProductItem]
    tags: List[str] = []

    def is_complete(self) -> bool:
        """True when every field the outfit card renders is populated."""
        return bool(
            self.title.strip()
            and self.description.strip()
            and self.reasoning.strip()
            and self.items
        )


class ChatMessage(BaseModel):
    id: str
    role: Literal["user", "model"]
    text: str
    timestamp: datetime
    outfit: Optional[Outfit] = None


class ChatReply(BaseModel):
    text: str
    outfit: Optional[Outfit] = None


class WeatherData(BaseModel):
    temp: float
    condition: str
    location: str


class Exercise(BaseModel):
    name: str
    reps: str
    description: str
    benefit: str


class WorkoutPlan(BaseModel):
    focus_area: str
    goal: str
    frequency: str = ""
    warmup: List[str]
    main_circuit: List[Exercise]
    cooldown: List[str]


class BodyShapeAnalysis(BaseModel):
    shape: BodyShape
    reasoning: str


class BeautyAnalysis(BaseModel):
    face_shape: str = ""
    skin_tone: str
    undertone: str
    recommended_lip_colors: List[str]
    recommended_blush_colors: List[str] = []
    recommended_eyeshadow_colors: List[str] = []
    recommended_hair_styles: List[str]
    placement_tips: List[str] = []


class PaletteColor(BaseModel):
    name: str
    hex: str


class ColorPaletteAnalysis(BaseModel):
    season: str
    description: str
    best_colors: List[PaletteColor]
    neutrals: List[PaletteColor]
    avoid_colors: List[PaletteColor]
    style_keywords: List[str] = []


# API request / response bodies

class ShadeToggleRequest(BaseModel):
    hex: str


class DailyOutfitRequest(BaseModel):
    profile: Optional[UserProfile] = None
    weather: Optional[WeatherData] = None


class DailyOutfitResponse(BaseModel):
    weather: WeatherData
    outfit: Optional[Outfit] = None


class ChatRequest(BaseModel):
    history: List[ChatMessage] = []
    message: str = Field(..., min_length=1)
    profile: Optional[UserProfile] = None


class ChatResponse(BaseModel):
    text: str
    outfit: Optional[Outfit] = None
    message: ChatMessage
    history: List[ChatMessage] = []


class ImageRequest(BaseModel):
    image_base64: str


class BodyShapeRequest(ImageRequest):
    apply_to_profile: bool = False


class BodyShapeResponse(BaseModel):
    analysis: Optional[BodyShapeAnalysis] = None
    profile: UserProfile


class WorkoutPlanRequest(BaseModel):
    profile: Optional[UserProfile] = None


class WorkoutPlanResponse(BaseModel):
    plan: Optional[WorkoutPlan] = None


class BeautyAnalysisResponse(BaseModel):
    analysis: Optional[BeautyAnalysis] = None


class ColorPaletteResponse(BaseModel):
    analysis: Optional[ColorPaletteAnalysis] = None

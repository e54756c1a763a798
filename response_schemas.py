"""
Output-shape constraints sent to Gemini as ``response_schema``.

Keys match the pydantic models in ``models.py`` so replies decode directly.
"""
from models import BodyShape, Marketplace

HEX_COLOR_LIST = {
    "type": "array",
    "items": {"type": "string", "description": "Hex color code such as #A0522D"},
}

PRODUCT_ITEM_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "name": {"type": "string", "description": "Name of the garment"},
        "brand": {"type": "string"},
        "price": {"type": "number"},
        "currency": {"type": "string"},
        "image_url": {"type": "string", "description": "A placeholder URL"},
        "url": {"type": "string", "description": "A placeholder purchase URL"},
        "tracking": {"type": "boolean"},
        "rating": {"type": "number"},
        "review_count": {"type": "integer"},
        "source": {"type": "string", "enum": [m.value for m in Marketplace]},
    },
    "required": ["name", "brand", "price"],
}

OUTFIT_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "description": "A catchy name for the look"},
        "description": {"type": "string", "description": "A brief, evocative description of the vibe"},
        "reasoning": {
            "type": "string",
            "description": "Specific explanation of why this fits the user's body shape and skin tone",
        },
        "tags": {"type": "array", "items": {"type": "string"}},
        "items": {"type": "array", "items": PRODUCT_ITEM_SCHEMA},
    },
    "required": ["title", "description", "reasoning", "items"],
}

WORKOUT_SCHEMA = {
    "type": "object",
    "properties": {
        "focus_area": {"type": "string"},
        "goal": {"type": "string"},
        "frequency": {"type": "string"},
        "warmup": {"type": "array", "items": {"type": "string"}},
        "main_circuit": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "reps": {"type": "string"},
                    "description": {"type": "string"},
                    "benefit": {"type": "string", "description": "Why this helps the specific body shape"},
                },
                "required": ["name", "reps", "description", "benefit"],
            },
        },
        "cooldown": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["focus_area", "goal", "warmup", "main_circuit", "cooldown"],
}

BODY_SHAPE_SCHEMA = {
    "type": "object",
    "properties": {
        "shape": {"type": "string", "enum": [s.value for s in BodyShape]},
        "reasoning": {"type": "string"},
    },
    "required": ["shape", "reasoning"],
}

BEAUTY_ANALYSIS_SCHEMA = {
    "type": "object",
    "properties": {
        "face_shape": {"type": "string"},
        "skin_tone": {"type": "string"},
        "undertone": {"type": "string"},
        "recommended_lip_colors": dict(HEX_COLOR_LIST, description="Array of 4 hex color codes"),
        "recommended_blush_colors": HEX_COLOR_LIST,
        "recommended_eyeshadow_colors": HEX_COLOR_LIST,
        "recommended_hair_styles": {"type": "array", "items": {"type": "string"}},
        "placement_tips": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Where to apply color for this face shape",
        },
    },
    "required": ["skin_tone", "undertone", "recommended_lip_colors", "recommended_hair_styles"],
}

_PALETTE_COLOR_LIST = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "hex": {"type": "string"},
        },
        "required": ["name", "hex"],
    },
}

COLOR_PALETTE_SCHEMA = {
    "type": "object",
    "properties": {
        "season": {"type": "string", "description": "Seasonal color type, e.g. Deep Autumn"},
        "description": {"type": "string"},
        "best_colors": _PALETTE_COLOR_LIST,
        "neutrals": _PALETTE_COLOR_LIST,
        "avoid_colors": _PALETTE_COLOR_LIST,
        "style_keywords": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["season", "description", "best_colors", "neutrals", "avoid_colors"],
}

"""
Review prompt builder.

Sandi Metz Principles:
- Single Responsibility: Turn a request into prompt text
- Small methods: Each method does one thing
- Clear naming: Self-documenting code
"""

from typing import Dict

from reviewgen.models.request import GenerationRequest

DEFAULT_LANGUAGE = "English"
DEFAULT_RATING = 3
DEFAULT_VOICE = "friendly"

RATING_TONES: Dict[int, str] = {
    5: "very positive and enthusiastic",
    4: "positive with minor observations",
    3: "balanced with pros and cons",
    2: "disappointed but constructive",
    1: "negative but professional",
}

LANGUAGE_NAMES: Dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "nl": "Dutch",
    "ja": "Japanese",
    "zh": "Chinese",
    "el": "Greek",
}

VOICE_INSTRUCTIONS: Dict[str, str] = {
    "professional": "Use a professional, businesslike tone.",
    "friendly": "Use a friendly, warm, conversational tone.",
    "enthusiastic": "Use an enthusiastic, excited, energetic tone.",
    "detailed": "Be detailed, thorough and analytical.",
}


def rating_tone(rating: int) -> str:
    """Map rating to tone description (unknown ratings read as 3)."""
    return RATING_TONES.get(rating, RATING_TONES[DEFAULT_RATING])


def language_name(code: str) -> str:
    """Map language code to display name (unknown codes read as English)."""
    return LANGUAGE_NAMES.get(code, DEFAULT_LANGUAGE)


def voice_instruction(voice: str) -> str:
    """Map voice to writing instruction (unknown voices read as friendly)."""
    return VOICE_INSTRUCTIONS.get(voice, VOICE_INSTRUCTIONS[DEFAULT_VOICE])


class PromptBuilder:
    """
    Builds the user prompt shared by every provider.

    Backends wrap this prompt in their own message layout.
    """

    def build(self, request: GenerationRequest) -> str:
        """
        Build prompt for request.

        Args:
            request: Generation request

        Returns:
            Prompt text
        """
        parts = [
            f"Write a {rating_tone(request.rating)} review for {request.hotel_name}.",
            f"This was a {request.nights}-night {request.trip_type} stay.",
        ]

        if request.highlights:
            parts.append(f"Highlight these aspects: {', '.join(request.highlights)}.")

        parts.append(voice_instruction(request.voice))
        parts.append("Write naturally and authentically.")

        if language_name(request.language) != DEFAULT_LANGUAGE:
            parts.append(f"Write in {language_name(request.language)}.")

        return " ".join(parts)

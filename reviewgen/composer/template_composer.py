"""
Template-based review composer.

Always-available, provider-free review generation used when both
providers fail.

Sandi Metz Principles:
- Single Responsibility: Compose review text from templates
- Small methods: Each method does one thing
- Pure functions: Same request always yields the same text
"""

import hashlib
from typing import Dict, List, Protocol

from reviewgen.models.request import GenerationRequest
from reviewgen.utils.hasher import canonical_request

HIGHLIGHT_PHRASES: Dict[str, str] = {
    "location": "the location was perfect",
    "cleanliness": "the room was spotlessly clean",
    "comfort": "the bed was extremely comfortable",
    "service": "the staff provided excellent service",
    "breakfast": "the breakfast was delicious",
    "wifi": "the WiFi was fast and reliable",
    "value": "it offered great value for money",
    "amenities": "the amenities were modern and well-maintained",
}

NO_HIGHLIGHTS_TEXT = "The overall experience was as expected."

# Placeholders: {hotel}, {nights}, {trip}, {highlights}
RATING_TEMPLATES: Dict[int, List[str]] = {
    5: [
        "What an incredible {nights}-night stay at {hotel}! Our {trip} trip was "
        "nothing short of magical. {highlights} An experience I will cherish.",
        "From the moment we stepped into {hotel}, I knew this would be "
        "extraordinary. {highlights} For {trip} travelers seeking perfection, "
        "look no further.",
    ],
    4: [
        "{hotel} delivered a solid {nights}-night experience that genuinely "
        "impressed me. {highlights} Perfect for {trip} travelers who appreciate "
        "quality.",
        "Our {trip} stay at {hotel} was a pleasant surprise. {highlights} "
        "A dependable choice.",
    ],
    3: [
        "{hotel} provided exactly what we needed, no more and no less. Our "
        "{nights}-night {trip} stay was serviceable. {highlights}",
        "If you are seeking basic comfort for a {trip} trip, {hotel} checks "
        "those boxes. {highlights} Just don't expect to be wowed.",
    ],
    2: [
        "Our {nights}-night experience at {hotel} felt like a series of missed "
        "opportunities. {highlights} For a {trip} trip, it left us more "
        "frustrated than rested.",
        "{hotel} seemed to be trying, but fell short at every turn. "
        "{highlights} Our {trip} stay was about managing expectations.",
    ],
    1: [
        "Our {nights}-night {trip} stay at {hotel} was a disappointment from "
        "start to finish. {highlights} Save yourself the trouble and look "
        "elsewhere.",
        "I have experienced more warmth in a waiting room than at {hotel}. "
        "{highlights} A {trip} experience I would not repeat.",
    ],
}


class TemplateComposer(Protocol):
    """Interface for provider-free review composition."""

    def compose(self, request: GenerationRequest) -> str:
        """Compose review text for request."""
        ...


def highlights_to_text(highlights: List[str]) -> str:
    """
    Convert highlight keys to one natural sentence.

    Known keys map to phrases, unknown keys are used verbatim.

    Args:
        highlights: Highlight keys in caller order

    Returns:
        Sentence describing the highlights
    """
    if not highlights:
        return NO_HIGHLIGHTS_TEXT

    phrases = [HIGHLIGHT_PHRASES.get(h.lower(), h) for h in highlights]
    if len(phrases) == 1:
        sentence = phrases[0]
    elif len(phrases) == 2:
        sentence = f"{phrases[0]} and {phrases[1]}"
    else:
        sentence = f"{', '.join(phrases[:-1])}, and {phrases[-1]}"
    return sentence[0].upper() + sentence[1:] + "."


class DeterministicTemplateComposer:
    """
    Rating-keyed template composer.

    The template variant is chosen from the request fingerprint, so
    identical requests always produce identical text.
    """

    def __init__(self, templates: Dict[int, List[str]] | None = None):
        """
        Initialize composer.

        Args:
            templates: Rating to template variants (defaults built in)
        """
        self._templates = templates or RATING_TEMPLATES

    def compose(self, request: GenerationRequest) -> str:
        """
        Compose review text for request.

        Args:
            request: Generation request

        Returns:
            Review text mentioning the hotel name
        """
        template = self._select_template(request)
        return template.format(
            hotel=request.hotel_name,
            nights=request.nights,
            trip=request.trip_type,
            highlights=highlights_to_text(request.highlights),
        ).strip()

    def _select_template(self, request: GenerationRequest) -> str:
        """Pick the variant for this request."""
        variants = self._templates.get(request.rating) or self._templates[3]
        digest = hashlib.sha256(canonical_request(request).encode()).hexdigest()
        return variants[int(digest, 16) % len(variants)]

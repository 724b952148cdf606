"""
Review generation request model.

Sandi Metz Principles:
- Small classes focused on data validation
- Clear property names
- Immutable data structures
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenerationRequest(BaseModel):
    """Structured review request, immutable once submitted."""

    model_config = ConfigDict(frozen=True)

    hotel_name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Name of the hotel",
        examples=["Grand Plaza"],
    )
    rating: int = Field(..., ge=1, le=5, description="Star rating (1-5)")
    trip_type: str = Field(default="leisure", description="Type of trip")
    highlights: List[str] = Field(
        default_factory=list, description="Aspects to highlight, in caller order"
    )
    nights: int = Field(default=3, ge=1, le=365, description="Nights stayed")
    voice: str = Field(default="friendly", description="Writing voice")
    language: str = Field(default="en", description="Review language code")

    @field_validator("hotel_name")
    @classmethod
    def validate_hotel_name(cls, v: str) -> str:
        """Validate and normalize hotel name."""
        v = v.strip()
        if not v:
            raise ValueError("Hotel name cannot be empty")
        return v

    @field_validator("highlights")
    @classmethod
    def validate_highlights(cls, v: List[str]) -> List[str]:
        """Drop blank highlights."""
        return [h.strip() for h in v if h and h.strip()]

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Normalize language code."""
        return v.strip().lower() or "en"

"""
Last-resort review text.

Built from the hotel name and rating only, with no external dependency.
"""

from reviewgen.models.request import GenerationRequest


def emergency_text(request: GenerationRequest) -> str:
    """
    Build the emergency review sentence.

    Args:
        request: Generation request

    Returns:
        Minimal review text
    """
    experience = (
        "We had a wonderful experience."
        if request.rating >= 4
        else "Our stay was satisfactory."
    )
    return (
        f"Thank you for staying at {request.hotel_name}. {experience} "
        "We appreciate the hospitality and service provided."
    )

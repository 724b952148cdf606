"""Provider-free review composition."""

from reviewgen.composer.emergency import emergency_text
from reviewgen.composer.template_composer import (
    DeterministicTemplateComposer,
    TemplateComposer,
)

__all__ = ["DeterministicTemplateComposer", "TemplateComposer", "emergency_text"]

"""
Data models for terminology resolution.
"""

from pydantic import BaseModel, Field


class TermEntry(BaseModel):
    """A French term entry mapping spelling variants to a canonical game entity.

    Attributes:
        canonical: Canonical English key, matching an enum member name
                   in lowercase (e.g., "necrotic")
        category: Term category - one of: damage_type, ability
        en: English display name (e.g., "Necrotic")
        fr_primary: Primary French name as printed in spell text (e.g., "nécrotique")
        fr_variants: Plural, feminine and unaccented forms
    """
    canonical: str = Field(..., description="Canonical English key")
    category: str = Field(..., description="Term category")
    en: str = Field(..., description="English display name")
    fr_primary: str = Field(..., description="Primary French name")
    fr_variants: list[str] = Field(default_factory=list, description="French variant forms")

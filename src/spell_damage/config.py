"""
Configuration for the spell-damage analyzer.
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field

from .vocabulary import MAX_SPELL_LEVEL

ENV_PREFIX = "SPELL_DAMAGE_"


class AnalyzerConfig(BaseModel):
    """Tunable settings for parsing and compiling spell damage.

    Defaults reproduce the stock behavior; every field can be overridden
    from a ``SPELL_DAMAGE_<FIELD>`` environment variable via :meth:`from_env`.
    """

    # Compilation
    max_slot_level: int = Field(
        default=MAX_SPELL_LEVEL,
        ge=1,
        le=MAX_SPELL_LEVEL,
        description="Highest slot level offered by the cast-level enumerator"
    )

    # Extraction
    require_damage_context: bool = Field(
        default=True,
        description="Keep description dice only when damage vocabulary surrounds them"
    )
    context_before: int = Field(
        default=50,
        ge=0,
        description="Characters scanned before a dice token for damage context"
    )
    context_after: int = Field(
        default=20,
        ge=0,
        description="Characters scanned after a dice token for damage context"
    )
    vocabulary_path: Path | None = Field(
        default=None,
        description="Alternative vocabulary YAML; the packaged French table when unset"
    )

    # Server
    log_level: str = Field(
        default="INFO",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level for the MCP server"
    )

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "AnalyzerConfig":
        """Build a config from ``SPELL_DAMAGE_*`` variables.

        Unset variables keep their defaults; values are validated by pydantic.
        """
        env = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = env.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw != "":
                values[name] = raw
        return cls(**values)

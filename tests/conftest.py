"""
Pytest configuration and fixtures for spell-damage tests.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path to allow importing spell_damage
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from spell_damage import analyze_spell_damage  # noqa: E402
from spell_texts import (  # noqa: E402
    FIRE_BOLT_DESCRIPTION,
    FIRE_BOLT_HIGHER,
    FIREBALL_DESCRIPTION,
    FIREBALL_HIGHER,
    SIMPLE_DESCRIPTION,
    SIMPLE_HIGHER,
)


@pytest.fixture
def fire_bolt():
    """Cantrip dealing 1d10 fire, +1d10 at levels 5, 11 and 17."""
    return analyze_spell_damage(FIRE_BOLT_DESCRIPTION, FIRE_BOLT_HIGHER, 0)


@pytest.fixture
def fireball():
    """Level 3 spell dealing 8d6 fire, +1d6 per slot level above 3."""
    return analyze_spell_damage(FIREBALL_DESCRIPTION, FIREBALL_HIGHER, 3)


@pytest.fixture
def simple_slot_spell():
    """Level 3 spell dealing 2d6 fire, +1d6 per slot level."""
    return analyze_spell_damage(SIMPLE_DESCRIPTION, SIMPLE_HIGHER, 3)

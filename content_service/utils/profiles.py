"""Profile presets assigned to new accounts."""

from __future__ import annotations

import random
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Sequence

from content_service.config import get_settings


@dataclass(frozen=True)
class ProfilePreset:
    name: str
    image: str


PROFILE_PRESETS: Sequence[ProfilePreset] = (
    ProfilePreset("Фёдор Достоевский", "https://iili.io/JwdlbqJ.png"),
    ProfilePreset("Антон Чехов", "https://iili.io/Jwdlg0x.png"),
    ProfilePreset("Лев Толстой", "https://iili.io/Jwdl6JV.png"),
)

DEFAULT_PROFILE = PROFILE_PRESETS[0]


@lru_cache(maxsize=1)
def get_profile_rng() -> random.Random:
    """Process-wide source for preset draws, seeded once from PROFILE_SEED."""
    return random.Random(get_settings().profile_seed)


def choose_profile(rng: Optional[random.Random] = None) -> ProfilePreset:
    """Pick a preset uniformly at random."""
    source = rng if rng is not None else get_profile_rng()
    return source.choice(PROFILE_PRESETS)

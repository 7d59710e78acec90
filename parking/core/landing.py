"""
Landing page decisions.

Pure functions and DTOs behind the host-keyed landing route: which page to
show, which content entry to feature, which background to use. No I/O here;
parking.services.landing_service does the lookups.
"""

import enum
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, TypeVar

from parking.db.models import DailyContent, Domain, ProfileStatus

T = TypeVar("T")

BACKGROUNDS = [
    "https://images.unsplash.com/photo-1470252649378-9c29740c9fa8?auto=format&fit=crop&w=2000&q=80",
    "https://images.unsplash.com/photo-1495616811223-4d98c6e9d869?auto=format&fit=crop&w=2000&q=80",
    "https://images.unsplash.com/photo-1518837695005-2083093ee35b?auto=format&fit=crop&w=2000&q=80",
    "https://images.unsplash.com/photo-1464822759023-fed622ff2c3b?auto=format&fit=crop&w=2000&q=80",
    "https://images.unsplash.com/photo-1501183007906-29a18b95b269?auto=format&fit=crop&w=2000&q=80",
    "https://images.unsplash.com/photo-1441974231531-c6227db76b6e?auto=format&fit=crop&w=2000&q=80",
]


class LandingKind(str, enum.Enum):
    PLATFORM_HOME = "platform_home"
    NOT_FOUND = "not_found"
    PARKED = "parked"


@dataclass
class LandingResult:
    """
    Everything the renderer needs for one landing request.

    domain/content are only set for PARKED; featured only for PLATFORM_HOME.
    """

    kind: LandingKind
    host: str = ""
    domain: Optional[Domain] = None
    content: Optional[DailyContent] = None
    featured: List[Domain] = field(default_factory=list)

    @property
    def status_code(self) -> int:
        return 404 if self.kind == LandingKind.NOT_FOUND else 200


def classify_domain(domain: Optional[Domain], owner_status: Optional[ProfileStatus]) -> LandingKind:
    """
    Decide whether a looked-up domain may be rendered.

    Only domains whose owning profile is active are served.
    """
    if domain is None:
        return LandingKind.NOT_FOUND
    if owner_status != ProfileStatus.ACTIVE:
        return LandingKind.NOT_FOUND
    return LandingKind.PARKED


def pick_random(entries: Sequence[T], rng: Optional[random.Random] = None) -> Optional[T]:
    """Uniform random pick; None for an empty sequence. Recomputed every call."""
    if not entries:
        return None
    rng = rng or random
    return entries[rng.randrange(len(entries))]


def background_for(domain_name: str) -> str:
    """Stable background per domain: sum of character codes modulo the list size."""
    index = sum(ord(ch) for ch in domain_name) % len(BACKGROUNDS)
    return BACKGROUNDS[index]

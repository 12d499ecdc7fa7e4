"""
Investor profile and age-based guidance.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InvestorProfile:
    """Who the projection is for. Informational only."""
    name: str = ""
    age: Optional[int] = None
    occupation: str = ""

    @property
    def message(self) -> str:
        return age_message(self.age)


# (upper age bound, message); first band whose bound exceeds the age wins
AGE_BANDS = (
    (18, "🚀 Earliest start there is: build the saving habit and learn the basics."),
    (25, "🌱 Time is on your side, young investor! Start small with DCA; consistency is key."),
    (35, "⚖️ Combine growth and stability. Sharpen your experience!"),
    (50, "🏡 Balance growth with family protection, and review regularly."),
    (60, "🛡️ Prioritize preserving capital! Raise the share of stable assets."),
)
SENIOR_MESSAGE = "🌳 Your experience is your strength! Focus on strategy and comfort."


def age_message(age: Optional[int]) -> str:
    """Guidance text for an age; empty when no age was given."""
    if not age:
        return ""
    for bound, message in AGE_BANDS:
        if age < bound:
            return message
    return SENIOR_MESSAGE

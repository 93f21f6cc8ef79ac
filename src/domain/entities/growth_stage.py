"""Overall plant growth stage enumeration."""

from enum import Enum


class GrowthStage(str, Enum):
    """Qualitative maturity label for the whole plant snapshot."""

    IMMATURE = "Immature"
    RIPENING = "Ripening"
    MATURE = "Mature"

    def describe(self) -> str:
        """Short advice line for the label."""
        mapping = {
            GrowthStage.IMMATURE: "Most fruit is still green; harvest is some way off.",
            GrowthStage.RIPENING: "A large share of fruit is colouring; plan picking capacity.",
            GrowthStage.MATURE: "Most fruit is ripe; harvest now to limit losses.",
        }
        return mapping[self]

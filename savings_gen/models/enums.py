"""Enumeration types for customer and account entities."""

from enum import Enum


class Gender(str, Enum):
    FEMALE = "Female"
    MALE = "Male"

    @classmethod
    def from_tag(cls, tag: str) -> "Gender":
        """Map a names-reference tag (``girl``/``boy``) to a gender."""
        return _GENDER_TAGS[tag]


_GENDER_TAGS = {"girl": Gender.FEMALE, "boy": Gender.MALE}

GENDER_TAGS: tuple[str, ...] = tuple(_GENDER_TAGS)


class EducationTier(str, Enum):
    """Highest-education tier, ordered Secondary < Vocational < Higher."""

    SECONDARY = "Secondary"
    VOCATIONAL = "Vocational"
    HIGHER = "Higher"

    @property
    def code(self) -> str:
        return _TIER_CODES[self]

    @classmethod
    def from_code(cls, code: str) -> "EducationTier":
        for tier, tier_code in _TIER_CODES.items():
            if tier_code == code:
                return tier
        raise ValueError(f"Unknown education tier code: {code!r}")

    @classmethod
    def ordered_labels(cls) -> list[str]:
        return [tier.value for tier in cls]


_TIER_CODES = {
    EducationTier.SECONDARY: "SS",
    EducationTier.VOCATIONAL: "VE",
    EducationTier.HIGHER: "HE",
}

# Salary-reference qualification label -> education tier
QUALIFICATION_TIERS: dict[str, EducationTier] = {
    "No tertiary qualification": EducationTier.SECONDARY,
    "Certificate I-II": EducationTier.VOCATIONAL,
    "Certificate III-IV": EducationTier.VOCATIONAL,
    "Diploma": EducationTier.VOCATIONAL,
    "Bachelor degree": EducationTier.HIGHER,
    "Graduate diploma": EducationTier.HIGHER,
    "Postgraduate degree": EducationTier.HIGHER,
}


class AgeBracket(str, Enum):
    """Coarse age range used for two-stage age sampling."""

    TEENS = "15-19"
    YOUNG_ADULT = "20-39"
    MIDDLE_AGE = "40-69"
    SENIOR = "70+"

    @property
    def bounds(self) -> tuple[int, int]:
        """Inclusive numeric age range."""
        return _BRACKET_BOUNDS[self]

    def contains(self, age: int) -> bool:
        low, high = self.bounds
        return low <= age <= high


_BRACKET_BOUNDS = {
    AgeBracket.TEENS: (15, 19),
    AgeBracket.YOUNG_ADULT: (20, 39),
    AgeBracket.MIDDLE_AGE: (40, 69),
    AgeBracket.SENIOR: (70, 90),
}

"""Customer model."""

from dataclasses import dataclass

from savings_gen.models.enums import AgeBracket, EducationTier, Gender


@dataclass
class Customer:
    """Bank customer entity."""

    customer_id: int  # 8 digits, no leading zero
    first_name: str
    surname: str
    full_name: str
    gender: Gender
    age: int
    age_bracket: AgeBracket
    education: EducationTier
    profession: str
    monthly_salary: float  # rounded to the nearest hundred
    address: str | None = None

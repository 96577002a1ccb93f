"""Configuration management for savings-gen."""

from dataclasses import dataclass, field, fields
from datetime import date
from pathlib import Path

from savings_gen.exceptions import ConfigurationError
from savings_gen.models.enums import AgeBracket, EducationTier


@dataclass
class ReferenceConfig:
    """Locations of the external reference tables.

    ``surnames_source`` and ``addresses_source`` may be either an HTTP(S)
    URL or a local path. Rename maps translate source column headers to
    the canonical column names expected by the loader.
    """

    names_path: Path | None = None
    surnames_source: str | None = None
    salaries_path: Path | None = None
    addresses_source: str | None = None
    timeout_seconds: float = 30.0
    address_suffix: str = ", Melbourne VIC"
    names_columns: dict[str, str] = field(default_factory=dict)
    surnames_columns: dict[str, str] = field(default_factory=dict)
    salaries_columns: dict[str, str] = field(default_factory=dict)
    addresses_columns: dict[str, str] = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        """Whether every reference source is configured."""
        return None not in (
            self.names_path,
            self.surnames_source,
            self.salaries_path,
            self.addresses_source,
        )


@dataclass
class SeedConfig:
    """One explicit seed per sampling stage."""

    customer_ids: int = 2024
    names: int = 1
    demographics: int = 2
    education: int = 3
    addresses: int = 4
    account_ids: int = 2025
    accounts: int = 5

    def shifted(self, offset: int) -> "SeedConfig":
        """Return a copy with ``offset`` added to every seed."""
        return SeedConfig(**{f.name: getattr(self, f.name) + offset for f in fields(self)})


@dataclass
class GenerationConfig:
    """Sizes, rates and distributions for record generation."""

    num_customers: int = 200
    reference_date: date = field(default_factory=lambda: date(2024, 4, 1))
    missing_rate: float = 0.05
    balance_factor: float = 0.2
    interest_rate: float = 0.03
    salary_noise_scale: float = 200.0
    age_bracket_weights: dict[str, float] = field(
        default_factory=lambda: {
            "15-19": 0.13,
            "20-39": 0.45,
            "40-69": 0.25,
            "70+": 0.17,
        }
    )
    education_weights: dict[str, float] = field(
        default_factory=lambda: {"SS": 0.47, "VE": 0.18, "HE": 0.35}
    )


@dataclass
class OutputConfig:
    """Output configuration."""

    output_dir: Path = field(default_factory=lambda: Path("output"))
    format: str = "csv"
    pretty_json: bool = False


OUTPUT_FORMATS = ("csv", "json")


@dataclass
class SavingsGenConfig:
    """Main configuration for savings-gen."""

    references: ReferenceConfig = field(default_factory=ReferenceConfig)
    seeds: SeedConfig = field(default_factory=SeedConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"

    def validate(self) -> None:
        """Check value ranges.

        Raises
        ------
        ConfigurationError
            If any setting is out of range.
        """
        gen = self.generation
        if gen.num_customers <= 0:
            raise ConfigurationError(
                f"num_customers must be positive, got {gen.num_customers}"
            )
        if not 0.0 <= gen.missing_rate <= 1.0:
            raise ConfigurationError(
                f"missing_rate must be within [0, 1], got {gen.missing_rate}"
            )
        for name, weights, known in (
            ("age_bracket_weights", gen.age_bracket_weights, [b.value for b in AgeBracket]),
            ("education_weights", gen.education_weights, [t.code for t in EducationTier]),
        ):
            unknown = sorted(set(weights) - set(known))
            if unknown:
                raise ConfigurationError(
                    f"{name} has unknown key(s) {unknown}, expected a subset of {known}"
                )
            total = sum(weights.values())
            if abs(total - 1.0) > 1e-6:
                raise ConfigurationError(f"{name} must sum to 1.0, got {total}")
        if self.output.format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown output format {self.output.format!r}, "
                f"expected one of {OUTPUT_FORMATS}"
            )
        if self.references.timeout_seconds <= 0:
            raise ConfigurationError("timeout_seconds must be positive")

    @classmethod
    def from_env(cls) -> "SavingsGenConfig":
        """Create config from environment variables."""
        import os

        names_path = os.getenv("NAMES_PATH")
        salaries_path = os.getenv("SALARIES_PATH")
        references = ReferenceConfig(
            names_path=Path(names_path) if names_path else None,
            surnames_source=os.getenv("SURNAMES_SOURCE"),
            salaries_path=Path(salaries_path) if salaries_path else None,
            addresses_source=os.getenv("ADDRESSES_SOURCE"),
            timeout_seconds=float(os.getenv("FETCH_TIMEOUT", "30")),
        )

        generation = GenerationConfig(
            num_customers=int(os.getenv("NUM_CUSTOMERS", "200")),
            missing_rate=float(os.getenv("MISSING_RATE", "0.05")),
        )

        output = OutputConfig(
            output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            format=os.getenv("OUTPUT_FORMAT", "csv").lower(),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        seeds = SeedConfig()
        seed_offset = os.getenv("SEED_OFFSET")
        if seed_offset:
            seeds = seeds.shifted(int(seed_offset))

        return cls(
            references=references,
            seeds=seeds,
            generation=generation,
            output=output,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

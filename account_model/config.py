"""Configuration management for account-model."""

from dataclasses import dataclass, field

from account_model.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format_type: str = "standard"

    def __post_init__(self) -> None:
        if self.format_type not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.format_type!r}, expected one of {LOG_FORMATS}"
            )


@dataclass
class GeneratorConfig:
    """Sample account generation configuration."""

    locale: str = "en_GB"
    seed: int | None = None
    business_ratio: float = 0.3
    include_number: bool = True
    include_iban: bool = True

    def __post_init__(self) -> None:
        if not 0.0 <= self.business_ratio <= 1.0:
            raise ConfigurationError(
                f"business_ratio must be between 0 and 1, got {self.business_ratio}"
            )


@dataclass
class AccountModelConfig:
    """Main configuration for account-model."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    @classmethod
    def from_env(cls) -> "AccountModelConfig":
        """Create config from environment variables."""
        import os

        seed_str = os.getenv("SEED")
        ratio_str = os.getenv("BUSINESS_RATIO", "0.3")
        try:
            seed = int(seed_str) if seed_str else None
            business_ratio = float(ratio_str)
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e

        logging_config = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format_type=os.getenv("LOG_FORMAT", "standard"),
        )

        generator = GeneratorConfig(
            locale=os.getenv("FAKER_LOCALE", "en_GB"),
            seed=seed,
            business_ratio=business_ratio,
        )

        return cls(logging=logging_config, generator=generator)

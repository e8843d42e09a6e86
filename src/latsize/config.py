"""Lattice size configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(Exception):
    """Raised when configuration values are missing or inconsistent.

    Example:
        >>> Settings(
        ...     _env_file=None, SAMPLE_MIN_VERTICES=9, SAMPLE_MAX_VERTICES=4
        ... ).require_sample_range()  # doctest: +ELLIPSIS
        Traceback (most recent call last):
        ...
        ConfigError: Sample vertex range is invalid (min=9, max=4). Set
        SAMPLE_MIN_VERTICES <= SAMPLE_MAX_VERTICES.
    """

    def __init__(self, key_name: str, detail: str, hint: str) -> None:
        """Initialize configuration error.

        Args:
            key_name: Human-readable name of the offending setting.
            detail: The values that were found.
            hint: What to set to fix it.
        """
        self.key_name = key_name
        self.detail = detail
        self.hint = hint
        super().__init__(f"{key_name} is invalid ({detail}). Set {hint}.")


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Reduction driver
    MAX_REDUCTION_STEPS: int = 1000  # defensive bound, never hit on valid input

    # Sampling experiment (Harrison-Soprunova timing runs)
    SAMPLE_COUNT: int = 100
    SAMPLE_MIN_VERTICES: int = 5
    SAMPLE_MAX_VERTICES: int = 20
    SAMPLE_COORD_BOUND: int = 100
    SAMPLE_SEED: int = 42

    def require_sample_range(self) -> tuple[int, int]:
        """Get the (min, max) vertex range, raising ConfigError if inverted.

        Returns:
            (SAMPLE_MIN_VERTICES, SAMPLE_MAX_VERTICES).

        Raises:
            ConfigError: If the range is empty or starts below 3 points.
        """
        low, high = self.SAMPLE_MIN_VERTICES, self.SAMPLE_MAX_VERTICES
        if low < 3 or low > high:  # noqa: PLR2004
            raise ConfigError(
                "Sample vertex range",
                f"min={low}, max={high}",
                "SAMPLE_MIN_VERTICES <= SAMPLE_MAX_VERTICES",
            )
        return low, high


# Singleton instance for import convenience
settings = Settings()

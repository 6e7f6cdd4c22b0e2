"""Configuration management using pydantic-settings.

Loads from environment variables and .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Attributes:
        image_backend: Image backend used for decoding and rescaling ("pillow").
        resample_filter: Resampling filter name used when rescaling variants.
        cache_warn_threshold: Rescale cache size at which a warning is logged,
            repeated at every further multiple. Entries are never evicted.
        fetch_timeout: HTTP timeout for fetching remote variants in seconds.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_json: Output logs in JSON format.

    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Image backend
    image_backend: str = "pillow"
    resample_filter: str = "lanczos"  # nearest | box | bilinear | hamming | bicubic | lanczos

    # Rescale cache
    cache_warn_threshold: int = 64

    # Loader
    fetch_timeout: int = 30

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


# Global settings instance
settings = Settings()

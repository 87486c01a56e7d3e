from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    match_threshold: float = Field(default=0.8, ge=0.0, le=1.0)  # per-blank fuzzy match
    pass_threshold: float = Field(default=0.5, ge=0.0, le=1.0)  # whole-question verdict
    # Most recent attempt first
    recency_weights: tuple[float, ...] = Field(
        default=(1.0, 0.8, 0.6, 0.4, 0.2), min_length=1
    )
    default_ease_factor: float = Field(default=2.5, ge=1.3)
    min_ease_factor: float = Field(default=1.3, ge=1.3)

    model_config = {"env_prefix": "STUDY_ENGINE_"}


settings = Settings()

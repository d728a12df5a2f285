"""
Calculator settings

Slider bounds, slider defaults and page options. Every field can be
overridden with a BMI_-prefixed environment variable or a .env file,
e.g. BMI_HEIGHT_MAX_CM=230.
"""
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Page settings with validation."""

    model_config = SettingsConfigDict(
        env_prefix="BMI_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Page
    page_title: str = Field(default="BMI Calculator")
    page_icon: str = Field(default="⚖️")

    # Height slider (cm)
    height_min_cm: int = Field(default=120)
    height_max_cm: int = Field(default=220)
    height_default_cm: int = Field(default=170)

    # Weight slider (kg)
    weight_min_kg: int = Field(default=30)
    weight_max_kg: int = Field(default=150)
    weight_default_kg: int = Field(default=70)

    # Optional panels
    show_gauge: bool = Field(default=True)
    show_reference_table: bool = Field(default=True)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode='after')
    def validate_slider_bounds(self):
        if self.height_min_cm <= 0:
            raise ValueError("height_min_cm must be positive")
        if self.weight_min_kg < 0:
            raise ValueError("weight_min_kg must not be negative")

        for name, low, high, default in (
            ("height", self.height_min_cm, self.height_max_cm, self.height_default_cm),
            ("weight", self.weight_min_kg, self.weight_max_kg, self.weight_default_kg),
        ):
            if low >= high:
                raise ValueError(f"{name} minimum ({low}) must be below maximum ({high})")
            if not low <= default <= high:
                raise ValueError(f"{name} default ({default}) must be within [{low}, {high}]")
        return self


@lru_cache()
def get_settings() -> Settings:
    return Settings()

"""
BMI Engine

BMI = weight_kg / (height_m)²

Computes the BMI value for a height/weight pair, classifies it into one of
four categories and looks up the guidance shown for each category.
"""
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

import structlog

logger = structlog.get_logger(__name__)

# ------------------------ CATEGORY KEYS ------------------------

UNDERWEIGHT = "underweight"
NORMAL = "normal"
OVERWEIGHT = "overweight"
OBESE = "obese"

# Threshold order matters: first upper bound the raw BMI falls under wins.
THRESHOLDS = (
    (18.5, UNDERWEIGHT),
    (25.0, NORMAL),
    (30.0, OVERWEIGHT),
)

CATEGORY_KEYS = (UNDERWEIGHT, NORMAL, OVERWEIGHT, OBESE)


class InvalidMeasurement(ValueError):
    """Raised when a height/weight pair cannot produce a meaningful BMI."""

    def __init__(self, height_cm, weight_kg, reason):
        self.height_cm = height_cm
        self.weight_kg = weight_kg
        self.reason = reason
        super().__init__(f"Invalid measurement ({height_cm} cm, {weight_kg} kg): {reason}")


@dataclass(frozen=True)
class CategoryInfo:
    range: str
    description: str
    tips: Tuple[str, ...]


@dataclass(frozen=True)
class BMIResult:
    value: float
    category: str


@dataclass(frozen=True)
class Measurement:
    height_cm: float
    weight_kg: float

    def evaluate(self) -> BMIResult:
        return compute_bmi(self.height_cm, self.weight_kg)


# ------------------------ CATEGORY TABLE ------------------------

CATEGORIES: Mapping[str, CategoryInfo] = MappingProxyType({
    UNDERWEIGHT: CategoryInfo(
        range="< 18.5",
        description="You are underweight. Focus on healthy weight gain.",
        tips=(
            "Eat nutrient-dense foods",
            "Include protein in every meal",
            "Consider strength training",
            "Consult a nutritionist for guidance",
        ),
    ),
    NORMAL: CategoryInfo(
        range="18.5 - 24.9",
        description="You have a healthy weight. Keep up the good work!",
        tips=(
            "Maintain a balanced diet",
            "Regular exercise",
            "Stay hydrated",
            "Get adequate sleep",
        ),
    ),
    OVERWEIGHT: CategoryInfo(
        range="25 - 29.9",
        description="You are overweight. Consider lifestyle changes.",
        tips=(
            "Monitor portion sizes",
            "Increase physical activity",
            "Choose whole foods",
            "Track your progress",
        ),
    ),
    OBESE: CategoryInfo(
        range="≥ 30",
        description="You are in the obese range. Consult healthcare providers.",
        tips=(
            "Seek medical advice",
            "Start with gentle exercise",
            "Make dietary changes",
            "Consider professional support",
        ),
    ),
})

# ------------------------ CALCULATION ------------------------


def raw_bmi(height_cm: float, weight_kg: float) -> float:
    """
    Unrounded BMI for a height in centimeters and a weight in kilograms.

    Raises:
        InvalidMeasurement: height is not positive, weight is negative,
            or either value is not a finite number.
    """
    if not (math.isfinite(height_cm) and math.isfinite(weight_kg)):
        raise InvalidMeasurement(height_cm, weight_kg, "values must be finite")
    if height_cm <= 0:
        raise InvalidMeasurement(height_cm, weight_kg, "height must be positive")
    if weight_kg < 0:
        raise InvalidMeasurement(height_cm, weight_kg, "weight must not be negative")

    height_m = height_cm / 100
    return weight_kg / height_m ** 2


def classify(bmi: float) -> str:
    for upper, key in THRESHOLDS:
        if bmi < upper:
            return key
    return OBESE


def compute_bmi(height_cm: float, weight_kg: float) -> BMIResult:
    """
    Calculate BMI and its category.

    The category is taken from the unrounded value so that, for example,
    24.96 is still "normal" even though it displays as 25.0.

    Examples:
        >>> compute_bmi(170, 70)
        BMIResult(value=24.2, category='normal')
        >>> compute_bmi(180, 95)
        BMIResult(value=29.3, category='overweight')
    """
    try:
        bmi = raw_bmi(height_cm, weight_kg)
    except InvalidMeasurement as e:
        logger.warning("bmi.invalid_measurement", height_cm=height_cm, weight_kg=weight_kg, reason=e.reason)
        raise

    result = BMIResult(value=round(bmi, 1), category=classify(bmi))
    logger.debug("bmi.computed", height_cm=height_cm, weight_kg=weight_kg, bmi=result.value, category=result.category)
    return result


# ------------------------ LOOKUP ------------------------


def lookup_category(key: str) -> CategoryInfo:
    """Guidance for a category key; unknown keys fall back to "normal"."""
    info = CATEGORIES.get(key)
    if info is None:
        logger.warning("bmi.unknown_category", key=key, fallback=NORMAL)
        return CATEGORIES[NORMAL]
    return info


def category_label(key: str) -> str:
    return key[:1].upper() + key[1:]

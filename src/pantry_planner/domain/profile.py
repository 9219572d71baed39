"""Domain models for the user profile."""

from dataclasses import dataclass
from typing import Literal

Gender = Literal["male", "female"]
ActivityLevel = Literal["sedentary", "light", "moderate", "active"]
SportType = Literal["gym", "crossfit", "martial_arts", "cardio", "none"]
Goal = Literal["cut", "maintain", "bulk"]


@dataclass(frozen=True)
class Biometrics:
    """Body measurements used for energy expenditure."""

    age: int
    weight: float
    height: float
    gender: Gender


@dataclass(frozen=True)
class Lifestyle:
    """Activity and goal settings."""

    activity_level: ActivityLevel
    sport_type: SportType
    workout_frequency: int
    goal: Goal

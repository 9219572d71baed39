"""Pydantic models for API payloads."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pantry_planner.domain.nutrition import MacroTargets, NutritionPer100g
from pantry_planner.domain.pantry import PantryItem
from pantry_planner.domain.profile import Biometrics, Lifestyle


class NutritionPayload(BaseModel):
    """Label values per 100 g or 100 ml."""

    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    sugar: float = Field(default=0, ge=0)
    salt: float = Field(default=0, ge=0)

    def to_domain(self) -> NutritionPer100g:
        return NutritionPer100g(**self.model_dump())


class PantryItemPayload(BaseModel):
    """Pantry item as stored by the client."""

    id: str = Field(min_length=1)
    name: str
    categories: list[str] = Field(default_factory=list)
    unit: Literal["g", "ml", "pz"]
    quantity: float = Field(ge=0)
    nutrition_per_100g: NutritionPayload = Field(alias="nutritionPer100g")
    piece_weight: float | None = Field(default=None, gt=0, alias="pieceWeight")
    nutri_score: Literal["A", "B", "C", "D", "E"] | None = Field(
        default=None, alias="nutriScore"
    )

    model_config = ConfigDict(populate_by_name=True)

    def to_domain(self) -> PantryItem:
        return PantryItem(
            id=self.id,
            name=self.name,
            categories=tuple(self.categories),
            unit=self.unit,
            quantity=self.quantity,
            nutrition=self.nutrition_per_100g.to_domain(),
            piece_weight=self.piece_weight,
            nutri_score=self.nutri_score,
        )


class MacroTargetsPayload(BaseModel):
    """Daily calorie and macro targets."""

    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)

    def to_domain(self) -> MacroTargets:
        return MacroTargets(**self.model_dump())


class _PantryRequest(BaseModel):
    pantry: list[PantryItemPayload]
    targets: MacroTargetsPayload

    @model_validator(mode="after")
    def _unique_ids(self) -> "_PantryRequest":
        ids = [item.id for item in self.pantry]
        if len(ids) != len(set(ids)):
            raise ValueError("pantry item ids must be unique")
        return self

    def pantry_items(self) -> list[PantryItem]:
        return [item.to_domain() for item in self.pantry]


class WeeklyPlanRequest(_PantryRequest):
    """Request body for a weekly plan."""

    workout_frequency: int = Field(default=0, ge=0, le=14, alias="workoutFrequency")

    model_config = ConfigDict(populate_by_name=True)


class DayPlanRequest(_PantryRequest):
    """Request body for a single-day plan."""

    is_workout_day: bool = Field(default=False, alias="isWorkoutDay")

    model_config = ConfigDict(populate_by_name=True)


class ProfilePayload(BaseModel):
    """Biometrics and lifestyle used to compute targets."""

    age: int = Field(gt=0, le=120)
    weight: float = Field(gt=0)
    height: float = Field(gt=0)
    gender: Literal["male", "female"]
    activity_level: Literal["sedentary", "light", "moderate", "active"] = Field(
        alias="activityLevel"
    )
    sport_type: Literal["gym", "crossfit", "martial_arts", "cardio", "none"] = Field(
        alias="sportType"
    )
    workout_frequency: int = Field(ge=0, le=14, alias="workoutFrequency")
    goal: Literal["cut", "maintain", "bulk"]

    model_config = ConfigDict(populate_by_name=True)

    def biometrics(self) -> Biometrics:
        return Biometrics(
            age=self.age, weight=self.weight, height=self.height, gender=self.gender
        )

    def lifestyle(self) -> Lifestyle:
        return Lifestyle(
            activity_level=self.activity_level,
            sport_type=self.sport_type,
            workout_frequency=self.workout_frequency,
            goal=self.goal,
        )


class PrefillRequest(BaseModel):
    """Request body for pantry item pre-fill."""

    name: str
    unit: Literal["g", "ml", "pz"]
    nutrition_per_100g: NutritionPayload | None = Field(
        default=None, alias="nutritionPer100g"
    )

    model_config = ConfigDict(populate_by_name=True)

"""
Measurement input schemas.

Pydantic models a caller can use to coerce and range-check raw form input
before handing a MeasurementRecord to the scorer.
"""
from typing import Any, Dict, Literal, Mapping, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator

from riskcheck.core.bmi import compute_bmi
from riskcheck.utils import UnknownConditionError

Level = Literal["low", "moderate", "high"]


class MeasurementInput(BaseModel):
    """Base for per-condition inputs."""
    model_config = ConfigDict(extra="forbid")

    @field_validator("*", mode="before")
    @classmethod
    def _normalise_text(cls, value: Any) -> Any:
        # Form answers arrive as "Yes", " high " etc.
        return value.strip().lower() if isinstance(value, str) else value

    def to_measurements(self) -> Dict[str, Any]:
        return self.model_dump()


class DiabetesInput(MeasurementInput):
    age: int = Field(..., ge=1, le=120, description="Age in years")
    bmi: float = Field(..., ge=10, le=70, description="Body-mass index (kg/m²)")
    glucose: int = Field(..., ge=50, le=400, description="Fasting glucose (mg/dL)")
    bp_systolic: int = Field(..., ge=70, le=250, description="Systolic blood pressure (mmHg)")
    family_history: Literal["yes", "no"] = Field(..., description="Family history of diabetes")


class HeartDiseaseInput(MeasurementInput):
    age: int = Field(..., ge=1, le=120)
    cholesterol: int = Field(..., ge=100, le=600, description="Total cholesterol (mg/dL)")
    bp_systolic: int = Field(..., ge=70, le=250)
    max_heart_rate: int = Field(..., ge=60, le=220, description="Maximum heart rate achieved (bpm)")
    chest_pain: Literal["typical", "atypical", "non-anginal", "asymptomatic"]


class HypertensionInput(MeasurementInput):
    age: int = Field(..., ge=1, le=120)
    weight: float = Field(..., ge=20, le=300, description="Weight (kg)")
    height: int = Field(..., ge=100, le=250, description="Height (cm)")
    salt_intake: Level
    stress: Level
    exercise: Level

    def to_measurements(self) -> Dict[str, Any]:
        data = self.model_dump()
        data["bmi"] = compute_bmi(self.weight, self.height)
        return data


INPUT_SCHEMAS: Dict[str, Type[MeasurementInput]] = {
    "diabetes": DiabetesInput,
    "heart": HeartDiseaseInput,
    "hypertension": HypertensionInput,
}


def parse_measurements(condition_id: str, raw: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Validate raw input for ``condition_id`` and return a MeasurementRecord.

    Raises:
        UnknownConditionError: no schema for the condition.
        pydantic.ValidationError: input fails type or range checks.
    """
    schema = INPUT_SCHEMAS.get(condition_id.lower())
    if schema is None:
        raise UnknownConditionError(condition_id, details={"available": list(INPUT_SCHEMAS)})
    return schema.model_validate(dict(raw)).to_measurements()

"""
Body-mass index helpers.

Used both as a catalog derivation (hypertension accepts weight and height)
and as a standalone calculator for callers.
"""

from riskcheck.utils import InvalidValueError
from riskcheck.utils.numeric import as_number

# Category upper bounds (exclusive), kg/m²
BMI_UNDERWEIGHT = 18.5
BMI_NORMAL      = 25.0
BMI_OVERWEIGHT  = 30.0


def compute_bmi(weight_kg: float, height_cm: float) -> float:
    """Compute BMI = weight (kg) / height (m)²."""
    weight = as_number(weight_kg, "weight")
    height = as_number(height_cm, "height")
    for name, value in (("weight", weight), ("height", height)):
        if value <= 0:
            raise InvalidValueError(f"{name} must be a positive number", factor=name, value=value)
    height_m = height / 100
    return weight / (height_m * height_m)


def bmi_category(bmi: float) -> str:
    if bmi < BMI_UNDERWEIGHT:
        return "Underweight"
    if bmi < BMI_NORMAL:
        return "Normal"
    if bmi < BMI_OVERWEIGHT:
        return "Overweight"
    return "Obese"

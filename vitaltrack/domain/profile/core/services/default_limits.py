"""Default personalized limits derived from age and body mass index."""

from ..value_objects.limits import GlucoseLimits, LimitRange, PressureLimits

AGE_ADJUSTMENT_THRESHOLD = 50
BMI_ADJUSTMENT_THRESHOLD = 25.0


def body_mass_index(weight: float, height: float) -> float:
    """BMI from weight (kg) and height (cm)."""
    return weight / (height / 100.0) ** 2


def calculate_default_glucose_limits(age: int, weight: float, height: float) -> GlucoseLimits:
    """Starting glucose ranges for a new profile.

    Fasting 70-100 mg/dL, widened for users over 50 (+10 on max) and for
    BMI above 25 (+5 on min, +15 on max). Post-prandial sits 30 above the
    fasting min and 40 above the fasting max.

    Args:
        age: Age in years
        weight: Weight in kg
        height: Height in cm

    Returns:
        GlucoseLimits: Fasting/post-prandial ranges, no custom ranges

    Example:
        >>> limits = calculate_default_glucose_limits(30, 70.0, 175.0)
        >>> (limits.fasting.min, limits.fasting.max)
        (70, 100)
    """
    bmi = body_mass_index(weight, height)

    fasting_min = 70
    fasting_max = 100

    if age > AGE_ADJUSTMENT_THRESHOLD:
        fasting_max += 10
    if bmi > BMI_ADJUSTMENT_THRESHOLD:
        fasting_min += 5
        fasting_max += 15

    return GlucoseLimits(
        fasting=LimitRange(min=fasting_min, max=fasting_max),
        post_prandial=LimitRange(min=fasting_min + 30, max=fasting_max + 40),
        custom=(),
    )


def calculate_default_pressure_limits(age: int, weight: float, height: float) -> PressureLimits:
    """Starting blood pressure ranges for a new profile.

    Systolic 110-120 and diastolic 70-80 mmHg; over 50 raises both maxima
    (+15 / +10); BMI above 25 shifts systolic (+5 / +10) and diastolic
    (+5 / +5).
    """
    bmi = body_mass_index(weight, height)

    systolic_min, systolic_max = 110, 120
    diastolic_min, diastolic_max = 70, 80

    if age > AGE_ADJUSTMENT_THRESHOLD:
        systolic_max += 15
        diastolic_max += 10

    if bmi > BMI_ADJUSTMENT_THRESHOLD:
        systolic_min += 5
        systolic_max += 10
        diastolic_min += 5
        diastolic_max += 5

    return PressureLimits(
        systolic=LimitRange(min=systolic_min, max=systolic_max),
        diastolic=LimitRange(min=diastolic_min, max=diastolic_max),
    )

"""Pure classification rules.

Status compares a reading against personalized limits. Category is a
fixed clinical staging of a pressure pair and ignores the limits.
"""

from vitaltrack.domain.profile.core.value_objects.limits import LimitRange, PressureLimits
from vitaltrack.domain.shared.types import MeasurementStatus

from ..value_objects.pressure_category import PressureCategory

WARNING_LOWER_FACTOR = 0.9
WARNING_UPPER_FACTOR = 1.2


def _in_warning_band(value: float, limits: LimitRange) -> bool:
    return limits.min * WARNING_LOWER_FACTOR <= value <= limits.max * WARNING_UPPER_FACTOR


def determine_glucose_status(value: float, limits: LimitRange) -> MeasurementStatus:
    """Classify a glucose value against the range of its context.

    Args:
        value: Glucose reading (mg/dL)
        limits: Range for the reading's context

    Returns:
        MeasurementStatus: normal inside [min, max], warning up to 10%
        below min or 20% above max, critical otherwise

    Example:
        >>> determine_glucose_status(95, LimitRange(70, 100))
        <MeasurementStatus.NORMAL: 'normal'>
        >>> determine_glucose_status(110, LimitRange(70, 100))
        <MeasurementStatus.WARNING: 'warning'>
    """
    if limits.min <= value <= limits.max:
        return MeasurementStatus.NORMAL
    if _in_warning_band(value, limits):
        return MeasurementStatus.WARNING
    return MeasurementStatus.CRITICAL


def determine_pressure_status(
    systolic: float, diastolic: float, limits: PressureLimits
) -> MeasurementStatus:
    """Classify a pressure pair; both components must qualify for a level."""
    if limits.systolic.contains(systolic) and limits.diastolic.contains(diastolic):
        return MeasurementStatus.NORMAL
    if _in_warning_band(systolic, limits.systolic) and _in_warning_band(
        diastolic, limits.diastolic
    ):
        return MeasurementStatus.WARNING
    return MeasurementStatus.CRITICAL


def categorize_pressure(systolic: float, diastolic: float) -> PressureCategory:
    """Stage a pressure pair. Branches are evaluated in order.

    A systolic in 120-129 with diastolic >= 80 stays prehypertension even
    though the diastolic alone would place it in stage 1.

    Example:
        >>> categorize_pressure(125, 85)
        <PressureCategory.PREHYPERTENSION: 'prehypertension'>
        >>> categorize_pressure(135, 85)
        <PressureCategory.STAGE1_HYPERTENSION: 'stage1_hypertension'>
    """
    if systolic < 120 and diastolic < 80:
        return PressureCategory.NORMAL
    if 120 <= systolic <= 129 and diastolic < 80:
        return PressureCategory.PREHYPERTENSION
    if 130 <= systolic <= 139 or 80 <= diastolic <= 89:
        # TODO: confirm with product whether 120-129/80-89 should be stage 1.
        if 120 <= systolic <= 129 and diastolic >= 80:
            return PressureCategory.PREHYPERTENSION
        return PressureCategory.STAGE1_HYPERTENSION
    if 140 <= systolic <= 149 or 90 <= diastolic <= 99:
        return PressureCategory.STAGE1_HYPERTENSION
    return PressureCategory.STAGE2_HYPERTENSION

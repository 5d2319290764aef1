"""PressureCategory value object - fixed clinical staging."""

from enum import Enum


class PressureCategory(str, Enum):
    """Blood pressure stage, independent of personalized limits."""

    NORMAL = "normal"
    PREHYPERTENSION = "prehypertension"
    STAGE1_HYPERTENSION = "stage1_hypertension"
    STAGE2_HYPERTENSION = "stage2_hypertension"

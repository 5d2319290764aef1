"""Commands for measurements."""

from .delete_measurement import DeleteMeasurementCommand, DeleteMeasurementHandler
from .record_glucose import RecordGlucoseCommand, RecordGlucoseHandler
from .record_pressure import RecordPressureCommand, RecordPressureHandler
from .update_glucose import UpdateGlucoseCommand, UpdateGlucoseHandler
from .update_pressure import UpdatePressureCommand, UpdatePressureHandler

__all__ = [
    # Record
    "RecordGlucoseCommand",
    "RecordGlucoseHandler",
    "RecordPressureCommand",
    "RecordPressureHandler",
    # Update/Delete
    "UpdateGlucoseCommand",
    "UpdateGlucoseHandler",
    "UpdatePressureCommand",
    "UpdatePressureHandler",
    "DeleteMeasurementCommand",
    "DeleteMeasurementHandler",
]

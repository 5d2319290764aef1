"""Medical summary generation."""

from ..entities.medical_view import MedicalView
from ..models.summaries import MedicalSummary, Recommendation

LOW_CALORIE_THRESHOLD = 1200
IMMEDIATE_ACTION = "Immediate medical attention required"


def _format_value(value: float) -> str:
    # 150.0 -> "150", 150.5 -> "150.5"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def generate_medical_summary(view: MedicalView) -> MedicalSummary:
    """
    Build the clinical summary of a view with prioritized recommendations.

    Recommendations, in order:
    - high: one per critical alert
    - medium: glucose warnings, then pressure warnings (if any)
    - low: total calories below 1200, then no vegetable entries

    Args:
        view: Medical view to summarize

    Returns:
        MedicalSummary with the core health score and status
    """
    glucose = view.glucose_summary()
    pressure = view.pressure_summary()
    nutrition = view.nutritional_summary()
    alerts = view.critical_alerts()

    recommendations: list[Recommendation] = []
    for alert in alerts:
        if alert.type == "glucose":
            description = f"Critical glucose level: {_format_value(alert.value)}"
        else:
            description = f"Critical blood pressure: {_format_value(alert.value)}"
        recommendations.append(
            Recommendation(priority="high", description=description, action=IMMEDIATE_ACTION)
        )

    if glucose.warning_count > 0:
        recommendations.append(
            Recommendation(
                priority="medium",
                description=f"{glucose.warning_count} glucose measurements in warning range",
                action="Monitor diet and consider adjusting medication",
            )
        )
    if pressure.warning_count > 0:
        recommendations.append(
            Recommendation(
                priority="medium",
                description=f"{pressure.warning_count} blood pressure measurements in warning range",
                action="Reduce salt intake and increase physical activity",
            )
        )

    if nutrition.total_calories < LOW_CALORIE_THRESHOLD:
        recommendations.append(
            Recommendation(
                priority="low",
                description="Low daily calorie intake",
                action="Consider increasing food portions or adding healthy snacks",
            )
        )
    if not nutrition.by_type.get("vegetables"):
        recommendations.append(
            Recommendation(
                priority="low",
                description="No vegetables recorded today",
                action="Include vegetables in your next meal",
            )
        )

    return MedicalSummary(
        date=view.date,
        patient_name=view.user_profile.name,
        glucose_summary=glucose,
        pressure_summary=pressure,
        nutritional_summary=nutrition,
        health_score=view.health_score(),
        overall_status=view.overall_status(),
        alerts=alerts,
        recommendations=recommendations,
    )

from __future__ import annotations

from src.domain.models.repro_kpis import Classification, ReproKpis, TrafficLight
from src.domain.value_objects.repro_thresholds import ReproThresholds

REPEAT_EMPTY_REASON = "2 vazias seguidas"
LAST_EMPTY_REASON = "Último diagnóstico: vazia"


def classify(kpis: ReproKpis, thresholds: ReproThresholds | None = None) -> Classification:
    """Map KPIs to a traffic light, collecting every triggered reason in order.

    Null KPIs never trigger a rule, so a female without history is GREEN.
    """
    thresholds = thresholds or ReproThresholds()
    reasons: list[str] = []
    light = TrafficLight.GREEN

    def flag(level: TrafficLight, reason: str) -> None:
        nonlocal light
        if level.severity < light.severity:
            light = level
        reasons.append(reason)

    if kpis.empty_alerts.is_repeat_empty:
        flag(TrafficLight.RED, REPEAT_EMPTY_REASON)
    elif kpis.empty_alerts.is_empty:
        flag(TrafficLight.YELLOW, LAST_EMPTY_REASON)

    if kpis.open_days is not None:
        if kpis.open_days > thresholds.open_days_critical:
            flag(TrafficLight.RED, f"Dias em aberto acima de {thresholds.open_days_critical}")
        elif kpis.open_days > thresholds.open_days_warning:
            flag(TrafficLight.YELLOW, f"Dias em aberto acima de {thresholds.open_days_warning}")
        if kpis.open_days > thresholds.open_days_severe:
            flag(TrafficLight.RED, f"Dias em aberto crítico (>{thresholds.open_days_severe})")

    if kpis.iep_days is not None:
        if kpis.iep_days > thresholds.iep_critical:
            flag(TrafficLight.RED, f"IEP acima de {thresholds.iep_critical} dias")
        elif kpis.iep_days > thresholds.iep_warning:
            flag(TrafficLight.YELLOW, f"IEP acima de {thresholds.iep_warning} dias")
        if kpis.iep_days > thresholds.iep_severe:
            flag(TrafficLight.RED, f"IEP crítico (>{thresholds.iep_severe // 30} meses)")

    return Classification(traffic_light=light, reasons=tuple(reasons))

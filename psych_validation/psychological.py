"""
Psychological State Checker

Validates a (discipline level, tilt control) pair for range validity and
mathematical consistency. The two metrics are assumed positively correlated
in a coherent trader: one very high with the other very low is an impossible
state and is reported as an error, not a warning.

Checks:
1. Each metric within [range_min, range_max]
2. Inter-metric deviation <= max_deviation_between_metrics (warning)
3. Psychological stability index >= min_psychological_stability_index (warning)
4. No impossible high/low contradiction (error)
5. Optional auto-correction (clamping) reported alongside the original errors
"""

from typing import Any, Optional, Sequence

from .config import ValidationConfig, DEFAULT_VALIDATION_CONFIG
from .emotional import EmotionalDataPoint, coerce_data_point
from .numeric import is_valid_number, is_within_range, clamp
from .results import PsychologicalMetricsResult, CorrectedMetrics, IssueType

HIGH_DISCIPLINE_LOW_TILT = (
    'Impossible psychological state detected: Very high discipline with very low tilt control'
)
LOW_DISCIPLINE_HIGH_TILT = (
    'Impossible psychological state detected: Very low discipline with very high tilt control'
)


def _range_label(config: ValidationConfig) -> str:
    return f"{config.range_min:g}-{config.range_max:g}"


def validate_psychological_metrics(
    discipline_level: Any,
    tilt_control: Any,
    emotional_data: Optional[Sequence[Any]] = None,
    config: Optional[ValidationConfig] = None
) -> PsychologicalMetricsResult:
    """
    Validate psychological metrics for range validity and consistency.

    Deviation and stability are computed against the raw inputs; an
    out-of-range metric does not abort them. The impossible-state check
    only applies to pairs that are within range.

    Args:
        discipline_level: Discipline Level percentage (0-100)
        tilt_control: Tilt Control percentage (0-100)
        emotional_data: Optional emotion scores, range-checked only
        config: Validation thresholds (default: DEFAULT_VALIDATION_CONFIG)

    Returns:
        PsychologicalMetricsResult
    """
    config = config or DEFAULT_VALIDATION_CONFIG
    result = PsychologicalMetricsResult(
        discipline_level=discipline_level,
        tilt_control=tilt_control
    )

    # Range validation
    for label, name, value in (
        ('Discipline Level', 'discipline_level', discipline_level),
        ('Tilt Control', 'tilt_control', tilt_control),
    ):
        if not is_within_range(value, config.range_min, config.range_max):
            result.add_error(
                f"{label} must be between {_range_label(config)}%",
                IssueType.RANGE,
                field=name,
                value=value,
                expected=_range_label(config)
            )

    range_errors = len(result.errors)

    if is_valid_number(discipline_level) and is_valid_number(tilt_control):
        result.deviation = abs(discipline_level - tilt_control)
        result.psychological_stability_index = (discipline_level + tilt_control) / 2

        _check_deviation(result, config)
        _check_stability_index(result, config)

        # Out-of-range pairs already carry one error per metric
        if not range_errors:
            _check_impossible_state(result, discipline_level, tilt_control, config)

    if emotional_data:
        _check_emotion_ranges(result, emotional_data)

    if config.enable_auto_correction:
        result.corrected_data = CorrectedMetrics(
            discipline_level=clamp(discipline_level, config.range_min, config.range_max),
            tilt_control=clamp(tilt_control, config.range_min, config.range_max)
        )

    return result


def _check_deviation(result: PsychologicalMetricsResult, config: ValidationConfig):
    max_deviation = config.max_deviation_between_metrics
    if result.deviation <= max_deviation:
        return

    message = (
        f"Large deviation ({result.deviation:.1f}%) detected between Discipline Level "
        f"and Tilt Control. Maximum allowed: {max_deviation:g}%"
    )
    details = {
        'discipline_level': result.discipline_level,
        'tilt_control': result.tilt_control,
        'deviation': result.deviation,
    }
    if config.strict_mode:
        result.add_error(message, IssueType.CONSISTENCY, 'metrics', details, f"<= {max_deviation:g}%")
    else:
        result.add_warning(message, IssueType.CONSISTENCY, 'metrics', details, f"<= {max_deviation:g}%")


def _check_stability_index(result: PsychologicalMetricsResult, config: ValidationConfig):
    floor = config.min_psychological_stability_index
    index = result.psychological_stability_index
    if index < floor:
        result.add_warning(
            f"Psychological Stability Index ({index:.1f}%) is below minimum threshold ({floor:g}%)",
            IssueType.CONSISTENCY,
            field='psychological_stability_index',
            value=index,
            expected=f">= {floor:g}%"
        )


def _check_impossible_state(
    result: PsychologicalMetricsResult,
    discipline_level: float,
    tilt_control: float,
    config: ValidationConfig
):
    high = config.impossible_state_high
    low = config.impossible_state_low
    details = {'discipline_level': discipline_level, 'tilt_control': tilt_control}

    # "Very high" includes its edge, "very low" excludes it (90/20 is coherent)
    if discipline_level >= high and tilt_control < low:
        result.add_error(
            HIGH_DISCIPLINE_LOW_TILT, IssueType.CONSISTENCY, 'metrics', details,
            'consistent psychological state'
        )
    elif discipline_level < low and tilt_control >= high:
        result.add_error(
            LOW_DISCIPLINE_HIGH_TILT, IssueType.CONSISTENCY, 'metrics', details,
            'consistent psychological state'
        )


def _check_emotion_ranges(result: PsychologicalMetricsResult, emotional_data: Sequence[Any]):
    for index, entry in enumerate(emotional_data):
        point = coerce_data_point(entry)
        if point is None or not is_valid_number(point.value):
            continue
        full_mark = point.full_mark if is_valid_number(point.full_mark) else EmotionalDataPoint.DEFAULT_FULL_MARK
        if not 0 <= point.value <= full_mark:
            result.add_error(
                f"Emotion {point.normalized_subject or index} value ({point.value:g}) "
                f"must be between 0-{full_mark:g}",
                IssueType.RANGE,
                field=f"emotional_data[{index}].value",
                value=point.value,
                expected=f"0-{full_mark:g}"
            )

"""
Comprehensive Validation

Runs the four validators over one logical request and merges them into a
single verdict. Sub-validators are independent; the merge never suppresses
or re-interprets their severities, it only concatenates in the order
psychological -> emotional -> api -> performance.
"""

import logging
from typing import Any, Optional, Sequence

from .api_response import check_response_time, validate_api_response
from .config import ValidationConfig, DEFAULT_VALIDATION_CONFIG
from .context import ValidationContext, finalize_validation_context
from .emotional import validate_emotional_data
from .performance import validate_performance
from .psychological import validate_psychological_metrics
from .results import ApiResponseResult, ComprehensiveResult, ValidationResult

logger = logging.getLogger(__name__)


def perform_comprehensive_validation(
    discipline_level: Any,
    tilt_control: Any,
    emotional_data: Optional[Sequence[Any]],
    response_time: Any,
    calculation_time: Any,
    memory_usage: Optional[Any] = None,
    response_data: Optional[Any] = None,
    config: Optional[ValidationConfig] = None
) -> ComprehensiveResult:
    """
    Perform comprehensive validation of all components.

    Args:
        discipline_level: Discipline Level percentage
        tilt_control: Tilt Control percentage
        emotional_data: Emotion score records
        response_time: API round-trip time in ms
        calculation_time: Calculation duration in ms
        memory_usage: Optional memory footprint in bytes
        response_data: Optional API payload; without it only the response
            time is checked
        config: Shared validation thresholds

    Returns:
        ComprehensiveResult
    """
    config = config or DEFAULT_VALIDATION_CONFIG

    psychological = validate_psychological_metrics(discipline_level, tilt_control, config=config)
    emotional = validate_emotional_data(emotional_data, config)

    if response_data is None:
        api_response = ApiResponseResult()
        check_response_time(api_response, response_time, config)
    else:
        api_response = validate_api_response(response_data, response_time, config)

    performance = validate_performance(calculation_time, memory_usage, config)

    overall = ValidationResult()
    for sub_result in (psychological, emotional, api_response, performance):
        overall.merge(sub_result)

    logger.debug(
        f"[VALIDATION] Comprehensive validation: valid={overall.is_valid} "
        f"errors={len(overall.errors)} warnings={len(overall.warnings)}"
    )

    return ComprehensiveResult(
        overall=overall,
        psychological_metrics=psychological,
        emotional_data=emotional,
        api_response=api_response,
        performance=performance
    )


def validate_with_context(
    context: ValidationContext,
    discipline_level: Any,
    tilt_control: Any,
    emotional_data: Optional[Sequence[Any]],
    response_time: Any,
    memory_usage: Optional[Any] = None,
    response_data: Optional[Any] = None
) -> ComprehensiveResult:
    """
    Finalize the context and validate with its config and measured time.

    Call after the metric calculation the context was timing has finished.

    Raises:
        ContextAlreadyFinalizedError: If the context was already finalized
    """
    finalize_validation_context(context)
    return perform_comprehensive_validation(
        discipline_level,
        tilt_control,
        emotional_data,
        response_time,
        context.performance_metrics.calculation_time,
        memory_usage=memory_usage,
        response_data=response_data,
        config=context.config
    )

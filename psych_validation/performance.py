"""
Performance Validation

Judges a measured calculation duration and optional memory footprint
against budget. Calculation time is fully within the engine's control, so a
budget breach is an error (boundary inclusive); elevated memory is a warning.
"""

from typing import Any, Optional

from .config import ValidationConfig, DEFAULT_VALIDATION_CONFIG, MIB
from .numeric import is_valid_number
from .results import PerformanceResult, IssueType


def validate_performance(
    calculation_time: Any,
    memory_usage: Optional[Any] = None,
    config: Optional[ValidationConfig] = None
) -> PerformanceResult:
    """
    Validate performance metrics.

    Args:
        calculation_time: Measured calculation duration in ms
        memory_usage: Optional memory footprint in bytes
        config: Validation thresholds (default: DEFAULT_VALIDATION_CONFIG)

    Returns:
        PerformanceResult
    """
    config = config or DEFAULT_VALIDATION_CONFIG
    limit = config.max_calculation_time
    result = PerformanceResult(calculation_time=calculation_time, memory_usage=memory_usage)

    if not is_valid_number(calculation_time) or calculation_time < 0:
        result.add_error(
            f"Calculation time must be a non-negative number, got {calculation_time}",
            IssueType.TYPE,
            field='calculation_time',
            value=calculation_time,
            expected='number >= 0'
        )
        result.is_within_performance_threshold = False
    elif calculation_time > limit:
        result.add_error(
            f"Calculation time ({calculation_time:g}ms) exceeds maximum allowed ({limit:g}ms)",
            IssueType.PERFORMANCE,
            field='calculation_time',
            value=calculation_time,
            expected=f"<= {limit:g}ms"
        )
        result.is_within_performance_threshold = False

    if memory_usage is not None:
        max_memory = config.max_memory_usage
        if not is_valid_number(memory_usage) or memory_usage < 0:
            result.add_warning(
                f"Memory usage is not a valid measurement: {memory_usage}",
                IssueType.PERFORMANCE,
                field='memory_usage',
                value=memory_usage,
                expected='non-negative number'
            )
        elif memory_usage > max_memory:
            result.add_warning(
                f"Memory usage ({memory_usage / MIB:.2f}MB) exceeds recommended limit "
                f"({max_memory / MIB:.2f}MB)",
                IssueType.PERFORMANCE,
                field='memory_usage',
                value=memory_usage,
                expected=f"<= {max_memory} bytes"
            )

    return result

"""
Validation Context

Per-request tracking object: identity, timestamps, config snapshot and the
timing window used to measure calculation duration for the performance
validator. Owned by one call chain; finalized exactly once.
"""

import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Dict, Any

from .config import ValidationConfig, DEFAULT_VALIDATION_CONFIG


class ContextAlreadyFinalizedError(Exception):
    """Raised when a validation context is finalized a second time."""
    pass


def _now_ms() -> float:
    return time.perf_counter() * 1000.0


@dataclass
class PerformanceMetrics:
    """Timing window in milliseconds on the monotonic clock."""
    start_time: float = field(default_factory=_now_ms)
    end_time: Optional[float] = None
    calculation_time: Optional[float] = None


@dataclass
class ValidationContext:
    """
    Tracking data for one logical validation request.

    Attributes:
        request_id: Caller-supplied request identifier
        user_id: Optional user the data belongs to
        timestamp: Wall-clock creation time (UTC)
        config: Config snapshot used for the request
        performance_metrics: Monotonic timing window
    """
    request_id: str
    user_id: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    config: ValidationConfig = DEFAULT_VALIDATION_CONFIG
    performance_metrics: PerformanceMetrics = field(default_factory=PerformanceMetrics)

    @property
    def is_finalized(self) -> bool:
        return self.performance_metrics.end_time is not None

    def to_dict(self) -> Dict[str, Any]:
        """Export to dictionary."""
        return {
            'request_id': self.request_id,
            'user_id': self.user_id,
            'timestamp': self.timestamp.isoformat(),
            'start_time': self.performance_metrics.start_time,
            'end_time': self.performance_metrics.end_time,
            'calculation_time': self.performance_metrics.calculation_time,
        }


def create_validation_context(
    request_id: Optional[str] = None,
    user_id: Optional[str] = None,
    config: Optional[ValidationConfig] = None
) -> ValidationContext:
    """
    Create a validation context and start its timing window.

    Args:
        request_id: Request identifier (default: random UUID4)
        user_id: Optional user identifier
        config: Config snapshot (default: DEFAULT_VALIDATION_CONFIG)

    Returns:
        ValidationContext
    """
    return ValidationContext(
        request_id=request_id or str(uuid.uuid4()),
        user_id=user_id,
        config=config or DEFAULT_VALIDATION_CONFIG
    )


def finalize_validation_context(context: ValidationContext) -> ValidationContext:
    """
    Close the timing window: record end time and calculation time.

    Args:
        context: Context created by create_validation_context

    Returns:
        The same context, finalized

    Raises:
        ContextAlreadyFinalizedError: If the context was already finalized
    """
    if context.is_finalized:
        raise ContextAlreadyFinalizedError(
            f"Validation context {context.request_id} is already finalized"
        )

    metrics = context.performance_metrics
    metrics.end_time = _now_ms()
    metrics.calculation_time = metrics.end_time - metrics.start_time
    return context

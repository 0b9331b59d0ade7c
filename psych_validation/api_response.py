"""
API Response Validation

Validates the aggregate statistics payload (counts, totals, rates and the
embedded emotional data) plus the measured network round-trip time.

Network latency is outside this engine's control: a slow response is a
warning, never an error.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .config import ValidationConfig, DEFAULT_VALIDATION_CONFIG
from .emotional import EmotionalDataPoint, validate_emotional_data
from .numeric import is_valid_number
from .results import ApiResponseResult, IssueType

_MISSING = object()

# (upstream key, python key)
_PAYLOAD_KEYS = (
    ('totalTrades', 'total_trades'),
    ('totalPnL', 'total_pnl'),
    ('winRate', 'win_rate'),
    ('avgTradeSize', 'avg_trade_size'),
    ('emotionalData', 'emotional_data'),
)

REQUIRED_FIELDS = ('totalTrades', 'totalPnL', 'winRate')


@dataclass
class ApiResponsePayload:
    """
    Aggregate statistics payload from the data-access layer.

    Fields hold raw upstream values; a field absent from the upstream JSON
    is left as the ``MISSING`` sentinel so the validator can tell
    "absent" from "null".
    """
    total_trades: Any = _MISSING
    total_pnl: Any = _MISSING
    win_rate: Any = _MISSING
    avg_trade_size: Any = _MISSING
    emotional_data: Any = _MISSING

    MISSING = _MISSING

    @classmethod
    def from_dict(cls, data: Mapping) -> "ApiResponsePayload":
        """Create from upstream JSON; camelCase and snake_case keys both accepted."""
        kwargs = {}
        for upstream_key, key in _PAYLOAD_KEYS:
            if upstream_key in data:
                kwargs[key] = data[upstream_key]
            elif key in data:
                kwargs[key] = data[key]
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Export present fields with upstream keys."""
        data = {}
        for upstream_key, key in _PAYLOAD_KEYS:
            value = getattr(self, key)
            if value is _MISSING:
                continue
            if key == 'emotional_data' and isinstance(value, (list, tuple)):
                value = [
                    v.to_dict() if isinstance(v, EmotionalDataPoint) else v
                    for v in value
                ]
            data[upstream_key] = value
        return data


def check_response_time(result: ApiResponseResult, response_time: Any, config: ValidationConfig):
    """Warn when the measured round trip exceeds max_api_response_time."""
    result.response_time = response_time
    limit = config.max_api_response_time

    if not is_valid_number(response_time) or response_time < 0:
        result.add_warning(
            f"API response time is not a valid measurement: {response_time}",
            IssueType.PERFORMANCE,
            field='response_time',
            value=response_time,
            expected='non-negative number'
        )
    elif response_time > limit:
        result.add_warning(
            f"API response time ({response_time:g}ms) exceeds maximum allowed ({limit:g}ms)",
            IssueType.PERFORMANCE,
            field='response_time',
            value=response_time,
            expected=f"<= {limit:g}ms"
        )


def validate_api_response(
    response_data: Any,
    response_time: Any,
    config: Optional[ValidationConfig] = None
) -> ApiResponseResult:
    """
    Validate an API response payload and its round-trip time.

    Args:
        response_data: ApiResponsePayload or upstream dict
        response_time: Measured round-trip time in ms
        config: Validation thresholds (default: DEFAULT_VALIDATION_CONFIG)

    Returns:
        ApiResponseResult
    """
    config = config or DEFAULT_VALIDATION_CONFIG
    result = ApiResponseResult()
    check_response_time(result, response_time, config)

    if isinstance(response_data, ApiResponsePayload):
        payload = response_data
    elif isinstance(response_data, Mapping):
        payload = ApiResponsePayload.from_dict(response_data)
    else:
        result.add_error(
            'API response data is not a valid object',
            IssueType.TYPE,
            field='response_data',
            value=type(response_data).__name__,
            expected='object'
        )
        return result

    result.data_size = len(
        json.dumps(payload.to_dict(), separators=(',', ':'), default=str).encode('utf-8')
    )

    # Required fields
    values = payload.to_dict()
    for upstream_key in REQUIRED_FIELDS:
        if upstream_key not in values:
            result.add_error(
                f"Missing required field in API response: {upstream_key}",
                IssueType.DATA_INTEGRITY,
                field=upstream_key,
                expected='required'
            )

    total_trades = payload.total_trades
    if total_trades is not _MISSING and (not is_valid_number(total_trades) or total_trades < 0):
        result.add_error(
            'totalTrades must be a non-negative number',
            IssueType.TYPE,
            field='totalTrades',
            value=total_trades,
            expected='number >= 0'
        )

    for upstream_key, value in (('totalPnL', payload.total_pnl), ('avgTradeSize', payload.avg_trade_size)):
        if value is not _MISSING and not is_valid_number(value):
            result.add_error(
                f"{upstream_key} must be a valid number",
                IssueType.TYPE,
                field=upstream_key,
                value=value,
                expected='number'
            )

    win_rate = payload.win_rate
    if win_rate is not _MISSING and (not is_valid_number(win_rate) or not 0 <= win_rate <= 100):
        result.add_error(
            'winRate must be between 0-100',
            IssueType.RANGE,
            field='winRate',
            value=win_rate,
            expected='0-100'
        )

    if payload.emotional_data is not _MISSING and payload.emotional_data is not None:
        result.merge(validate_emotional_data(payload.emotional_data, config))

    return result

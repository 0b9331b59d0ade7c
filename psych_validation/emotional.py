"""
Emotional Data Validation

Validates a collection of per-emotion score records (the emotion radar data):
structural integrity, value ranges, vocabulary membership and duplicates.

Unknown labels and duplicates are data-quality smells, not corruption: they
raise warnings and never make an otherwise-valid dataset invalid. Runs in a
single pass with set membership checks.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .config import ValidationConfig, DEFAULT_VALIDATION_CONFIG
from .numeric import is_valid_number
from .results import EmotionalDataResult, IssueType

VALID_SIDES = ('Buy', 'Sell')


@dataclass
class EmotionalDataPoint:
    """
    One emotion score as delivered by the data-access layer.

    Fields hold the raw upstream values; the validator checks them.

    Attributes:
        subject: Emotion label (e.g. "FOMO")
        value: Score, 0 <= value <= full_mark
        full_mark: Scale maximum (conventionally 100)
        leaning: Free-form leaning label (e.g. "Balanced")
        side: "Buy" or "Sell"
    """
    DEFAULT_FULL_MARK = 100

    subject: Any
    value: Any
    full_mark: Any = DEFAULT_FULL_MARK
    leaning: Any = ""
    side: Any = None

    @property
    def normalized_subject(self) -> str:
        if not isinstance(self.subject, str):
            return ""
        return self.subject.strip().upper()

    @classmethod
    def from_dict(cls, data: Mapping) -> "EmotionalDataPoint":
        """Create from an upstream JSON record (``fullMark`` or ``full_mark``)."""
        full_mark = data.get('fullMark', data.get('full_mark'))
        return cls(
            subject=data.get('subject'),
            value=data.get('value'),
            full_mark=cls.DEFAULT_FULL_MARK if full_mark is None else full_mark,
            leaning=data.get('leaning', ""),
            side=data.get('side')
        )

    def to_dict(self) -> Dict[str, Any]:
        """Export with upstream keys."""
        return {
            'subject': self.subject,
            'value': self.value,
            'fullMark': self.full_mark,
            'leaning': self.leaning,
            'side': self.side,
        }


def coerce_data_point(entry: Any) -> Optional[EmotionalDataPoint]:
    """Return entry as an EmotionalDataPoint, or None if it is not a record."""
    if isinstance(entry, EmotionalDataPoint):
        return entry
    if isinstance(entry, Mapping):
        return EmotionalDataPoint.from_dict(entry)
    return None


def validate_emotional_data(
    emotional_data: Any,
    config: Optional[ValidationConfig] = None
) -> EmotionalDataResult:
    """
    Validate emotional data structure and values.

    Args:
        emotional_data: List of EmotionalDataPoint or upstream dicts (or None)
        config: Validation thresholds (default: DEFAULT_VALIDATION_CONFIG)

    Returns:
        EmotionalDataResult
    """
    config = config or DEFAULT_VALIDATION_CONFIG
    result = EmotionalDataResult()

    if emotional_data is None:
        result.add_error(
            'Emotional data is null or missing',
            IssueType.NULL_VALUE,
            field='emotional_data'
        )
        return result

    if not isinstance(emotional_data, (list, tuple)):
        result.add_error(
            'Emotional data must be a list',
            IssueType.TYPE,
            field='emotional_data',
            value=type(emotional_data).__name__,
            expected='list'
        )
        return result

    result.total_emotions = len(emotional_data)

    if not emotional_data:
        result.add_warning(
            'Emotional data array is empty',
            IssueType.DATA_INTEGRITY,
            field='emotional_data'
        )
        return result

    seen = set()
    duplicates_seen = set()

    for index, entry in enumerate(emotional_data):
        point = coerce_data_point(entry)
        if point is None:
            result.add_error(
                f"Emotion at index {index} is not a valid record",
                IssueType.TYPE,
                field=f"emotional_data[{index}]",
                value=type(entry).__name__,
                expected='record'
            )
            continue

        name = point.normalized_subject
        if not name:
            result.add_error(
                f"Emotion at index {index} has invalid or missing subject field",
                IssueType.DATA_INTEGRITY,
                field=f"emotional_data[{index}].subject",
                value=point.subject,
                expected='non-empty string'
            )
            continue

        # Duplicates
        if name in seen:
            if name not in duplicates_seen:
                result.duplicate_emotions.append(name)
                duplicates_seen.add(name)
            result.add_warning(
                f"Duplicate emotion found: {name}",
                IssueType.DATA_INTEGRITY,
                field=f"emotional_data[{index}].subject",
                value=name
            )
        else:
            seen.add(name)

        # Vocabulary
        if name in config.known_emotions:
            result.valid_emotions.add(name)
        else:
            result.invalid_emotions.append(name)
            result.add_warning(
                f"Unknown emotion: {name}",
                IssueType.DATA_INTEGRITY,
                field=f"emotional_data[{index}].subject",
                value=name,
                expected=sorted(config.known_emotions)
            )

        _check_point_fields(result, point, name, index)

    return result


def _check_point_fields(result: EmotionalDataResult, point: EmotionalDataPoint, name: str, index: int):
    full_mark = point.full_mark
    full_mark_ok = is_valid_number(full_mark) and full_mark > 0
    if not full_mark_ok:
        result.add_error(
            f"Emotion {name} has invalid fullMark: {full_mark}",
            IssueType.RANGE,
            field=f"emotional_data[{index}].fullMark",
            value=full_mark,
            expected='positive number'
        )
        full_mark = EmotionalDataPoint.DEFAULT_FULL_MARK

    if not is_valid_number(point.value):
        result.add_error(
            f"Emotion {name} has invalid value: {point.value}",
            IssueType.TYPE,
            field=f"emotional_data[{index}].value",
            value=point.value,
            expected='number'
        )
    elif not 0 <= point.value <= full_mark:
        result.add_error(
            f"Emotion {name} value ({point.value:g}) must be between 0-{full_mark:g}",
            IssueType.RANGE,
            field=f"emotional_data[{index}].value",
            value=point.value,
            expected=f"0-{full_mark:g}"
        )

    if point.leaning is not None and not isinstance(point.leaning, str):
        result.add_warning(
            f"Emotion {name} has invalid leaning type",
            IssueType.TYPE,
            field=f"emotional_data[{index}].leaning",
            value=type(point.leaning).__name__,
            expected='string'
        )

    if point.side is not None and point.side not in VALID_SIDES:
        result.add_warning(
            f"Emotion {name} has unrecognized side: {point.side}",
            IssueType.DATA_INTEGRITY,
            field=f"emotional_data[{index}].side",
            value=point.side,
            expected=list(VALID_SIDES)
        )

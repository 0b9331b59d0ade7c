"""
Validation Result Data Model

Structured results produced by the validators. Every result carries two
independent channels: errors (datum unsafe to use, makes the result invalid)
and warnings (datum usable but suspicious, never affects validity).
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Set


class Severity(str, Enum):
    """Finding severity. Closed: there is no third level."""
    ERROR = "ERROR"
    WARNING = "WARNING"


class IssueType(str, Enum):
    """Finding category."""
    RANGE = "RANGE"
    NULL_VALUE = "NULL_VALUE"
    TYPE = "TYPE"
    CONSISTENCY = "CONSISTENCY"
    DATA_INTEGRITY = "DATA_INTEGRITY"
    PERFORMANCE = "PERFORMANCE"


@dataclass
class ValidationIssue:
    """A single validation finding."""
    type: IssueType
    severity: Severity
    message: str
    field: Optional[str] = None
    value: Any = None
    expected: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """Export to dictionary."""
        return {
            'type': self.type.value,
            'severity': self.severity.value,
            'message': self.message,
            'field': self.field,
            'value': self.value,
            'expected': self.expected,
        }


@dataclass
class ValidationResult:
    """Base result: error/warning message lists plus structured issues."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    issues: List[ValidationIssue] = field(default_factory=list, repr=False)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(
        self,
        message: str,
        issue_type: IssueType,
        field: Optional[str] = None,
        value: Any = None,
        expected: Any = None
    ):
        """Add error (makes the result invalid)."""
        self.errors.append(message)
        self.issues.append(
            ValidationIssue(issue_type, Severity.ERROR, message, field, value, expected)
        )

    def add_warning(
        self,
        message: str,
        issue_type: IssueType,
        field: Optional[str] = None,
        value: Any = None,
        expected: Any = None
    ):
        """Add non-critical warning."""
        self.warnings.append(message)
        self.issues.append(
            ValidationIssue(issue_type, Severity.WARNING, message, field, value, expected)
        )

    def merge(self, other: "ValidationResult"):
        """Fold another result's findings into this one, preserving order."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        self.issues.extend(other.issues)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'is_valid': self.is_valid,
            'errors': list(self.errors),
            'warnings': list(self.warnings),
        }


@dataclass(frozen=True)
class CorrectedMetrics:
    """Best-effort repaired metric pair produced by auto-correction."""
    discipline_level: float
    tilt_control: float

    @property
    def psychological_stability_index(self) -> float:
        return (self.discipline_level + self.tilt_control) / 2

    def to_dict(self) -> Dict[str, float]:
        return {
            'discipline_level': self.discipline_level,
            'tilt_control': self.tilt_control,
            'psychological_stability_index': self.psychological_stability_index,
        }


@dataclass
class PsychologicalMetricsResult(ValidationResult):
    """Result of the discipline level / tilt control check."""
    discipline_level: Any = None
    tilt_control: Any = None
    psychological_stability_index: float = float('nan')
    deviation: float = float('nan')
    corrected_data: Optional[CorrectedMetrics] = None

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'discipline_level': self.discipline_level,
            'tilt_control': self.tilt_control,
            'psychological_stability_index': self.psychological_stability_index,
            'deviation': self.deviation,
            'corrected_data': self.corrected_data.to_dict() if self.corrected_data else None,
        })
        return data


@dataclass
class EmotionalDataResult(ValidationResult):
    """Result of the per-emotion score collection check."""
    valid_emotions: Set[str] = field(default_factory=set)
    invalid_emotions: List[str] = field(default_factory=list)
    duplicate_emotions: List[str] = field(default_factory=list)
    total_emotions: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'valid_emotions': sorted(self.valid_emotions),
            'invalid_emotions': list(self.invalid_emotions),
            'duplicate_emotions': list(self.duplicate_emotions),
            'total_emotions': self.total_emotions,
        })
        return data


@dataclass
class ApiResponseResult(ValidationResult):
    """Result of the aggregate API payload check."""
    response_time: float = 0.0
    data_size: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'response_time': self.response_time,
            'data_size': self.data_size,
        })
        return data


@dataclass
class PerformanceResult(ValidationResult):
    """Result of the calculation time / memory budget check."""
    calculation_time: float = 0.0
    memory_usage: Optional[int] = None
    is_within_performance_threshold: bool = True

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'calculation_time': self.calculation_time,
            'memory_usage': self.memory_usage,
            'is_within_performance_threshold': self.is_within_performance_threshold,
        })
        return data


@dataclass
class ComprehensiveResult:
    """Merged verdict of all four validators."""
    overall: ValidationResult
    psychological_metrics: PsychologicalMetricsResult
    emotional_data: EmotionalDataResult
    api_response: ApiResponseResult
    performance: PerformanceResult

    @property
    def is_valid(self) -> bool:
        return self.overall.is_valid

    def sub_results(self) -> Dict[str, ValidationResult]:
        """Sub-results keyed by validator name, in merge order."""
        return {
            'psychological_metrics': self.psychological_metrics,
            'emotional_data': self.emotional_data,
            'api_response': self.api_response,
            'performance': self.performance,
        }

    def to_dict(self) -> Dict[str, Any]:
        data = {'overall': self.overall.to_dict()}
        for name, result in self.sub_results().items():
            data[name] = result.to_dict()
        return data

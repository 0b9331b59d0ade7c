"""
Psychological Metrics Validation Engine

Guards derived psychological trading metrics (discipline level, tilt control,
per-emotion scores) against internally-inconsistent or impossible
combinations before they are persisted, displayed or used for alerts.

Components:
- config: Immutable validation thresholds, YAML/JSON loaders
- psychological: Discipline level / tilt control checker
- emotional: Emotion score collection validator
- api_response: Aggregate statistics payload validator
- performance: Calculation time / memory budget validator
- comprehensive: Orchestrator merging all four into one verdict
- context: Per-request tracking and timing
- report: Audit reports, verdict logging, DataFrame export
"""

from .config import (
    ValidationConfig,
    DEFAULT_VALIDATION_CONFIG,
    KNOWN_EMOTIONS,
    ConfigValidationError,
    load_validation_config
)

from .results import (
    Severity,
    IssueType,
    ValidationIssue,
    ValidationResult,
    CorrectedMetrics,
    PsychologicalMetricsResult,
    EmotionalDataResult,
    ApiResponseResult,
    PerformanceResult,
    ComprehensiveResult
)

from .numeric import is_valid_number, is_within_range

from .psychological import validate_psychological_metrics

from .emotional import EmotionalDataPoint, validate_emotional_data

from .api_response import ApiResponsePayload, validate_api_response

from .performance import validate_performance

from .context import (
    ValidationContext,
    ContextAlreadyFinalizedError,
    create_validation_context,
    finalize_validation_context
)

from .comprehensive import perform_comprehensive_validation, validate_with_context

from .report import (
    ValidationReport,
    create_validation_report,
    log_validation_results,
    issues_to_frame,
    reports_to_frame
)

__all__ = [
    # Config
    'ValidationConfig',
    'DEFAULT_VALIDATION_CONFIG',
    'KNOWN_EMOTIONS',
    'ConfigValidationError',
    'load_validation_config',

    # Results
    'Severity',
    'IssueType',
    'ValidationIssue',
    'ValidationResult',
    'CorrectedMetrics',
    'PsychologicalMetricsResult',
    'EmotionalDataResult',
    'ApiResponseResult',
    'PerformanceResult',
    'ComprehensiveResult',

    # Validators
    'is_valid_number',
    'is_within_range',
    'validate_psychological_metrics',
    'EmotionalDataPoint',
    'validate_emotional_data',
    'ApiResponsePayload',
    'validate_api_response',
    'validate_performance',
    'perform_comprehensive_validation',
    'validate_with_context',

    # Context
    'ValidationContext',
    'ContextAlreadyFinalizedError',
    'create_validation_context',
    'finalize_validation_context',

    # Reporting
    'ValidationReport',
    'create_validation_report',
    'log_validation_results',
    'issues_to_frame',
    'reports_to_frame'
]

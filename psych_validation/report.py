"""
Validation Reporting

Builds audit reports from comprehensive results, logs verdicts, and exports
findings as pandas DataFrames for display or persistence by the caller.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Any, Iterable

import pandas as pd

from .context import ValidationContext
from .results import ComprehensiveResult, IssueType, Severity

logger = logging.getLogger(__name__)

# Errors of these types mean the datum itself is corrupt or contradictory
CRITICAL_ISSUE_TYPES = (IssueType.CONSISTENCY, IssueType.NULL_VALUE)

ISSUE_COLUMNS = ['validator', 'severity', 'type', 'field', 'message', 'value', 'expected']


@dataclass
class ValidationReport:
    """Summary of one validation request."""
    context: ValidationContext
    results: ComprehensiveResult
    summary: Dict[str, Any] = field(default_factory=dict)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'context': self.context.to_dict(),
            'summary': dict(self.summary),
            'recommendations': list(self.recommendations),
            'results': self.results.to_dict(),
        }


def create_validation_report(
    context: ValidationContext,
    results: ComprehensiveResult
) -> ValidationReport:
    """
    Create a validation report for logging and auditing.

    Args:
        context: Context of the validated request
        results: Comprehensive validation results

    Returns:
        ValidationReport with summary counts and recommendations
    """
    overall = results.overall
    critical = sum(
        1 for issue in overall.issues
        if issue.severity is Severity.ERROR and issue.type in CRITICAL_ISSUE_TYPES
    )

    summary = {
        'total_errors': len(overall.errors),
        'total_warnings': len(overall.warnings),
        'critical_issues': critical,
        'performance_issues': len(results.performance.errors) + len(results.performance.warnings),
        'is_overall_valid': overall.is_valid,
    }

    recommendations = []
    if results.psychological_metrics.errors:
        recommendations.append('Review psychological metrics calculation logic and input data')
    if results.emotional_data.errors:
        recommendations.append('Validate emotional data input and ensure proper data structure')
    if results.api_response.errors:
        recommendations.append('Check the aggregate statistics returned by the data layer')
    if results.performance.errors:
        recommendations.append('Optimize calculation algorithms and consider caching strategies')
    if results.psychological_metrics.warnings:
        recommendations.append('Monitor psychological metrics consistency and user feedback')

    return ValidationReport(
        context=context,
        results=results,
        summary=summary,
        recommendations=recommendations
    )


def log_validation_results(
    context: ValidationContext,
    results: ComprehensiveResult
) -> ValidationReport:
    """
    Log a validation verdict at a level matching its outcome.

    Silent when the context's config has log_validation_failures disabled.

    Returns:
        The report that was (or would have been) logged
    """
    report = create_validation_report(context, results)

    if not context.config.log_validation_failures:
        return report

    who = f"request={context.request_id} user={context.user_id}"

    if not results.overall.is_valid:
        logger.error(
            f"[VALIDATION] Validation failed ({who}): "
            f"{report.summary['total_errors']} error(s), "
            f"{report.summary['total_warnings']} warning(s)"
        )
        for error in results.overall.errors:
            logger.error(f"[VALIDATION]   {error}")
        for recommendation in report.recommendations:
            logger.info(f"[VALIDATION]   -> {recommendation}")
    elif results.overall.warnings:
        logger.warning(
            f"[VALIDATION] Validation completed with warnings ({who}): "
            f"{len(results.overall.warnings)} warning(s)"
        )
        for warning in results.overall.warnings:
            logger.warning(f"[VALIDATION]   {warning}")
    else:
        logger.info(
            f"[VALIDATION] Validation completed successfully ({who}): "
            f"calculation_time={results.performance.calculation_time}ms "
            f"memory_usage={results.performance.memory_usage}"
        )

    return report


def issues_to_frame(results: ComprehensiveResult) -> pd.DataFrame:
    """
    Flatten every finding into a DataFrame, one row per issue.

    Columns: validator, severity, type, field, message, value, expected
    """
    rows = []
    for validator, sub_result in results.sub_results().items():
        for issue in sub_result.issues:
            rows.append({
                'validator': validator,
                'severity': issue.severity.value,
                'type': issue.type.value,
                'field': issue.field,
                'message': issue.message,
                'value': issue.value,
                'expected': issue.expected,
            })
    return pd.DataFrame(rows, columns=ISSUE_COLUMNS)


def reports_to_frame(reports: Iterable[ValidationReport]) -> pd.DataFrame:
    """
    Summarize many reports into a DataFrame, one row per request.

    Columns: request_id, user_id, timestamp, calculation_time, plus the
    summary counts.
    """
    rows = []
    for report in reports:
        row = {
            'request_id': report.context.request_id,
            'user_id': report.context.user_id,
            'timestamp': report.context.timestamp,
            'calculation_time': report.context.performance_metrics.calculation_time,
        }
        row.update(report.summary)
        rows.append(row)

    df = pd.DataFrame(rows)
    if not df.empty:
        df['timestamp'] = pd.to_datetime(df['timestamp'], utc=True)
    return df

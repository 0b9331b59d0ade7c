"""
Tests for Comprehensive Validation

Tests the merge of all four validators into one verdict.
"""

import pytest

from psych_validation import (
    ContextAlreadyFinalizedError,
    create_validation_context,
    perform_comprehensive_validation,
    validate_with_context
)


class TestComprehensiveValidation:
    """Tests for perform_comprehensive_validation."""

    def test_valid_data(self, emotional_data, api_payload):
        result = perform_comprehensive_validation(
            75, 70, emotional_data, 200, 100, None, api_payload
        )

        assert result.overall.is_valid
        assert result.is_valid
        assert result.overall.errors == []
        assert result.psychological_metrics.is_valid
        assert result.emotional_data.is_valid
        assert result.api_response.is_valid
        assert result.performance.is_valid

    def test_everything_invalid(self, invalid_api_payload):
        bad_emotions = [
            {'subject': '', 'value': 75},
            {'subject': 'DISCIPLINE', 'value': 150},
        ]
        result = perform_comprehensive_validation(
            -10, 150, bad_emotions, 1000, 1000, None, invalid_api_payload
        )

        assert not result.overall.is_valid
        assert not result.psychological_metrics.is_valid
        assert not result.emotional_data.is_valid
        assert not result.api_response.is_valid
        assert not result.performance.is_valid

    def test_mixed_scenario(self):
        """Invalid pair + unknown emotion + over-budget calculation."""
        emotions = [
            {'subject': 'DISCIPLINE', 'value': 85, 'fullMark': 100, 'leaning': 'Balanced', 'side': 'Buy'},
            {'subject': 'TILT', 'value': 40, 'fullMark': 100, 'leaning': 'Balanced', 'side': 'Sell'},
            {'subject': 'UNKNOWN_EMOTION', 'value': 50, 'fullMark': 100, 'leaning': 'Balanced', 'side': 'Buy'},
        ]
        result = perform_comprehensive_validation(95, 5, emotions, 200, 800)

        assert not result.overall.is_valid
        assert result.emotional_data.is_valid
        assert result.api_response.is_valid
        for error in result.psychological_metrics.errors + result.performance.errors:
            assert error in result.overall.errors
        assert result.psychological_metrics.errors
        assert result.performance.errors
        assert 'Unknown emotion: UNKNOWN_EMOTION' in result.overall.warnings

    def test_merge_order(self, emotional_data):
        """Errors are concatenated psychological -> emotional -> api -> performance."""
        result = perform_comprehensive_validation(
            120, 50, [{'subject': 'FOMO', 'value': 200}], 100, 900, None, {}
        )

        expected = (
            result.psychological_metrics.errors
            + result.emotional_data.errors
            + result.api_response.errors
            + result.performance.errors
        )
        assert result.overall.errors == expected
        assert result.overall.errors[0].startswith('Discipline Level')
        assert result.overall.errors[-1].startswith('Calculation time')

    def test_without_payload_checks_response_time_only(self, emotional_data):
        result = perform_comprehensive_validation(70, 65, emotional_data, 750, 100)

        assert result.overall.is_valid
        assert result.api_response.errors == []
        assert len(result.api_response.warnings) == 1
        assert result.api_response.response_time == 750

    def test_emotional_errors_not_duplicated(self):
        """Emotion range errors come from the emotional validator only."""
        result = perform_comprehensive_validation(70, 65, [{'subject': 'FOMO', 'value': 200}], 100, 100)

        assert result.psychological_metrics.errors == []
        assert len(result.overall.errors) == 1

    def test_to_dict(self, emotional_data, api_payload):
        result = perform_comprehensive_validation(75, 70, emotional_data, 200, 100, None, api_payload)
        data = result.to_dict()

        assert data['overall']['is_valid'] is True
        assert set(data) == {'overall', 'psychological_metrics', 'emotional_data', 'api_response', 'performance'}


class TestValidateWithContext:
    """Tests for context-driven validation."""

    def test_uses_context_timing(self, emotional_data):
        context = create_validation_context('req-1', 'user-1')
        result = validate_with_context(context, 70, 65, emotional_data, 100)

        assert context.is_finalized
        assert result.performance.calculation_time == context.performance_metrics.calculation_time
        assert result.performance.is_valid

    def test_context_finalized_once(self, emotional_data):
        context = create_validation_context('req-2', 'user-1')
        validate_with_context(context, 70, 65, emotional_data, 100)

        with pytest.raises(ContextAlreadyFinalizedError):
            validate_with_context(context, 70, 65, emotional_data, 100)

"""
Tests for API Response Validation

Tests payload field checks, embedded emotional data, response time
warnings and payload size accounting.
"""

import pytest

from psych_validation import ApiResponsePayload, validate_api_response


class TestPayloadFields:
    """Tests for aggregate field checks."""

    def test_valid_payload(self, api_payload):
        result = validate_api_response(api_payload, 200)

        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []
        assert result.response_time == 200
        assert result.data_size > 0

    def test_invalid_payload(self, invalid_api_payload):
        result = validate_api_response(invalid_api_payload, 200)

        assert not result.is_valid
        assert 'totalTrades must be a non-negative number' in result.errors
        assert 'totalPnL must be a valid number' in result.errors
        assert 'winRate must be between 0-100' in result.errors
        assert len(result.errors) == 3

    def test_snake_case_keys(self):
        payload = {'total_trades': 3, 'total_pnl': -12.5, 'win_rate': 33.3, 'avg_trade_size': 250}
        result = validate_api_response(payload, 100)

        assert result.is_valid

    def test_missing_required_fields(self):
        result = validate_api_response({}, 100)

        assert not result.is_valid
        assert len(result.errors) == 3
        assert all(e.startswith('Missing required field') for e in result.errors)

    @pytest.mark.parametrize('payload', [None, 'totals', 42, ['a']])
    def test_not_an_object(self, payload):
        result = validate_api_response(payload, 100)

        assert not result.is_valid
        assert result.errors == ['API response data is not a valid object']

    def test_bool_is_not_a_number(self):
        payload = {'totalTrades': True, 'totalPnL': 0, 'winRate': 50}
        result = validate_api_response(payload, 100)

        assert result.errors == ['totalTrades must be a non-negative number']

    def test_huge_integer_counts_accepted(self):
        payload = {'totalTrades': 10**20, 'totalPnL': 1.0, 'winRate': 50}
        result = validate_api_response(payload, 100)

        assert result.is_valid
        assert result.errors == []

    def test_avg_trade_size_type(self):
        payload = {'totalTrades': 1, 'totalPnL': 0, 'winRate': 50, 'avgTradeSize': '1k'}
        result = validate_api_response(payload, 100)

        assert result.errors == ['avgTradeSize must be a valid number']

    def test_record_payload(self):
        payload = ApiResponsePayload(total_trades=10, total_pnl=120.0, win_rate=60)
        result = validate_api_response(payload, 50)

        assert result.is_valid
        assert payload.to_dict() == {'totalTrades': 10, 'totalPnL': 120.0, 'winRate': 60}


class TestEmbeddedEmotionalData:
    """Tests for delegation to the emotional data validator."""

    def test_emotional_errors_folded_in(self, api_payload):
        api_payload['emotionalData'].append({'subject': 'FOMO', 'value': 300})
        result = validate_api_response(api_payload, 100)

        assert not result.is_valid
        assert any('FOMO' in e for e in result.errors)

    def test_emotional_warnings_folded_in(self, api_payload):
        api_payload['emotionalData'].append({'subject': 'EUPHORIA', 'value': 30})
        result = validate_api_response(api_payload, 100)

        assert result.is_valid
        assert result.warnings == ['Unknown emotion: EUPHORIA']

    def test_absent_emotional_data_skipped(self, api_payload):
        del api_payload['emotionalData']
        result = validate_api_response(api_payload, 100)

        assert result.is_valid
        assert result.warnings == []


class TestResponseTime:
    """Tests for network latency checks."""

    def test_slow_response_warns(self, api_payload):
        result = validate_api_response(api_payload, 600)

        assert result.is_valid
        assert len(result.warnings) == 1
        assert 'API response time (600ms) exceeds maximum allowed (500ms)' in result.warnings[0]

    def test_at_limit_no_warning(self, api_payload):
        result = validate_api_response(api_payload, 500)

        assert result.warnings == []


class TestDataSize:
    def test_data_size_is_compact_json_bytes(self):
        payload = {'totalTrades': 1, 'totalPnL': 2, 'winRate': 3}
        result = validate_api_response(payload, 10)

        assert result.data_size == len('{"totalTrades":1,"totalPnL":2,"winRate":3}')

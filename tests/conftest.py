"""pytest configuration: project root on sys.path plus shared validation fixtures."""

import sys
import os

import pytest

# Add project root to sys.path so psych_validation can be imported uninstalled
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


def make_emotional_data():
    """Five recognized emotions, no duplicates."""
    return [
        {'subject': 'DISCIPLINE', 'value': 75, 'fullMark': 100, 'leaning': 'Balanced', 'side': 'Buy'},
        {'subject': 'CONFIDENCE', 'value': 60, 'fullMark': 100, 'leaning': 'Balanced', 'side': 'Buy'},
        {'subject': 'PATIENCE', 'value': 80, 'fullMark': 100, 'leaning': 'Balanced', 'side': 'Buy'},
        {'subject': 'TILT', 'value': 25, 'fullMark': 100, 'leaning': 'Balanced', 'side': 'Sell'},
        {'subject': 'ANXIOUS', 'value': 30, 'fullMark': 100, 'leaning': 'Balanced', 'side': 'Sell'},
    ]


def make_api_payload():
    """Well-formed aggregate statistics payload."""
    return {
        'totalTrades': 100,
        'totalPnL': 5000,
        'winRate': 65,
        'avgTradeSize': 1000,
        'emotionalData': make_emotional_data(),
    }


@pytest.fixture
def emotional_data():
    return make_emotional_data()


@pytest.fixture
def api_payload():
    return make_api_payload()


@pytest.fixture
def invalid_api_payload():
    return {
        'totalTrades': -10,
        'totalPnL': 'invalid',
        'winRate': 150,
        'avgTradeSize': 1000,
        'emotionalData': make_emotional_data(),
    }

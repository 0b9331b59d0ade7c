#!/usr/bin/env python3
"""Demo script: validate one request's psychological metrics end to end."""
import logging

from psych_validation import (
    DEFAULT_VALIDATION_CONFIG,
    create_validation_context,
    issues_to_frame,
    log_validation_results,
    validate_with_context
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
)

config = DEFAULT_VALIDATION_CONFIG.with_overrides(enable_auto_correction=True)
context = create_validation_context("demo-request", "demo-user", config=config)

# Metrics as computed upstream from the user's trades
discipline_level = 92.0
tilt_control = 12.0
emotional_data = [
    {"subject": "DISCIPLINE", "value": 85, "fullMark": 100, "leaning": "Balanced", "side": "Buy"},
    {"subject": "FOMO", "value": 40, "fullMark": 100, "leaning": "Balanced", "side": "Buy"},
    {"subject": "EUPHORIA", "value": 55, "fullMark": 100, "leaning": "Balanced", "side": "Sell"},
]
payload = {
    "totalTrades": 42,
    "totalPnL": 1280.5,
    "winRate": 57.1,
    "avgTradeSize": 950,
    "emotionalData": emotional_data,
}

results = validate_with_context(
    context, discipline_level, tilt_control, emotional_data, 180, response_data=payload
)
report = log_validation_results(context, results)

print(f"\nOverall valid: {results.overall.is_valid}")
print(f"Summary: {report.summary}")
print("\nFindings:")
print(issues_to_frame(results)[['validator', 'severity', 'message']].to_string(index=False))

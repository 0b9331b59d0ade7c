"""
Tests for Performance Validation

Tests calculation time budget (inclusive boundary) and memory warnings.
"""

import unittest

from psych_validation import DEFAULT_VALIDATION_CONFIG, validate_performance


class TestCalculationTime(unittest.TestCase):
    """Test the calculation time budget."""

    def test_good_performance(self):
        result = validate_performance(100)

        self.assertTrue(result.is_valid)
        self.assertEqual(result.errors, [])
        self.assertTrue(result.is_within_performance_threshold)

    def test_slow_performance(self):
        result = validate_performance(1000)

        self.assertFalse(result.is_valid)
        self.assertEqual(len(result.errors), 1)
        self.assertIn('Calculation time (1000ms) exceeds maximum allowed', result.errors[0])
        self.assertFalse(result.is_within_performance_threshold)

    def test_thresholds(self):
        """Test that the budget boundary is inclusive."""
        cases = [(50, True), (250, True), (500, True), (501, False), (1000, False)]
        for time_ms, expected_valid in cases:
            with self.subTest(time_ms=time_ms):
                result = validate_performance(time_ms)
                self.assertEqual(result.is_valid, expected_valid)
                self.assertEqual(result.is_within_performance_threshold, expected_valid)

    def test_exactly_one_error_over_budget(self):
        result = validate_performance(501)

        self.assertEqual(len(result.errors), 1)

    def test_huge_integer_over_budget(self):
        """Test that an int too wide for a float is still compared, not raised on."""
        result = validate_performance(10**20)

        self.assertFalse(result.is_valid)
        self.assertEqual(len(result.errors), 1)
        self.assertIn('exceeds maximum allowed', result.errors[0])

    def test_invalid_measurement(self):
        for bad in (None, float('nan'), -1):
            with self.subTest(value=bad):
                result = validate_performance(bad)
                self.assertFalse(result.is_valid)
                self.assertFalse(result.is_within_performance_threshold)

    def test_custom_budget(self):
        config = DEFAULT_VALIDATION_CONFIG.with_overrides(max_calculation_time=50)

        self.assertFalse(validate_performance(60, config=config).is_valid)


class TestMemoryUsage(unittest.TestCase):
    """Test memory footprint warnings."""

    def test_memory_thresholds(self):
        cases = [
            (10 * 1024 * 1024, 0),
            (30 * 1024 * 1024, 0),
            (60 * 1024 * 1024, 1),
            (100 * 1024 * 1024, 1),
        ]
        for memory, expected_warnings in cases:
            with self.subTest(memory=memory):
                result = validate_performance(100, memory)
                self.assertTrue(result.is_valid)
                self.assertEqual(len(result.warnings), expected_warnings)

    def test_memory_warning_in_mib(self):
        result = validate_performance(100, 60 * 1024 * 1024)

        self.assertIn('Memory usage (60.00MB) exceeds recommended limit (50.00MB)', result.warnings[0])

    def test_memory_optional(self):
        result = validate_performance(100)

        self.assertIsNone(result.memory_usage)
        self.assertEqual(result.warnings, [])


if __name__ == '__main__':
    unittest.main()

"""
Validation Configuration

Thresholds and switches for the psychological metrics validation engine.
A ValidationConfig is an immutable value passed into every validator call;
different call sites may use different thresholds (e.g. a stricter batch
import path).
"""

import os
import sys
import json
import logging
from dataclasses import dataclass, field, fields, replace, asdict
from pathlib import Path
from typing import Dict, Any, FrozenSet, Union

import yaml

logger = logging.getLogger(__name__)


# Emotion labels offered by the trade form
KNOWN_EMOTIONS = frozenset({
    'FOMO', 'REVENGE', 'TILT', 'OVERRISK', 'PATIENCE', 'REGRET',
    'DISCIPLINE', 'CONFIDENT', 'CONFIDENCE', 'ANXIOUS', 'NEUTRAL'
})

MIB = 1024 * 1024


class ConfigValidationError(Exception):
    """Raised when a validation config is incoherent or cannot be loaded."""
    pass


@dataclass(frozen=True)
class ValidationConfig:
    """
    Validation thresholds.

    Attributes:
        range_min: Lower bound for individual metrics (inclusive)
        range_max: Upper bound for individual metrics (inclusive)
        max_deviation_between_metrics: Max gap (percentage points) between
            discipline level and tilt control before a warning fires
        min_psychological_stability_index: Floor for the averaged index
        max_api_response_time: Network round-trip budget in ms
        max_calculation_time: Calculation budget in ms
        max_memory_usage: Memory budget in bytes
        enable_auto_correction: Clamp out-of-range metrics into correctedData
        strict_mode: Report inter-metric deviation as an error
        log_validation_failures: Emit log records for validation verdicts
        impossible_state_high: Lower edge of the "very high" band
        impossible_state_low: Upper edge (exclusive) of the "very low" band
        known_emotions: Recognized emotion vocabulary (upper case)
    """
    range_min: float = 0.0
    range_max: float = 100.0
    max_deviation_between_metrics: float = 20.0
    min_psychological_stability_index: float = 10.0
    max_api_response_time: float = 500.0
    max_calculation_time: float = 500.0
    max_memory_usage: int = 50 * MIB
    enable_auto_correction: bool = False
    strict_mode: bool = False
    log_validation_failures: bool = True
    impossible_state_high: float = 85.0
    impossible_state_low: float = 20.0
    known_emotions: FrozenSet[str] = field(default=KNOWN_EMOTIONS)

    def __post_init__(self):
        """Normalize the vocabulary and reject incoherent thresholds."""
        object.__setattr__(
            self,
            'known_emotions',
            frozenset(str(e).strip().upper() for e in self.known_emotions)
        )

        if self.range_min >= self.range_max:
            raise ConfigValidationError(
                f"range_min ({self.range_min}) must be below range_max ({self.range_max})"
            )

        for name in ('max_api_response_time', 'max_calculation_time', 'max_memory_usage'):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool) or value <= 0:
                raise ConfigValidationError(f"'{name}' must be a positive number, got {value!r}")

        if self.max_deviation_between_metrics < 0:
            raise ConfigValidationError(
                f"max_deviation_between_metrics must be non-negative, "
                f"got {self.max_deviation_between_metrics}"
            )

        if self.impossible_state_low >= self.impossible_state_high:
            raise ConfigValidationError(
                f"impossible_state_low ({self.impossible_state_low}) must be below "
                f"impossible_state_high ({self.impossible_state_high})"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidationConfig":
        """
        Create a config from a plain dictionary (e.g. a parsed YAML section).

        Args:
            data: Mapping of field names to values; missing keys use defaults

        Returns:
            ValidationConfig instance

        Raises:
            ConfigValidationError: On unknown keys or incoherent values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigValidationError(f"Unknown validation config field(s): {', '.join(unknown)}")

        kwargs = dict(data)
        if 'known_emotions' in kwargs:
            emotions = kwargs['known_emotions']
            if isinstance(emotions, str) or not isinstance(emotions, (list, tuple, set, frozenset)):
                raise ConfigValidationError(
                    f"known_emotions must be a list of labels, got {type(emotions).__name__}"
                )
            kwargs['known_emotions'] = frozenset(emotions)

        return cls(**kwargs)

    def with_overrides(self, **overrides: Any) -> "ValidationConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        """Export to dictionary."""
        data = asdict(self)
        data['known_emotions'] = sorted(self.known_emotions)
        return data


DEFAULT_VALIDATION_CONFIG = ValidationConfig()


def load_validation_config(path: Union[str, Path]) -> ValidationConfig:
    """
    Load a validation config from a YAML or JSON file.

    A top-level ``validation:`` section is unwrapped if present.

    Args:
        path: Path to a .yaml/.yml or .json file

    Returns:
        ValidationConfig instance

    Raises:
        ConfigValidationError: If the file is missing, unparsable or invalid
    """
    config_file = Path(path)

    if not config_file.exists():
        raise ConfigValidationError(f"Config file not found: {path}")

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            if config_file.suffix.lower() == '.json':
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in {path}: {e}")
    except json.JSONDecodeError as e:
        raise ConfigValidationError(f"Invalid JSON in {path}: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigValidationError(f"Config in {path} must be a mapping, got {type(data).__name__}")
    if isinstance(data.get('validation'), dict):
        data = data['validation']

    config = ValidationConfig.from_dict(data)
    logger.info(f"[OK] Validation config loaded from {config_file}")
    return config


if __name__ == "__main__":
    """
    Standalone config check.

    Usage:
        python -m psych_validation.config [config/validation.yaml]
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    )

    config_path = sys.argv[1] if len(sys.argv) > 1 else os.path.join("config", "validation.yaml")

    try:
        config = load_validation_config(config_path)
    except ConfigValidationError as e:
        print(f"\n❌ Validation config is invalid: {e}")
        sys.exit(1)

    print(f"\n✓ Validation config is valid: {config_path}")
    print("\nThresholds:")
    print(f"  Metric range: {config.range_min:g}-{config.range_max:g}")
    print(f"  Max deviation: {config.max_deviation_between_metrics:g}%")
    print(f"  Min stability index: {config.min_psychological_stability_index:g}%")
    print(f"  Impossible-state bands: >= {config.impossible_state_high:g} / < {config.impossible_state_low:g}")
    print(f"  Max API response time: {config.max_api_response_time:g}ms")
    print(f"  Max calculation time: {config.max_calculation_time:g}ms")
    print(f"  Max memory usage: {config.max_memory_usage / MIB:.2f}MB")
    print(f"  Auto-correction: {'on' if config.enable_auto_correction else 'off'}")
    print(f"  Strict mode: {'on' if config.strict_mode else 'off'}")
    print(f"  Known emotions: {', '.join(sorted(config.known_emotions))}")

# config_manager.py
"""""
Settings for expression evaluation.

- EvaluationConfig: validated (max_scale, rounding_mode) pair handed to the evaluator
- config.json: shipped defaults, read/written with load_setting_value / save_setting
"""""
import json
import decimal
from pathlib import Path

from . import error as E

config_json = Path(__file__).resolve().parent / "config.json"


DEFAULT_MAX_SCALE = 14
DEFAULT_ROUNDING_MODE = "half-even"
MIN_MAX_SCALE = 1
MAX_MAX_SCALE = 32

# Names accepted for the rounding mode, mapped to the decimal module constants.
# ROUND_05UP has no counterpart and "unnecessary" forbids rounding, so neither is listed.
ROUNDING_MODES = {
    "half-even": decimal.ROUND_HALF_EVEN,
    "half-up": decimal.ROUND_HALF_UP,
    "half-down": decimal.ROUND_HALF_DOWN,
    "up": decimal.ROUND_UP,
    "down": decimal.ROUND_DOWN,
    "ceiling": decimal.ROUND_CEILING,
    "floor": decimal.ROUND_FLOOR,
}

DEFAULT_SETTINGS = {
    "max_scale": DEFAULT_MAX_SCALE,
    "rounding_mode": DEFAULT_ROUNDING_MODE,
    "debug": False,
}


def check_max_scale(max_scale):
    """Return max_scale if it is an int inside [1, 32]; else raise InvalidConfigurationError."""
    if isinstance(max_scale, bool) or not isinstance(max_scale, int):
        raise E.InvalidConfigurationError(E.message_for("5001", max_scale), code="5001")
    if max_scale < MIN_MAX_SCALE or max_scale > MAX_MAX_SCALE:
        raise E.InvalidConfigurationError(E.message_for("5001", max_scale), code="5001")
    return max_scale


def rounding_mode_name(rounding_mode):
    """Resolve a rounding mode name or decimal constant to its canonical name.

    'HALF_EVEN', 'half_even' and decimal.ROUND_HALF_EVEN all resolve to 'half-even'.
    """
    if not isinstance(rounding_mode, str):
        raise E.InvalidConfigurationError(E.message_for("5002", rounding_mode), code="5002")

    for name, constant in ROUNDING_MODES.items():
        if rounding_mode == constant:
            return name

    name = rounding_mode.strip().lower().replace("_", "-")
    if name in ROUNDING_MODES:
        return name
    raise E.InvalidConfigurationError(E.message_for("5002", rounding_mode), code="5002")


class EvaluationConfig:
    """Max scale and rounding mode used by one evaluation."""

    def __init__(self, max_scale=DEFAULT_MAX_SCALE, rounding_mode=DEFAULT_ROUNDING_MODE):
        self.max_scale = check_max_scale(max_scale)
        self.rounding_mode = rounding_mode_name(rounding_mode)

    @property
    def rounding(self):
        """The decimal module constant for this rounding mode."""
        return ROUNDING_MODES[self.rounding_mode]

    def __eq__(self, other):
        if not isinstance(other, EvaluationConfig):
            return NotImplemented
        return (self.max_scale, self.rounding_mode) == (other.max_scale, other.rounding_mode)

    def __repr__(self):
        return f"EvaluationConfig(max_scale={self.max_scale}, rounding_mode={self.rounding_mode!r})"


def load_setting_value(key_value):
    try:
        with open(config_json, 'r', encoding= 'utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        settings_dict = {}

    settings_dict = {**DEFAULT_SETTINGS, **settings_dict}

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value)


def save_setting(settings_dict):
    with open (config_json, 'w', encoding= 'utf-8') as f:
        json.dump(settings_dict, f, indent=4)
    return settings_dict


def load_evaluation_config():
    """Build an EvaluationConfig from config.json (invalid values raise InvalidConfigurationError)."""
    settings = load_setting_value("all")
    return EvaluationConfig(settings["max_scale"], settings["rounding_mode"])

"""Core parameter handling: parsing, profiles, validation and configuration."""

from snouty.core.args import parse_args
from snouty.core.config import ApiSettings, load_settings
from snouty.core.input import collect_params, parse_json, parse_stdin_text
from snouty.core.moment import is_moment_format, parse_moment
from snouty.core.profiles import Profile
from snouty.core.validation import require_valid, validate

__all__ = [
    "ApiSettings",
    "Profile",
    "collect_params",
    "is_moment_format",
    "load_settings",
    "parse_args",
    "parse_json",
    "parse_moment",
    "parse_stdin_text",
    "require_valid",
    "validate",
]

"""
Consistent Message Formatting for Parameter Diagnostics.

Error Message Format
--------------------
- Parameter name in single quotes: 'param_name'
- Clear description of the problem
- Offending value if relevant: got <value>

Examples:
- "'leaf_address_size' must be an integer, got 'forty'"
- "Use of control parameter 'use_external_select' is deprecated. Use 'block_select_mode' instead."
- "Unknown parameter 'leaf_adress_size'. Did you mean 'leaf_address_size'?"
"""

from typing import Any, List, Optional


def format_param(name: str) -> str:
    """Format a parameter name for messages."""
    return f"'{name}'"


def format_value(value: Any) -> str:
    """Format a value for messages."""
    if isinstance(value, str):
        return f"'{value}'"
    return str(value)


def type_error(param: str, expected_type: str, got: Any) -> str:
    """
    Create a type mismatch error message.

    Args:
        param: Parameter name
        expected_type: Expected type description
        got: Assignment text received

    Returns:
        Formatted error message.
    """
    return f"{format_param(param)} must be {expected_type}, got {format_value(got)}"


def invalid_min_data_size(value: Any) -> str:
    return f"invalid minimum data size ({value}).  Must be power of 2 and >=32."


def unparsable_min_data_size(current: Any) -> str:
    # Reports the value in effect, not the rejected text.
    return f"invalid minimum data size specified ({current})."


def unparsable_debug_mode(current: Any) -> str:
    return f"invalid debug_mode specified ({current})."


def debug_mode_advisory() -> str:
    return "debug_mode parameter is set.  Non-standard behavior can occur."


def deprecated_param_warning(param: str, replacement: Optional[str] = None) -> str:
    """
    Create a deprecation advisory.

    Args:
        param: Deprecated parameter name
        replacement: Text naming what to use instead, if anything
    """
    base_msg = f"Use of control parameter {format_param(param)} is deprecated."
    if replacement:
        return f"{base_msg} Use {replacement} instead."
    return base_msg


def unknown_param_error(param: str, suggestions: Optional[List[str]] = None) -> str:
    """
    Create an error message for an unknown parameter with suggestions.

    Args:
        param: The unknown parameter name.
        suggestions: Optional list of similar valid parameter names.

    Returns:
        Formatted error message with "Did you mean?" if suggestions available.
    """
    base_msg = f"Unknown parameter {format_param(param)}"
    if suggestions:
        if len(suggestions) == 1:
            return f"{base_msg}. Did you mean {format_param(suggestions[0])}?"
        quoted = [format_param(s) for s in suggestions]
        return f"{base_msg}. Did you mean one of: {', '.join(quoted)}?"
    return base_msg


def syntax_error(filepath: str, line: int, column: int, message: str) -> str:
    return f"{filepath}:{line}:{column}: {message}"

"""${name} placeholder substitution for call templates.

Two ordered passes are applied: first the environment mapping, then the call
parameters. Because the environment pass runs first, an environment value
wins when both mappings define the same placeholder. A pass scans the text
once and never re-scans what it inserted, so values are not expanded
recursively. Placeholders without a matching key are left verbatim.
"""

import json
import re
from typing import Any, Mapping

_PLACEHOLDER = re.compile(r"\$\{([^{}]+)\}")


def stringify(value: Any) -> str:
    """Render a parameter value the way it should appear inside a template."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _apply_pass(text: str, values: Mapping[str, Any]) -> str:
    if not values:
        return text

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in values:
            return stringify(values[name])
        return match.group(0)

    return _PLACEHOLDER.sub(replace, text)


def substitute(
    template: str,
    environment: Mapping[str, Any] | None = None,
    parameters: Mapping[str, Any] | None = None,
) -> str:
    """Resolve ${name} placeholders against environment values, then parameters.

    Args:
        template: Text that may contain ${name} placeholders
        environment: Configured variables (API keys and the like)
        parameters: Arguments of the current tool call

    Returns:
        str: The template with every known placeholder replaced
    """
    result = _apply_pass(template, environment or {})
    return _apply_pass(result, parameters or {})


def find_placeholders(text: str) -> list[str]:
    """List the names of the ${name} placeholders still present in text."""
    return _PLACEHOLDER.findall(text)

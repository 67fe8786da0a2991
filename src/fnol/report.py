"""
Text rendering of routing decisions.

Output is JSON with keys in declaration order, 2-space indent, empty
containers as ``{}`` / ``[]`` on one line, and every character outside
printable ASCII escaped (short escapes for \\b \\f \\n \\r \\t, otherwise
``\\uXXXX``).
"""

import json

from .schema import RoutingDecision


def render_decision(decision: RoutingDecision, indent: int = 2) -> str:
    """
    Render a routing decision as text.

    Args:
        decision: The decision to render
        indent: Spaces per nesting level

    Returns:
        JSON text, identical for identical decisions
    """
    return json.dumps(decision.to_dict(), indent=indent, ensure_ascii=True)


def parse_decision(rendered: str) -> RoutingDecision:
    """Rebuild a RoutingDecision from rendered text."""
    return RoutingDecision.model_validate(json.loads(rendered))

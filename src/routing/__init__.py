"""Claims routing module for FNOL claims."""

from .router import (
    MANDATORY_FIELD_CHECKS,
    ClaimRouter,
    MandatoryFieldCheck,
    RoutingRule,
    build_routing_rules,
    find_missing_fields,
    route_claim,
    select_route,
)

__all__ = [
    "MANDATORY_FIELD_CHECKS",
    "ClaimRouter",
    "MandatoryFieldCheck",
    "RoutingRule",
    "build_routing_rules",
    "find_missing_fields",
    "route_claim",
    "select_route",
]

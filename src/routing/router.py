"""
Claim routing for extracted FNOL records.

Two ordered rule tables drive the decision:
- MANDATORY_FIELD_CHECKS: every check runs, failures are collected in order
- routing rules: evaluated top to bottom, first match wins

Any missing mandatory field forces Manual Review before the routing rules run.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from ..fnol.schema import ClaimType, ExtractedRecord, Route, RoutingDecision
from ..utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

MISSING_FIELDS_PREFIX = "Missing mandatory fields: "


# =============================================================================
# Rule Tables
# =============================================================================


@dataclass(frozen=True)
class MandatoryFieldCheck:
    """A mandatory field and the test that reports it missing."""
    field_name: str
    is_missing: Callable[[ExtractedRecord], bool]


@dataclass(frozen=True)
class RoutingRule:
    """A routing outcome and the predicate that selects it."""
    name: str
    applies: Callable[[ExtractedRecord], bool]
    route: Route
    reason: str


MANDATORY_FIELD_CHECKS: Tuple[MandatoryFieldCheck, ...] = (
    MandatoryFieldCheck("policy_number", lambda r: r.policy_info.policy_number is None),
    MandatoryFieldCheck("date", lambda r: r.incident_info.date is None),
    MandatoryFieldCheck("location", lambda r: r.incident_info.location is None),
    MandatoryFieldCheck("claim_type", lambda r: r.mandatory_others.claim_type == ClaimType.UNKNOWN),
    MandatoryFieldCheck("description", lambda r: r.incident_info.description is None),
    MandatoryFieldCheck("claimant", lambda r: r.involved_parties.claimant is None),
    MandatoryFieldCheck("vin", lambda r: r.asset_details.asset_id_vin is None),
)


def build_routing_rules(settings: Settings) -> Tuple[RoutingRule, ...]:
    """Build the ordered routing rules for a complete claim."""
    keywords = tuple(k.lower() for k in settings.suspicious_keywords)
    threshold = settings.fast_track_threshold

    def has_suspicious_keywords(record: ExtractedRecord) -> bool:
        description = (record.incident_info.description or "").lower()
        return any(k in description for k in keywords)

    def is_injury(record: ExtractedRecord) -> bool:
        return record.mandatory_others.claim_type == ClaimType.INJURY

    def is_low_damage(record: ExtractedRecord) -> bool:
        damage = record.asset_details.estimated_damage
        return damage is not None and damage < threshold

    return (
        RoutingRule(
            "suspicious_keywords",
            has_suspicious_keywords,
            Route.INVESTIGATION_FLAG,
            "Suspicious keywords found in description.",
        ),
        RoutingRule("injury", is_injury, Route.SPECIALIST_QUEUE, "Claim involves injury."),
        RoutingRule("low_damage", is_low_damage, Route.FAST_TRACK, settings.fast_track_reason),
        # Default: not a missing-field failure
        RoutingRule("default", lambda r: True, Route.MANUAL_REVIEW, "High or missing damage estimate."),
    )


# =============================================================================
# Processing Steps
# =============================================================================


def find_missing_fields(
    record: ExtractedRecord,
    checks: Sequence[MandatoryFieldCheck] = MANDATORY_FIELD_CHECKS,
) -> List[str]:
    """
    Run every mandatory-field check and collect the failures.

    Returns:
        Missing field names in check order
    """
    return [check.field_name for check in checks if check.is_missing(record)]


def select_route(record: ExtractedRecord, rules: Sequence[RoutingRule]) -> RoutingRule:
    """Return the first rule whose predicate holds for the record."""
    for rule in rules:
        if rule.applies(record):
            return rule
    # Unreachable with the built-in default rule
    raise ValueError("No routing rule matched")


# =============================================================================
# Main API
# =============================================================================


class ClaimRouter:
    """
    Route extracted claims to a processing queue.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the router.

        Args:
            settings: Routing thresholds and keywords (uses cached settings if None)
        """
        self.settings = settings or get_settings()
        self.rules = build_routing_rules(self.settings)

    def route(self, record: ExtractedRecord) -> RoutingDecision:
        """
        Decide where a claim goes.

        Args:
            record: Fields extracted from one FNOL document

        Returns:
            RoutingDecision with missing fields, route and reasoning
        """
        missing = find_missing_fields(record)

        if missing:
            route = Route.MANUAL_REVIEW
            reason = MISSING_FIELDS_PREFIX + ", ".join(missing)
        else:
            rule = select_route(record, self.rules)
            logger.debug(f"Routing rule matched: {rule.name}")
            route = rule.route
            reason = rule.reason

        logger.info(f"Claim routed: {route.value} - {reason}")

        return RoutingDecision(
            extracted_fields=record,
            missing_fields=tuple(missing),
            recommended_route=route,
            reasoning=reason,
        )


def route_claim(record: ExtractedRecord, settings: Optional[Settings] = None) -> RoutingDecision:
    """Route an extracted record (convenience function)."""
    return ClaimRouter(settings).route(record)

"""
Rule-based field extraction for FNOL documents.

Scans raw claim text with a fixed set of labeled patterns and builds an
ExtractedRecord. Extraction never fails: a label that is absent or
malformed yields None for its field.
"""

import logging
from typing import Dict, Optional

from .patterns import (
    FIELD_PATTERNS,
    INJURY_KEYWORD,
    PROPERTY_DAMAGE_KEYWORDS,
    match_first,
    normalize_whitespace,
    parse_amount,
)
from .schema import (
    AssetDetails,
    AssetType,
    ClaimType,
    ExtractedRecord,
    IncidentInfo,
    InvolvedParties,
    MandatoryOthers,
    PolicyInfo,
)

logger = logging.getLogger(__name__)


def detect_claim_type(text: str) -> ClaimType:
    """
    Classify the claim from keywords anywhere in the document.

    INJURY wins over COLLISION/DAMAGE; the check ignores case and field labels.
    """
    upper = text.upper()
    if INJURY_KEYWORD in upper:
        return ClaimType.INJURY
    if any(keyword in upper for keyword in PROPERTY_DAMAGE_KEYWORDS):
        return ClaimType.PROPERTY_DAMAGE
    return ClaimType.UNKNOWN


class FieldExtractor:
    """Extracts structured claim fields from FNOL text."""

    def extract(self, text: str) -> ExtractedRecord:
        """
        Extract all fields from the document.

        Args:
            text: Full FNOL document text

        Returns:
            ExtractedRecord with every field present (None when not found)
        """
        raw = self._match_all(text)

        description = raw["description"]
        if description is not None:
            description = normalize_whitespace(description)

        vin = raw["asset_id_vin"]

        record = ExtractedRecord(
            policy_info=PolicyInfo(
                policy_number=raw["policy_number"],
                policyholder_name=raw["policyholder_name"],
                effective_dates=raw["effective_dates"],
            ),
            incident_info=IncidentInfo(
                date=raw["date"],
                time=raw["time"],
                location=raw["location"],
                description=description,
            ),
            involved_parties=InvolvedParties(claimant=raw["claimant"]),
            asset_details=AssetDetails(
                asset_type=AssetType.VEHICLE if vin is not None else AssetType.UNKNOWN,
                asset_id_vin=vin,
                make=raw["make"],
                model=raw["model"],
                year=raw["year"],
                estimated_damage=parse_amount(raw["estimated_damage"]),
            ),
            mandatory_others=MandatoryOthers(claim_type=detect_claim_type(text)),
        )

        if raw["estimated_damage"] is not None and record.asset_details.estimated_damage is None:
            logger.debug(f"Unparsable estimate amount: {raw['estimated_damage']!r}")

        return record

    def _match_all(self, text: str) -> Dict[str, Optional[str]]:
        """Run every labeled pattern independently over the whole text."""
        matches = {}
        for field_name, pattern in FIELD_PATTERNS.items():
            value = match_first(pattern, text)
            if value is None:
                logger.debug(f"No match for field: {field_name}")
            matches[field_name] = value
        return matches


def extract_fields(text: str) -> ExtractedRecord:
    """Extract an ExtractedRecord from FNOL text (convenience function)."""
    return FieldExtractor().extract(text)

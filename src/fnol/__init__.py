"""
First Notice of Loss (FNOL) module.

Rule-based extraction of claim fields from FNOL text documents.
The end-to-end pipeline lives in ``src.fnol.pipeline``.
"""

from .extractor import FieldExtractor, detect_claim_type, extract_fields
from .report import parse_decision, render_decision
from .schema import (
    # Enums
    AssetType,
    ClaimType,
    Route,
    # Models
    PolicyInfo,
    IncidentInfo,
    InvolvedParties,
    AssetDetails,
    MandatoryOthers,
    ExtractedRecord,
    RoutingDecision,
)

__all__ = [
    # Functions
    "extract_fields",
    "detect_claim_type",
    "render_decision",
    "parse_decision",
    # Classes
    "FieldExtractor",
    # Enums
    "AssetType",
    "ClaimType",
    "Route",
    # Models
    "PolicyInfo",
    "IncidentInfo",
    "InvolvedParties",
    "AssetDetails",
    "MandatoryOthers",
    "ExtractedRecord",
    "RoutingDecision",
]

"""
Canonical claim schema for FNOL documents.

Defines the extracted record (five fixed sections) and the routing decision
built from it. All models are frozen: a record is created once per document
and never mutated afterwards.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================================================
# Enums
# ============================================================================


class AssetType(str, Enum):
    """Kind of insured asset involved in the loss."""
    VEHICLE = "Vehicle"
    UNKNOWN = "Unknown"


class ClaimType(str, Enum):
    """Claim classification derived from document keywords."""
    INJURY = "Injury"
    PROPERTY_DAMAGE = "Property Damage"
    UNKNOWN = "Unknown"


class Route(str, Enum):
    """Downstream queue a claim is assigned to."""
    MANUAL_REVIEW = "Manual Review"
    INVESTIGATION_FLAG = "Investigation Flag"
    SPECIALIST_QUEUE = "Specialist Queue"
    FAST_TRACK = "Fast-track"


# ============================================================================
# Record Sections
# ============================================================================


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class PolicyInfo(_Section):
    """Policy identification."""
    policy_number: Optional[str] = Field(None, description="Policy number (letters, digits, hyphen)")
    policyholder_name: Optional[str] = Field(None, description="Name of the insured")
    effective_dates: Optional[str] = Field(None, description="Policy effective date, MM/DD/YYYY")


class IncidentInfo(_Section):
    """When, where and how the loss happened."""
    date: Optional[str] = Field(None, description="Date of loss, MM/DD/YYYY")
    time: Optional[str] = Field(None, description="Time of loss, e.g. '3:45 PM'")
    location: Optional[str] = Field(None, description="Location of loss")
    description: Optional[str] = Field(None, description="Accident narrative, whitespace-normalized")


class InvolvedParties(_Section):
    """People involved in the loss. Only the claimant is modeled."""
    claimant: Optional[str] = Field(None, description="Driver's name")
    third_parties: Tuple[str, ...] = Field(default=(), description="Reserved, always empty")
    contact_details: Optional[str] = Field(None, description="Reserved, always null")


class AssetDetails(_Section):
    """Details about the insured asset."""
    asset_type: AssetType = Field(default=AssetType.UNKNOWN, description="Vehicle when a VIN is present")
    asset_id_vin: Optional[str] = Field(None, description="Vehicle identification number")
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[str] = Field(None, description="Four digit model year")
    estimated_damage: Optional[float] = Field(None, description="Estimate amount parsed from currency text")

    @field_validator("year")
    @classmethod
    def validate_year(cls, v: Optional[str]) -> Optional[str]:
        """Ensure year is exactly four digits if provided."""
        if v is not None and not (len(v) == 4 and v.isascii() and v.isdigit()):
            raise ValueError("Year must be exactly 4 digits")
        return v


class MandatoryOthers(_Section):
    """Administrative metadata."""
    claim_type: ClaimType = Field(default=ClaimType.UNKNOWN, description="Keyword-derived claim type")
    attachments: Tuple[str, ...] = Field(default=(), description="Reserved, always empty")
    initial_estimate: Optional[float] = Field(None, description="Reserved, always null")


# ============================================================================
# Main Records
# ============================================================================


class ExtractedRecord(_Section):
    """
    Structured fields extracted from one FNOL document.

    Every field key is always present; a field that was not found is None.
    Section order is the rendering order.
    """
    policy_info: PolicyInfo = Field(default_factory=PolicyInfo)
    incident_info: IncidentInfo = Field(default_factory=IncidentInfo)
    involved_parties: InvolvedParties = Field(default_factory=InvolvedParties)
    asset_details: AssetDetails = Field(default_factory=AssetDetails)
    mandatory_others: MandatoryOthers = Field(default_factory=MandatoryOthers)


class RoutingDecision(BaseModel):
    """
    Outcome of routing one claim.

    Serialized with camelCase keys (``extractedFields``, ``missingFields``,
    ``recommendedRoute``, ``reasoning``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    extracted_fields: ExtractedRecord = Field(alias="extractedFields")
    missing_fields: Tuple[str, ...] = Field(default=(), alias="missingFields")
    recommended_route: Route = Field(alias="recommendedRoute")
    reasoning: str = Field(description="Human-readable justification for the route")

    @field_validator("reasoning")
    @classmethod
    def validate_reasoning(cls, v: str) -> str:
        """Ensure reasoning is not empty."""
        if not v or not v.strip():
            raise ValueError("reasoning cannot be empty")
        return v

    def to_dict(self) -> dict:
        """Convert to an insertion-ordered, JSON-compatible dictionary."""
        return self.model_dump(mode="json", by_alias=True)

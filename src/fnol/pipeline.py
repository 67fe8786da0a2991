"""
Main processing pipeline for FNOL documents.

Public API: process_text(text) -> RoutingDecision
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from ..routing.router import ClaimRouter
from ..utils.config import Settings, get_settings
from .extractor import FieldExtractor
from .schema import RoutingDecision

logger = logging.getLogger(__name__)


class ClaimPipeline:
    """
    Extraction and routing pipeline for FNOL documents.

    Runs the field extractor, then the claim router. Holds no per-document
    state, so one instance can process any number of documents.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the pipeline.

        Args:
            settings: Application settings (uses cached settings if None)
        """
        self.settings = settings or get_settings()
        self.extractor = FieldExtractor()
        self.router = ClaimRouter(self.settings)

    def process(self, text: str) -> RoutingDecision:
        """
        Extract fields from text and route the claim.

        Args:
            text: Full FNOL document text

        Returns:
            RoutingDecision for the document
        """
        start_time = datetime.now()
        logger.info(f"Starting claim processing: {len(text)} chars text")

        # Step 1: Extract structured fields from text
        record = self.extractor.extract(text)
        logger.debug(
            f"Extraction complete: "
            f"claim_type={record.mandatory_others.claim_type.value}, "
            f"asset_type={record.asset_details.asset_type.value}"
        )

        # Step 2: Route
        decision = self.router.route(record)

        total_time_ms = (datetime.now() - start_time).total_seconds() * 1000
        logger.info(
            f"Claim processing complete: "
            f"route={decision.recommended_route.value}, "
            f"missing={len(decision.missing_fields)}, "
            f"total_time={total_time_ms:.1f}ms"
        )

        return decision

    def process_file(self, path: Union[str, Path]) -> RoutingDecision:
        """
        Read a document with the platform default encoding and process it.

        Raises:
            OSError: If the file cannot be read
        """
        text = Path(path).read_text()
        return self.process(text)


def process_text(text: str, settings: Optional[Settings] = None) -> RoutingDecision:
    """
    Process FNOL text into a routing decision (convenience function).

    Example:
        ```python
        from src.fnol.pipeline import process_text

        decision = process_text(open("fixtures/fnol_fast_track.txt").read())
        print(decision.recommended_route.value)
        ```
    """
    return ClaimPipeline(settings).process(text)


def process_file(path: Union[str, Path], settings: Optional[Settings] = None) -> RoutingDecision:
    """Process an FNOL document on disk (convenience function)."""
    return ClaimPipeline(settings).process_file(path)

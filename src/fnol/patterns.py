"""
Labeled patterns for FNOL field extraction.

Patterns have the shape ``LABEL:\\s*(capture)`` and is compiled
case-insensitively in ASCII mode (``\\d`` and ``\\s`` match ASCII only).
Searches run over the whole document and never consume
text, so the order of labels in the source does not matter.
"""

import math
import re
from typing import Dict, Optional

FLAGS = re.IGNORECASE | re.ASCII

# Next line that starts with an upper-case letter (a section header), or end of text.
# The header test is case-sensitive even though the rest of the pattern is not.
_NEXT_HEADER = r"(?=(?:\r\n|[\r\n])+(?-i:[A-Z])|\Z)"

FIELD_PATTERNS: Dict[str, re.Pattern[str]] = {
    # Policy info
    "policy_number": re.compile(r"POLICY NUMBER:\s*([A-Za-z0-9-]+)", FLAGS),
    "policyholder_name": re.compile(r"NAME OF INSURED:\s*(.+)", FLAGS),
    "effective_dates": re.compile(r"EFFECTIVE DATE:\s*(\d{2}/\d{2}/\d{4})", FLAGS),
    # Incident info
    "date": re.compile(r"DATE OF LOSS:\s*(\d{2}/\d{2}/\d{4})", FLAGS),
    "time": re.compile(r"TIME:\s*(\d{1,2}:\d{2}\s?(?:AM|PM)?)", FLAGS),
    "location": re.compile(r"LOCATION OF LOSS:\s*(.+)", FLAGS),
    # Only spaces or tabs after the label: a header on the next line ends an empty description
    "description": re.compile(r"DESCRIPTION OF ACCIDENT:[ \t]*([\s\S]*?)" + _NEXT_HEADER, FLAGS),
    # Involved parties
    "claimant": re.compile(r"DRIVER'S NAME:\s*(.+)", FLAGS),
    # Asset details
    "asset_id_vin": re.compile(r"V\.I\.N\.:\s*([A-Za-z0-9]+)", FLAGS),
    "make": re.compile(r"MAKE:\s*([A-Za-z0-9]+)", FLAGS),
    "model": re.compile(r"MODEL:\s*([A-Za-z0-9-]+)", FLAGS),
    "year": re.compile(r"YEAR:\s*(\d{4})(?!\d)", FLAGS),
    "estimated_damage": re.compile(r"ESTIMATE AMOUNT:\s*\$?([\d,]+)", FLAGS),
}

WHITESPACE_RE = re.compile(r"\s+", re.ASCII)

INJURY_KEYWORD = "INJURY"
PROPERTY_DAMAGE_KEYWORDS = ("COLLISION", "DAMAGE")


def match_first(pattern: re.Pattern[str], text: str) -> Optional[str]:
    """Return the trimmed first capture group of the first match, or None."""
    m = pattern.search(text)
    if m is None:
        return None
    return m.group(1).strip()


def normalize_whitespace(s: str) -> str:
    """Collapse whitespace runs (newlines included) to single spaces and trim."""
    return WHITESPACE_RE.sub(" ", s).strip()


def parse_amount(raw: Optional[str]) -> Optional[float]:
    """Parse a currency amount like ``25,000`` into a float, None if unparsable or not finite."""
    if raw is None:
        return None
    try:
        value = float(raw.replace(",", ""))
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value

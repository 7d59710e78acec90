"""
Bulk domain import from the dashboard CSV upload.

Format: one domain per line, "name, price". The price is optional.

    example.com, 5000
    another-domain.net, 250
    just-parked.org,

Lines that don't look like a domain are skipped rather than rejected so a
header row or blank lines don't fail the whole upload.
"""
import re
import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from parking.core.errors import InvalidDomainNameError
from parking.core.host import is_plausible_domain_name, normalize_domain_name

logger = logging.getLogger(__name__)

LINE_SPLIT = re.compile(r"\r\n|\n")


@dataclass
class CsvDomainRow:
    name: str
    list_price: Optional[Decimal]


@dataclass
class CsvParseResult:
    rows: List[CsvDomainRow] = field(default_factory=list)
    skipped_lines: int = 0  # blank, malformed, or repeated within the file


def parse_price(raw: Optional[str]) -> Optional[Decimal]:
    """Parse an optional price cell; anything non-numeric or negative is None."""
    if raw is None:
        return None
    raw = raw.strip().lstrip("$").replace(",", "")
    if not raw:
        return None
    try:
        price = Decimal(raw)
    except InvalidOperation:
        return None
    if not price.is_finite() or price < 0:
        return None
    return price.quantize(Decimal("0.01"))


def parse_domain_csv(text: str) -> CsvParseResult:
    """
    Parse uploaded CSV text into domain rows.

    A line is kept when its first cell, trimmed, is longer than 3 characters,
    contains a dot and passes host name validation. The first occurrence of a
    name wins.
    """
    result = CsvParseResult()
    seen = set()

    for line in LINE_SPLIT.split(text or ""):
        if not line.strip():
            continue

        cells = line.split(",")
        raw_name = cells[0].strip()
        raw_price = cells[1] if len(cells) > 1 else None

        if not is_plausible_domain_name(raw_name):
            result.skipped_lines += 1
            continue

        try:
            name = normalize_domain_name(raw_name)
        except InvalidDomainNameError as e:
            logger.debug(f"Skipping CSV line: {e.reason}")
            result.skipped_lines += 1
            continue

        if name in seen:
            result.skipped_lines += 1
            continue

        seen.add(name)
        result.rows.append(CsvDomainRow(name=name, list_price=parse_price(raw_price)))

    return result

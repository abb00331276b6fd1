"""CSV export of a document checklist.

Produces the same file the intake UI downloads: a ``Section,Item,Status,Reason``
header, one row per item in section order, every field double-quoted.
"""

import csv
import io
import re
import time
from typing import Optional

from mortgage_checklist.config import settings
from mortgage_checklist.models.domain.checklist import RecommendationSet

CSV_HEADER = ("Section", "Item", "Status", "Reason")

# Characters allowed in the download name; the rest are dropped
_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def export_to_csv(recommendations: RecommendationSet) -> str:
    """
    Flatten a checklist into CSV text.

    Args:
        recommendations: The checklist to export

    Returns:
        CSV text with ``\\n`` line endings and no trailing newline
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)

    for category, items in recommendations.sections():
        for item in items:
            writer.writerow((category.label, item.name, item.status.label, item.reason))

    return buffer.getvalue().rstrip("\n")


def csv_filename(application_number: Optional[str], now: Optional[float] = None) -> str:
    """
    Download name for an exported checklist.

    Characters outside ``[A-Za-z0-9._-]`` are removed from the application
    number so it is safe inside a Content-Disposition header.

    Args:
        application_number: Application number, if the application has one
        now: Epoch seconds used when there is no application number (defaults to now)

    Returns:
        ``doc-checklist-<application number>.csv``, or a millisecond timestamp in
        place of a missing (or fully stripped) number
    """
    suffix = _UNSAFE_FILENAME_CHARS.sub("", application_number or "")
    if not suffix:
        suffix = str(int((time.time() if now is None else now) * 1000))
    return f"{settings.CSV_FILENAME_PREFIX}-{suffix}.csv"

"""CSV exchange format for overrides.

Header ``ContentType,Property,OverrideType,Language,Value``. Fields holding
a comma, a quote or a line break are quoted with inner quotes doubled.
"""

import csv
import io
from typing import Iterable, List

from modules.localization.overrides.models import OverrideRow

CSV_HEADER = ["ContentType", "Property", "OverrideType", "Language", "Value"]


def write_csv(rows: Iterable[OverrideRow]) -> str:
    """Serialize rows, header first, with CRLF line endings."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
    writer.writerow(CSV_HEADER)
    for row in rows:
        writer.writerow(
            [row.content_type, row.property, row.override_type, row.language, row.value]
        )
    return buffer.getvalue()


def read_csv(text: str) -> List[OverrideRow]:
    """Parse CSV text; the first row is the header and is skipped.

    Rows with fewer than five fields are ignored.
    """
    reader = csv.reader(io.StringIO(text, newline=""))
    next(reader, None)
    return [
        OverrideRow(
            content_type=fields[0],
            property=fields[1],
            override_type=fields[2],
            language=fields[3],
            value=fields[4],
        )
        for fields in reader
        if len(fields) >= 5
    ]

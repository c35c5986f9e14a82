"""
CSV export of participant records.

The server-side export produces the same table as the dashboard's in-browser
export: one column per field name seen in any record (first-seen order), one
row per record.
"""
import csv
import io
import json
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional


def render_number(value: float) -> str:
    """
    Writes a float the way the dashboard's browser export does.

    Integral values lose the ``.0``; exponent notation is only used below
    1e-6 or from 1e21 on, written as ``1e-7`` / ``1e+21``.
    """
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    exp = int(exponent)
    if -7 < exp < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"


def render_cell(value: Any) -> str:
    """Renders a single value as CSV cell text, before quoting."""
    if value is None:
        return ""
    # bool before int/float: bool is a subclass of int.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return render_number(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    return str(value)


def collect_headers(records: Iterable[Mapping[str, Any]]) -> List[str]:
    headers: Dict[str, None] = {}
    for record in records:
        for key in record:
            headers.setdefault(key, None)
    return list(headers)


def records_to_csv(
    records: List[Mapping[str, Any]], headers: Optional[List[str]] = None
) -> str:
    if headers is None:
        headers = collect_headers(records)

    if not headers:
        return ""

    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(headers)
    for record in records:
        writer.writerow([render_cell(record.get(header)) for header in headers])
    return output.getvalue()


def export_filename(today: Optional[date] = None) -> str:
    today = today or datetime.now(timezone.utc).date()
    return f"auction_experiment_data_{today.isoformat()}.csv"

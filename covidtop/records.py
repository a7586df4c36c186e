"""Country records loaded from the country-wise COVID-19 CSV export."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

# Column positions once empty fields have been collapsed away.
_COUNTRY = 0
_CASES = 1
_DEATHS = 2
_RECOVERED = 3
_DEATHS_PER_100_CASES = 8
_RECOVERED_PER_100_CASES = 9
_DEATHS_PER_100_RECOVERED = 10
_WHO_REGION = 14

_SELECTED = " (Selecionado)"


class SortKey(IntEnum):
    """Which count a ranking is ordered by."""

    CASES = 1
    DEATHS = 2
    RECOVERED = 3


@dataclass(frozen=True)
class CountryRecord:
    """COVID-19 figures for one country or region."""

    country: Optional[str] = None
    cases: int = 0
    deaths: int = 0
    recovered: int = 0
    deaths_per_100_cases: float = 0.0
    recovered_per_100_cases: float = 0.0
    deaths_per_100_recovered: float = 0.0
    who_region: Optional[str] = None


def _leading_int(text: Optional[str]) -> int:
    if text is None:
        return 0
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: Optional[str]) -> float:
    if text is None:
        return 0.0
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _field(tokens: list[str], index: int) -> Optional[str]:
    return tokens[index] if index < len(tokens) else None


def parse_line(line: str) -> CountryRecord:
    """Parse one data line; empty fields are skipped, as a tokenizer on ',' would."""
    tokens = [token for token in line.split(",") if token]

    region = _field(tokens, _WHO_REGION)
    if region is not None and region.endswith("\n"):
        region = region[:-1]

    return CountryRecord(
        country=_field(tokens, _COUNTRY),
        cases=_leading_int(_field(tokens, _CASES)),
        deaths=_leading_int(_field(tokens, _DEATHS)),
        recovered=_leading_int(_field(tokens, _RECOVERED)),
        deaths_per_100_cases=_leading_float(_field(tokens, _DEATHS_PER_100_CASES)),
        recovered_per_100_cases=_leading_float(
            _field(tokens, _RECOVERED_PER_100_CASES)
        ),
        deaths_per_100_recovered=_leading_float(
            _field(tokens, _DEATHS_PER_100_RECOVERED)
        ),
        who_region=region,
    )


def load_csv(path: Union[str, os.PathLike]) -> list[CountryRecord]:
    """Read every record after the header line of a CSV file.

    Raises OSError when the file cannot be opened and ValueError when it
    has no header line.
    """
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        if not handle.readline():
            raise ValueError(f"{os.fspath(path)}: missing header line")
        return [parse_line(line) for line in handle]


def _text(value: Optional[str]) -> str:
    return "(null)" if value is None else value


def format_record(record: CountryRecord, key: Union[SortKey, int]) -> str:
    """Render a record as a block of text, marking the selected count."""
    counts = (
        ("Casos", record.cases, SortKey.CASES),
        ("Mortes", record.deaths, SortKey.DEATHS),
        ("Recuperados", record.recovered, SortKey.RECOVERED),
    )
    lines = ["", f"Pais/Regiao: {_text(record.country)}"]
    for label, value, candidate in counts:
        suffix = _SELECTED if key == candidate else ""
        lines.append(f"{label}: {value}{suffix}")
    lines.extend(
        [
            f"Mortes por 100 casos: {record.deaths_per_100_cases:.2f}%",
            f"Recuperados por 100 casos: {record.recovered_per_100_cases:.2f}%",
            f"Regiao OMS: {_text(record.who_region)}",
        ]
    )
    return "\n".join(lines) + "\n"
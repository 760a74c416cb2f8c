"""Indirect economic impacts from the ECAM service and parsing of its replies."""

from __future__ import annotations

import ssl
import urllib.request
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime

_FWLINK_URL = "https://www.hec.usace.army.mil/fwlink/?linkid=2&type=string"

_SECTORS: dict[str, str] = {
    "AGR": "Agriculture",
    "LVS": "Livestock and ranching",
    "FRS": "Forestry",
    "FSH": "Fishing",
    "CRU": "Oil gas and coal Extraction",
    "MIN": "Minerals mining",
    "PWR": "Electric power generation and supply",
    "GAS": "Natural gas distribution",
    "WTR": "Water sewage and other systems",
    "CON": "Construction",
    "FOD": "Food processing",
    "BEV": "Beverages",
    "TBC": "Tobacco",
    "TEX": "Textiles and wearing apparel",
    "WOD": "Wood manufacturing",
    "PPP": "Paper printing and publishing",
    "CHM": "Chemical processing and refining",
    "MAN": "General manufacturing",
    "ELE": "Electronic instruments",
    "CAR": "Transportation equipment manufacturing",
    "FRN": "Furniture manufacturing",
    "COM": "Post and communications",
    "TRN": "Transportation services",
    "TRD": "Wholesale and retail distribution",
    "INF": "Information processing and publication",
    "FIN": "Financial services and insurance",
    "REC": "Recreation activities",
    "SER": "All other services",
    "ORG": "Non-government associations",
    "GOV": "State and federal government",
    "RWJ": "Rest of world adjustment",
    "IVJ": "Inventory valuation adjustment",
    "DWE": "Owner occupied dwellings",
    "TOTAL": "Total",
}


class EcamError(Exception):
    """The ECAM service reply could not be used."""


@dataclass
class CapitalAndLabor:
    """Capital value and labor counted for an area."""

    capital: float = 0.0
    labor: float = 0.0


@dataclass
class EcamSectorResultOutput:
    """One sector's benchmark and change after a shock."""

    sector: str = ""
    benchmark: float = 0.0
    percent_change: float = 0.0
    change: float = 0.0


@dataclass
class EcamResult:
    """Production and employment impacts by sector."""

    production_impacts: list[EcamSectorResultOutput] = field(default_factory=list)
    employment_impacts: list[EcamSectorResultOutput] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [
            "Production",
            "Sector, Previous Output (millions USD), Post Shock Output (millions USD), "
            "Output Change (millions USD)",
        ]
        lines.extend(
            f"{r.sector}, {r.benchmark:f}, {r.benchmark + r.change:f}, {r.change:f}"
            for r in self.production_impacts
        )
        lines.append("")
        lines.append("Labor")
        lines.append(
            "Sector, Previous Employment, Post Shock Employment, Employment Change"
        )
        lines.extend(
            f"{r.sector}, {r.benchmark:f}, {r.percent_change:f}, {r.change:f}"
            for r in self.employment_impacts
        )
        return "\n".join(lines) + "\n"


def _scan_lines(text: str) -> list[str]:
    """Split text into lines the way a line scanner does, dropping trailing CRs."""
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _fetch(url: str) -> str:
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    with urllib.request.urlopen(url, context=context) as response:
        return response.read().decode("utf-8", errors="replace")


def _timestamp(moment: datetime) -> str:
    hour = moment.hour % 12 or 12
    day = moment.day
    month = moment.month
    return (
        f"{day}{month:02d}{day}{month}{month}{month:02d}:"
        f"{hour:02d}{moment.minute:02d}:{moment.second:02d}"
    )


def compute_ecam(
    state_fips: str, county_fips: str, capital_loss: float, labor_loss: float
) -> EcamResult:
    """Ask the ECAM service for the impacts of capital and labor loss ratios in a county."""
    root_lines = _scan_lines(_fetch(_FWLINK_URL))
    root = root_lines[0] if root_lines else ""
    query = (
        root
        + "?SIM=Simulation"
        + "&ALT=Alternative"
        + "&State=" + state_fips
        + "&CountyFIPS=" + county_fips
        + f"&LLR={1 - labor_loss:f}"
        + f"&CLR={1 - capital_loss:f}"
        + "&State_Name=ST"
        + "&County_Name=CN_ST"
        + "&Time=" + _timestamp(datetime.now())
    )
    return parse_ecam_result(_scan_lines(_fetch(query)))


def _read_section(lines: Iterator[str], name: str) -> list[EcamSectorResultOutput]:
    header = next(lines, "")
    if header != f"BEGIN_{name}_LF":
        raise EcamError(f"Expected BEGIN_{name}_LF got {header}")
    section = []
    for line in lines:
        if f"END_{name}_LF" in line:
            break
        section.append(parse_sector_result(line))
    return section


def parse_ecam_result(lines: Iterable[str]) -> EcamResult:
    """Parse the lines of an ECAM reply into production and employment impacts."""
    remaining = iter(lines)
    exit_line = ""
    for line in remaining:
        if "Exit_Code" in line:
            exit_line = line
            break
    parts = exit_line.split("|")
    if len(parts) < 2:
        body = "\n".join(remaining)
        raise EcamError(
            f"ECAM server something we couldnt parse {exit_line} with body {body}"
        )
    code = parts[1]
    if code != "0":
        raise EcamError("ECAM server returned Error Code " + code)
    production = _read_section(remaining, "OUTPUT")
    employment = _read_section(remaining, "EMPLOYMENT")
    return EcamResult(production_impacts=production, employment_impacts=employment)


def _parse_float(text: str, what: str) -> float:
    if text != text.strip() or "_" in text or not text:
        raise EcamError(f"could not parse {what} {text}")
    try:
        return float(text)
    except ValueError as exc:
        raise EcamError(f"could not parse {what} {text}") from exc


def parse_sector_result(line: str) -> EcamSectorResultOutput:
    """Parse one ``SECTOR|benchmark|percent change|change`` line."""
    values = line.split("|")
    sector = sector_name(values[0])
    if len(values) < 4:
        raise EcamError("did not find 4 values in the sector line for " + sector)
    return EcamSectorResultOutput(
        sector=sector,
        benchmark=_parse_float(values[1], "benchmark"),
        percent_change=_parse_float(values[2], "percent change"),
        change=_parse_float(values[3], "change"),
    )


def sector_name(abbreviation: str) -> str:
    """Return the full sector name for an ECAM abbreviation, in any case."""
    try:
        return _SECTORS[abbreviation.upper()]
    except KeyError:
        raise EcamError("Could not parse " + abbreviation) from None
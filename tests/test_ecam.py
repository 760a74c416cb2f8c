import io
import urllib.parse
from unittest import mock

import pytest

from floodconsequences.ecam import (
    CapitalAndLabor,
    EcamError,
    EcamResult,
    EcamSectorResultOutput,
    compute_ecam,
    parse_ecam_result,
    parse_sector_result,
    sector_name,
)

SAMPLE = [
    "some preamble",
    "Exit_Code|0",
    "BEGIN_OUTPUT_LF",
    "AGR|100.5|-2.5|-3.25",
    "TOTAL|1000|-1|-10",
    "END_OUTPUT_LF",
    "BEGIN_EMPLOYMENT_LF",
    "con|42|-0.5|-7",
    "END_EMPLOYMENT_LF",
]


def test_sector_name_known_and_case_insensitive():
    assert sector_name("AGR") == "Agriculture"
    assert sector_name("total") == "Total"
    assert sector_name("Pwr") == "Electric power generation and supply"


def test_sector_name_unknown_raises():
    with pytest.raises(EcamError, match="Could not parse XYZ"):
        sector_name("XYZ")


def test_parse_sector_result_values():
    result = parse_sector_result("FIN|12.5|3.5|0.25")
    assert result == EcamSectorResultOutput(
        sector="Financial services and insurance",
        benchmark=12.5,
        percent_change=3.5,
        change=0.25,
    )


def test_parse_sector_result_too_few_values():
    with pytest.raises(EcamError, match="did not find 4 values"):
        parse_sector_result("FIN|12.5|3.5")


def test_parse_sector_result_bad_number():
    with pytest.raises(EcamError, match="could not parse percent change abc"):
        parse_sector_result("FIN|12.5|abc|1")


def test_parse_ecam_result_sections():
    result = parse_ecam_result(SAMPLE)
    assert [r.sector for r in result.production_impacts] == ["Agriculture", "Total"]
    assert result.production_impacts[0].benchmark == 100.5
    assert result.production_impacts[0].change == -3.25
    assert [r.sector for r in result.employment_impacts] == ["Construction"]
    assert result.employment_impacts[0].percent_change == -0.5


def test_parse_ecam_result_error_code():
    with pytest.raises(EcamError, match="ECAM server returned Error Code 3"):
        parse_ecam_result(["Exit_Code|3"])


def test_parse_ecam_result_no_exit_code():
    with pytest.raises(EcamError, match="couldnt parse"):
        parse_ecam_result(["nothing here", "at all"])


def test_parse_ecam_result_missing_output_header():
    with pytest.raises(EcamError, match="Expected BEGIN_OUTPUT_LF got WRONG"):
        parse_ecam_result(["Exit_Code|0", "WRONG"])


def test_parse_ecam_result_missing_employment_header():
    lines = ["Exit_Code|0", "BEGIN_OUTPUT_LF", "AGR|1|2|3", "END_OUTPUT_LF"]
    with pytest.raises(EcamError, match="Expected BEGIN_EMPLOYMENT_LF"):
        parse_ecam_result(lines)


def test_ecam_result_report():
    result = parse_ecam_result(SAMPLE)
    report = str(result)
    assert report.startswith("Production\n")
    assert "Sector, Previous Employment, Post Shock Employment, Employment Change" in report
    assert sum(line.startswith("Agriculture, ") for line in report.splitlines()) == 1
    assert sum(line.startswith("Construction, ") for line in report.splitlines()) == 1


def test_empty_ecam_result_report_has_both_sections():
    report = str(EcamResult())
    assert "Production" in report
    assert "Labor" in report


def test_capital_and_labor_defaults():
    totals = CapitalAndLabor()
    totals.capital += 5.0
    assert totals == CapitalAndLabor(capital=5.0, labor=0.0)


def test_compute_ecam_with_mocked_service():
    calls = []
    body = "\r\n".join(SAMPLE) + "\r\n"

    def fake_urlopen(url, **kwargs):
        calls.append(url)
        if len(calls) == 1:
            return io.BytesIO(b"http://ecam.example.com/run\r\nignored\r\n")
        return io.BytesIO(body.encode())

    with mock.patch("urllib.request.urlopen", side_effect=fake_urlopen):
        result = compute_ecam("36", "049", 0.10163, 0.52977)

    assert len(calls) == 2
    assert calls[1].startswith("http://ecam.example.com/run?SIM=Simulation")
    query = urllib.parse.parse_qs(urllib.parse.urlsplit(calls[1]).query)
    assert query["State"] == ["36"]
    assert query["CountyFIPS"] == ["049"]
    assert float(query["LLR"][0]) == pytest.approx(1 - 0.52977, abs=1e-6)
    assert float(query["CLR"][0]) == pytest.approx(1 - 0.10163, abs=1e-6)
    assert [r.sector for r in result.production_impacts] == ["Agriculture", "Total"]
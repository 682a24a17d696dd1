"""
Tests for acquisition accounting — sources/report.py
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sources.report import AcquisitionReport, ProbeAttempt


class TestProbeAttempt:
    def test_to_dict_rounds_elapsed(self):
        d = ProbeAttempt("boe", "failed", elapsed_seconds=0.123456).to_dict()
        assert d["elapsed_seconds"] == 0.123
        assert "detail" not in d

    def test_to_dict_includes_detail(self):
        d = ProbeAttempt("boe", "failed", detail="HTTP 500").to_dict()
        assert d["detail"] == "HTTP 500"


class TestAcquisitionReport:
    def test_empty(self):
        report = AcquisitionReport()
        assert not report.succeeded
        assert report.failed_probes == []
        assert report.console_summary() == "0 attempted | no data"

    def test_console_summary(self):
        report = AcquisitionReport()
        report.record(ProbeAttempt("datos.gob.es", "failed"))
        report.record(ProbeAttempt("ministerio-hacienda", "ok", simulated=True))
        assert report.console_summary() == (
            "2 attempted | 1 failed (datos.gob.es) | source: ministerio-hacienda (simulated)"
        )

    def test_console_summary_fallback(self):
        report = AcquisitionReport(fell_back=True)
        report.record(ProbeAttempt("local-file", "ok", fallback=True))
        assert "local fallback used" in report.console_summary()

    def test_to_dict(self):
        report = AcquisitionReport()
        report.record(ProbeAttempt("boe", "ok"))
        d = report.to_dict()
        assert d["source"] == "boe"
        assert d["simulated"] is False
        assert d["attempts"][0]["probe"] == "boe"

"""
Per-run accounting of data source attempts.

Provides:
  - ProbeAttempt: one probe call, its outcome and how long it took.
  - AcquisitionReport: every attempt of one acquisition run, plus the name of
    the source that produced the data (if any).

Outcomes (for ProbeAttempt.outcome):
    ok      — the probe returned a Distribution Record
    failed  — the probe returned nothing (transport error, bad status,
              unparseable body, missing file)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ProbeAttempt:
    """One call to one probe."""

    probe: str
    outcome: str              # ok | failed
    elapsed_seconds: float = 0.0
    simulated: bool = False
    fallback: bool = False
    detail: str = ""

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "probe": self.probe,
            "outcome": self.outcome,
            "elapsed_seconds": round(self.elapsed_seconds, 3),
            "simulated": self.simulated,
            "fallback": self.fallback,
        }
        if self.detail:
            d["detail"] = self.detail
        return d


@dataclass
class AcquisitionReport:
    """Structured summary of one acquisition run."""

    attempts: list[ProbeAttempt] = field(default_factory=list)
    source: str | None = None
    simulated: bool = False
    fell_back: bool = False

    def record(self, attempt: ProbeAttempt) -> None:
        self.attempts.append(attempt)
        if attempt.outcome == "ok":
            self.source = attempt.probe
            self.simulated = attempt.simulated

    @property
    def succeeded(self) -> bool:
        return self.source is not None

    @property
    def failed_probes(self) -> list[str]:
        return [a.probe for a in self.attempts if a.outcome == "failed"]

    def console_summary(self) -> str:
        """One-line summary suitable for the terminal."""
        parts = [f"{len(self.attempts)} attempted"]
        if self.failed_probes:
            parts.append(f"{len(self.failed_probes)} failed ({', '.join(self.failed_probes)})")
        if self.fell_back:
            parts.append("local fallback used")
        if self.source:
            label = f"source: {self.source}"
            if self.simulated:
                label += " (simulated)"
            parts.append(label)
        else:
            parts.append("no data")
        return " | ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "simulated": self.simulated,
            "fell_back": self.fell_back,
            "attempts": [a.to_dict() for a in self.attempts],
        }

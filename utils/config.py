"""Configuration management utilities for TaxMap Spain.

Provides:
- Module constants: data source endpoints, chart palette and page element
  identifiers
- ``AppConfig``: runtime settings read from environment variables
"""

from pathlib import Path
from typing import Optional
import os as _os


# ── Data source endpoints ────────────────────────────────────────────────────
# Remote endpoints are fixed; the two Hacienda/Gobierto URLs are kept only as
# references for the simulated sources that stand in for them.

DATOS_GOB_ES_URL = "https://datos.gob.es/apidata/catalog/dataset?q=presupuestos"
HACIENDA_STATS_URL = (
    "https://sepg.pap.hacienda.gob.es/sitios/sepg/es-ES/Presupuestos/"
    "DocumentacionEstadisticas/Estadisticas/Paginas/Estadisticas.aspx"
)
BOE_SEARCH_URL = "https://www.boe.es/buscar/api?q=presupuestos&num=10"
GOBIERTO_URL = "https://datos.gob.es/aplicaciones/gobierno-presupuestos-municipales"

# Bundled fallback data, shipped inside the sources package.
LOCAL_DATA_PATH = Path(__file__).resolve().parent.parent / "sources" / "data" / "presupuesto.json"

# ── Page element identifiers ─────────────────────────────────────────────────

CHART_ELEMENT_ID = "taxChart"
INFO_ELEMENT_ID = "dataInfo"

# ── Chart styling ────────────────────────────────────────────────────────────

CHART_PALETTE = ("#FF6384", "#36A2EB", "#FFCE56", "#4BC0C0", "#9966FF")
CHART_DATASET_LABEL = "Tax Distribution"
CHART_HOVER_OFFSET = 10

UNAVAILABLE_MESSAGE = "Unable to load data. Please try again later."

PROBE_PROFILES = ("full", "local-only")


def _parse_timeout(raw: str) -> Optional[float]:
    raw = raw.strip()
    if not raw:
        return None
    value = float(raw)
    return value if value > 0 else None


class AppConfig:
    """Application-level configuration loaded from environment variables.

    All env vars have sensible defaults so the application works out of the
    box without any configuration.

    Environment variables:
        APP_HOST: Web server bind address (default: 127.0.0.1)
        APP_PORT: Web server port (default: 8000)
        APP_LOG_FORMAT: Logging format — "text" or "json" (default: text)
        TAXMAP_PROBE_PROFILE: Source chain to use — "full" or "local-only"
            (default: full)
        TAXMAP_LOCAL_DATA: Path to the fallback JSON file
            (default: sources/data/presupuesto.json)
        TAXMAP_HTTP_TIMEOUT: Per-request timeout in seconds; empty or 0
            leaves the transport default in place (default: unset)
    """

    def __init__(self) -> None:
        self.api_host = _os.getenv("APP_HOST", "127.0.0.1")
        self.api_port = int(_os.getenv("APP_PORT", "8000"))
        self.log_format = _os.getenv("APP_LOG_FORMAT", "text")
        self.probe_profile = _os.getenv("TAXMAP_PROBE_PROFILE", "full")
        if self.probe_profile not in PROBE_PROFILES:
            raise ValueError(
                f"Unknown TAXMAP_PROBE_PROFILE {self.probe_profile!r}; "
                f"expected one of {', '.join(PROBE_PROFILES)}"
            )
        self.local_data_path = Path(
            _os.getenv("TAXMAP_LOCAL_DATA", str(LOCAL_DATA_PATH))
        )
        self.http_timeout = _parse_timeout(_os.getenv("TAXMAP_HTTP_TIMEOUT", ""))

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create an AppConfig instance populated from environment variables."""
        return cls()

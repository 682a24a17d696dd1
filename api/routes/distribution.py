"""
Distribution endpoints.

Routes:
    GET /api/v1/distribution   → DistributionOut (where the data came from)
    GET /api/v1/chart-config   → the Chart.js config the page would draw

Both run the probe chain for every request.  When no source produces data,
NoDataAvailable propagates to the handler registered in create_app(), which
answers 503.
"""

import requests
from fastapi import APIRouter, Depends

from api.dependencies import get_chain, get_session
from api.models import DistributionOut, ErrorOut
from charts import build_chart_config
from sources import AcquisitionReport, ProbeChain, acquire

router = APIRouter(prefix="/api/v1", tags=["distribution"])

_NO_DATA = {503: {"model": ErrorOut, "description": "Every source failed"}}


@router.get(
    "/distribution",
    response_model=DistributionOut,
    responses=_NO_DATA,
    summary="Current tax distribution",
)
def distribution(
    chain: ProbeChain = Depends(get_chain),
    session: requests.Session = Depends(get_session),
) -> DistributionOut:
    """Run the source chain and return the first distribution obtained."""
    report = AcquisitionReport()
    record = acquire(chain, session=session, report=report)
    return DistributionOut(
        source=report.source,
        simulated=report.simulated,
        fell_back=report.fell_back,
        shares=record,
        attempts=[a.to_dict() for a in report.attempts],
    )


@router.get("/chart-config", responses=_NO_DATA, summary="Chart.js pie configuration")
def chart_config(
    chain: ProbeChain = Depends(get_chain),
    session: requests.Session = Depends(get_session),
) -> dict:
    """Return the pie chart configuration built from the current distribution."""
    record = acquire(chain, session=session)
    return build_chart_config(record)

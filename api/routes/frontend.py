"""
Frontend HTML route.

Routes:
    GET /   → index.html (pie chart, or the apology when no data is available)

Each page load runs the orchestration once against a fresh ChartPage; the
template then emits the canvas, the information area and the Chart.js call.
"""

import requests
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from api.dependencies import get_chain, get_session
from charts import ChartPage
from run_chart import run
from sources import ProbeChain

router = APIRouter(tags=["frontend"])

# Templates instance is set by create_app().
_templates: Jinja2Templates | None = None


def set_templates(t: Jinja2Templates) -> None:
    global _templates
    _templates = t


def _tmpl() -> Jinja2Templates:
    if _templates is None:
        raise RuntimeError("Templates not initialised — call set_templates() first")
    return _templates


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index(
    request: Request,
    chain: ProbeChain = Depends(get_chain),
    session: requests.Session = Depends(get_session),
) -> HTMLResponse:
    """Chart page."""
    page = ChartPage.default()
    run(page.canvas, page.info, chain=chain, session=session)
    return _tmpl().TemplateResponse(request, "index.html", page.context())

import logging

import httpx
from fastapi import Depends, FastAPI, HTTPException, Request

from taxapp.config import get_settings
from taxapp.core.federal import calculate_federal_tax
from taxapp.core.models import (
    DeductionFinderInput,
    DeductionResult,
    LocationResult,
    StateTaxInput,
    StateTaxResult,
    TaxInput,
    TaxResult,
    TaxRulesQuery,
    TaxRulesResult,
)
from taxapp.core.states import UnknownStateError, calculate_state_tax, get_state_info, list_supported_states
from taxapp.core.tax_years import TaxYearTables, UnsupportedTaxYearError, get_tax_year_tables
from taxapp.geo import LocationLookupError, detect_user_location
from taxapp.lifespan import build_application_lifespan
from taxapp.optimize import find_deductions
from taxapp.rules import list_rule_categories, search_tax_rules

logger = logging.getLogger("taxapp")


async def _announce_tax_year(_: FastAPI) -> None:
    settings = get_settings()
    logger.info(
        "Tax estimator ready; tax_year=%s build=%s@%s",
        settings.tax_year,
        settings.build_version,
        settings.build_sha,
    )


app = FastAPI(
    title="Take-home Tax Estimator",
    description="Federal income tax, FICA, state tax, deduction finder and tax-rule lookup.",
    lifespan=build_application_lifespan("estimator", startup_hook=_announce_tax_year),
)


def get_http_client(request: Request) -> httpx.AsyncClient:
    client = getattr(request.app.state, "http_client", None)
    if client is None:
        raise HTTPException(status_code=503, detail="HTTP client not initialised")
    return client


def _tables_for(year: int | None) -> TaxYearTables:
    resolved = year if year is not None else get_settings().tax_year
    try:
        return get_tax_year_tables(resolved)
    except UnsupportedTaxYearError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/health")
def health():
    settings = getattr(app.state, "settings", get_settings())
    return {
        "ok": True,
        "tax_year": settings.tax_year,
        "build": {
            "version": settings.build_version,
            "sha": settings.build_sha,
        },
    }


@app.post("/tax/federal", response_model=TaxResult)
def federal(req: TaxInput) -> TaxResult:
    return calculate_federal_tax(req, _tables_for(req.tax_year))


@app.get("/tax/states")
def states() -> dict[str, list[str]]:
    return {"states": list_supported_states()}


@app.get("/tax/states/{abbreviation}")
def state_info(abbreviation: str):
    try:
        info = get_state_info(abbreviation)
    except UnknownStateError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {
        "name": info.name,
        "abbreviation": info.abbreviation,
        "tax_type": info.tax_type.value,
        "flat_rate": info.flat_rate,
        "standard_deduction": info.standard_deduction,
        "brackets": [
            {"min": b.lower, "max": b.upper, "rate": b.rate} for b in info.brackets
        ],
        "notable_credits": list(info.notable_credits),
    }


@app.post("/tax/state", response_model=StateTaxResult)
def state(req: StateTaxInput) -> StateTaxResult:
    try:
        return calculate_state_tax(req)
    except UnknownStateError as exc:
        logger.warning("Rejected state code %r", exc.abbreviation)
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.post("/tax/deductions", response_model=DeductionResult)
def deductions(req: DeductionFinderInput) -> DeductionResult:
    return find_deductions(req, _tables_for(req.tax_year))


@app.post("/tax/rules", response_model=TaxRulesResult)
def rules(req: TaxRulesQuery) -> TaxRulesResult:
    return search_tax_rules(req)


@app.get("/tax/rules", response_model=TaxRulesResult)
def rules_by_query(query: str = "") -> TaxRulesResult:
    return search_tax_rules(TaxRulesQuery(query=query))


@app.get("/tax/rules/categories")
def rule_categories() -> dict[str, list[str]]:
    return {"categories": list_rule_categories()}


@app.get("/location", response_model=LocationResult)
async def location(client: httpx.AsyncClient = Depends(get_http_client)) -> LocationResult:
    try:
        return await detect_user_location(client)
    except LocationLookupError as exc:
        logger.warning("Geolocation failed: %s", exc.detail)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

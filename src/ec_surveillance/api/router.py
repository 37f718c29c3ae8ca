"""ec_surveillance REST endpoints.

GET /surveillance/excessive-cancellations   — names of flagged companies
GET /surveillance/well-behaved-count        — number of unflagged companies
GET /surveillance/companies/{company_name}  — verdict for one company
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.ec_common.response import ApiResponse, success_response
from src.ec_surveillance.api.dependencies import get_checker
from src.ec_surveillance.application.schemas import (
    CompanyVerdictResponse,
    ExcessiveCompaniesResponse,
    WellBehavedCountResponse,
)
from src.ec_surveillance.application.service import ExcessiveCancellationsChecker

router = APIRouter(prefix="/surveillance", tags=["surveillance"])


@router.get("/excessive-cancellations")
async def list_excessive_companies(
    request: Request,
    checker: Annotated[ExcessiveCancellationsChecker, Depends(get_checker)],
) -> ApiResponse:
    flagged = checker.companies_involved_in_excessive_cancellations()
    result = ExcessiveCompaniesResponse(companies=sorted(flagged))
    return success_response(result.model_dump(), request)


@router.get("/well-behaved-count")
async def count_well_behaved_companies(
    request: Request,
    checker: Annotated[ExcessiveCancellationsChecker, Depends(get_checker)],
) -> ApiResponse:
    result = WellBehavedCountResponse(count=checker.total_number_of_well_behaved_companies())
    return success_response(result.model_dump(), request)


@router.get("/companies/{company_name}")
async def get_company_verdict(
    company_name: str,
    request: Request,
    checker: Annotated[ExcessiveCancellationsChecker, Depends(get_checker)],
) -> ApiResponse:
    ledger = checker.ledger_for(company_name)
    result = CompanyVerdictResponse(
        company_name=company_name,
        excessive=checker.is_excessive(company_name),
        event_count=len(ledger),
    )
    return success_response(result.model_dump(), request)

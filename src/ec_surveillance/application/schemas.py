"""Pydantic schemas for surveillance API responses."""

from pydantic import BaseModel


class ExcessiveCompaniesResponse(BaseModel):
    companies: list[str]  # sorted by name


class WellBehavedCountResponse(BaseModel):
    count: int


class CompanyVerdictResponse(BaseModel):
    company_name: str
    excessive: bool
    event_count: int

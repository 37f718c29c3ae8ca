"""FastAPI dependency that hands routers the checker built at startup."""

from starlette.requests import Request

from src.ec_common.errors import InternalError
from src.ec_surveillance.application.service import ExcessiveCancellationsChecker


def get_checker(request: Request) -> ExcessiveCancellationsChecker:
    checker = getattr(request.app.state, "checker", None)
    if checker is None:
        raise InternalError("Order events have not been loaded")
    return checker

"""
Spreadsheet connectivity check.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.dependencies import get_check_sheets_access_use_case
from app.api.schemas import SheetsProbeErrorResponse, SheetsProbeResponse
from app.application.use_cases.check_sheets_access import CheckSheetsAccessUseCase
from app.infra.config.logging_config import get_logger

router = APIRouter(tags=["sheets"])
log = get_logger("api.sheets")


@router.get(
    "/test-sheets",
    response_model=SheetsProbeResponse,
    responses={500: {"model": SheetsProbeErrorResponse}},
)
async def test_sheets(
    use_case: CheckSheetsAccessUseCase = Depends(get_check_sheets_access_use_case),
):
    """Read the probe range of the spreadsheet and return its values."""
    try:
        data = await use_case.execute()
    except Exception as e:
        log.error("sheets.probe.failed", error=str(e))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=SheetsProbeErrorResponse(error=str(e)).model_dump(),
        )
    return SheetsProbeResponse(data=data)

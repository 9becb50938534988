"""
API dependencies for dependency injection.

Use cases are assembled per request from the clients held on app.state.
"""

from fastapi import Depends

from app.application.ports import LLMServicePort, SpreadsheetPort
from app.application.use_cases.check_sheets_access import CheckSheetsAccessUseCase
from app.application.use_cases.generate_daily_plan import GenerateDailyPlanUseCase
from app.infra.config.dependencies import (
    get_app_settings,
    get_llm_client,
    get_sheets_client,
)
from app.infra.config.settings import Settings


async def get_generate_daily_plan_use_case(
    settings: Settings = Depends(get_app_settings),
    llm_client: LLMServicePort = Depends(get_llm_client),
    sheets_client: SpreadsheetPort = Depends(get_sheets_client),
) -> GenerateDailyPlanUseCase:
    return GenerateDailyPlanUseCase(
        llm_service=llm_client,
        spreadsheet=sheets_client,
        spreadsheet_id=settings.google_sheet_id,
        append_range=settings.sheets_append_range,
        append_best_effort=settings.sheets_append_best_effort,
    )


async def get_check_sheets_access_use_case(
    settings: Settings = Depends(get_app_settings),
    sheets_client: SpreadsheetPort = Depends(get_sheets_client),
) -> CheckSheetsAccessUseCase:
    return CheckSheetsAccessUseCase(
        spreadsheet=sheets_client,
        spreadsheet_id=settings.google_sheet_id,
        probe_range=settings.sheets_probe_range,
    )

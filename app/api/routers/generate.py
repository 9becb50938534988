"""
Plan and email generation endpoint.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_generate_daily_plan_use_case
from app.api.schemas import ErrorResponse, GenerateRequest, GenerateResponse
from app.application.use_cases.generate_daily_plan import GenerateDailyPlanUseCase

router = APIRouter(tags=["generate"])


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(
    body: GenerateRequest,
    use_case: GenerateDailyPlanUseCase = Depends(get_generate_daily_plan_use_case),
) -> GenerateResponse:
    """
    Turn a raw task list into a prioritized plan and a draft status email.

    The result is also appended as a row to the tracking spreadsheet.
    """
    result = await use_case.execute(body.tasks)
    return GenerateResponse(plan=result.plan, email=result.email)

"""
Use Case: Generate Daily Plan

This use case handles:
1. Validating the submitted task list
2. Asking the language model for a plan and a status email
3. Splitting the reply on the email delimiter
4. Appending the result to the tracking spreadsheet
"""

from datetime import datetime
from typing import Callable, Optional

from app.application.ports import LLMServicePort, SpreadsheetPort
from app.application.prompts.daily_plan import DailyPlanPrompts
from app.domain.entities import ParsedResult, SheetRow
from app.domain.exceptions import (
    GenerationFailedError,
    LanguageModelError,
    SpreadsheetError,
)
from app.domain.validators import TaskValidators, split_model_response
from app.infra.config.logging_config import get_logger


class GenerateDailyPlanUseCase:
    """
    Turns a raw task list into a prioritized plan and a draft status email.

    Steps run strictly in sequence. Any failure after validation is raised as
    GenerationFailedError; nothing is retried.
    """

    def __init__(
        self,
        llm_service: LLMServicePort,
        spreadsheet: SpreadsheetPort,
        spreadsheet_id: str,
        append_range: str = "A1:D1",
        append_best_effort: bool = False,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.llm_service = llm_service
        self.spreadsheet = spreadsheet
        self.spreadsheet_id = spreadsheet_id
        self.append_range = append_range
        self.append_best_effort = append_best_effort
        self.clock = clock
        self._log = get_logger("usecase.generate_daily_plan")

    async def execute(self, tasks: str) -> ParsedResult:
        """
        Execute the generate daily plan use case.

        Args:
            tasks: Free-text list of tasks as submitted by the caller

        Returns:
            ParsedResult with trimmed plan and email

        Raises:
            InvalidInputError: If tasks is empty or whitespace only
            GenerationFailedError: If the model call, parse or append fails
        """
        request = TaskValidators.validate_tasks(tasks)
        self._log.info("usecase.generate.start", tasks_len=len(request.tasks))

        prompt = DailyPlanPrompts.build_prompt(request.tasks)

        try:
            response_text = await self.llm_service.invoke_text(prompt)
        except Exception as e:
            self._log.error("usecase.generate.llm_failed", error=str(e))
            raise LanguageModelError(str(e), cause=e) from e

        result = split_model_response(response_text)

        row = SheetRow.from_result(
            request.tasks, result, now=self.clock() if self.clock else None
        )
        await self._append(row)

        self._log.info(
            "usecase.generate.completed",
            plan_len=len(result.plan),
            email_len=len(result.email),
        )
        return result

    async def _append(self, row: SheetRow) -> None:
        try:
            await self.spreadsheet.append_row(
                self.spreadsheet_id, self.append_range, row.to_values()
            )
        except Exception as e:
            if self.append_best_effort:
                self._log.warning("usecase.generate.append_skipped", error=str(e))
                return
            self._log.error("usecase.generate.append_failed", error=str(e))
            if isinstance(e, GenerationFailedError):
                raise
            raise SpreadsheetError(str(e), cause=e) from e

"""
Unit tests for logging setup and log content of the generate flow.
"""

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from app.application.use_cases.generate_daily_plan import GenerateDailyPlanUseCase
from app.domain.exceptions import GenerationFailedError
from app.infra.config.logging_config import setup_logging
from tests._helpers.fakes import FakeLLMClient, FakeSpreadsheetClient
from tests.conftest import SAMPLE_MODEL_OUTPUT, SAMPLE_TASKS, make_settings

PLAN = "1. Write report\n2. Call client\n3. Review PR"
EMAIL = "Hi team, status update: ..."


def assert_no_payload_text(logs):
    assert logs, "expected log events"
    for entry in logs:
        rendered = repr(entry)
        for text in (SAMPLE_TASKS, PLAN, EMAIL, "Write report", "status update"):
            assert text not in rendered, f"{text!r} leaked into {entry['event']}"


class TestLogContent:
    @pytest.mark.asyncio
    async def test_success_logs_lengths_only(self):
        with capture_logs() as logs:
            use_case = GenerateDailyPlanUseCase(
                llm_service=FakeLLMClient(response=SAMPLE_MODEL_OUTPUT),
                spreadsheet=FakeSpreadsheetClient(),
                spreadsheet_id="sheet-123",
            )
            await use_case.execute(SAMPLE_TASKS)

        assert_no_payload_text(logs)
        completed = [e for e in logs if e["event"] == "usecase.generate.completed"]
        assert completed[0]["plan_len"] == len(PLAN)
        assert completed[0]["email_len"] == len(EMAIL)
        started = [e for e in logs if e["event"] == "usecase.generate.start"]
        assert started[0]["tasks_len"] == len(SAMPLE_TASKS)

    @pytest.mark.asyncio
    async def test_missing_delimiter_does_not_log_output(self):
        with capture_logs() as logs:
            use_case = GenerateDailyPlanUseCase(
                llm_service=FakeLLMClient(response=f"{PLAN}\n\n{EMAIL}"),
                spreadsheet=FakeSpreadsheetClient(),
                spreadsheet_id="sheet-123",
            )
            with pytest.raises(GenerationFailedError):
                await use_case.execute(SAMPLE_TASKS)

        assert_no_payload_text(logs)

    @pytest.mark.asyncio
    async def test_append_failure_does_not_log_row(self):
        with capture_logs() as logs:
            use_case = GenerateDailyPlanUseCase(
                llm_service=FakeLLMClient(response=SAMPLE_MODEL_OUTPUT),
                spreadsheet=FakeSpreadsheetClient(append_error=RuntimeError("quota exceeded")),
                spreadsheet_id="sheet-123",
            )
            with pytest.raises(GenerationFailedError):
                await use_case.execute(SAMPLE_TASKS)

        assert_no_payload_text(logs)
        failed = [e for e in logs if e["event"] == "usecase.generate.append_failed"]
        assert failed[0]["error"] == "quota exceeded"


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def restore_structlog(self):
        yield
        structlog.reset_defaults()

    def test_uses_given_settings(self):
        setup_logging(make_settings(LOG_LEVEL="error", LOG_FORMAT="json"))

        config = structlog.get_config()
        assert config["wrapper_class"] is structlog.make_filtering_bound_logger(logging.ERROR)
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)

    def test_console_format(self):
        setup_logging(make_settings(LOG_LEVEL="DEBUG", LOG_FORMAT="console"))

        config = structlog.get_config()
        assert config["wrapper_class"] is structlog.make_filtering_bound_logger(logging.DEBUG)
        assert isinstance(config["processors"][-1], structlog.dev.ConsoleRenderer)

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(make_settings(LOG_LEVEL="chatty"))

        config = structlog.get_config()
        assert config["wrapper_class"] is structlog.make_filtering_bound_logger(logging.INFO)

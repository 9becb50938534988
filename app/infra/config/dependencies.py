"""
Construction of the external clients and FastAPI dependency providers.

Clients are built once in the application lifespan and kept on
``app.state``; request handlers receive them through ``Depends``.
"""

from fastapi import Request

from app.application.ports import LLMServicePort, SpreadsheetPort
from app.infra.config.credentials import load_sheets_credentials, require_settings
from app.infra.config.logging_config import get_logger
from app.infra.config.settings import Settings, get_settings
from app.infra.llm.gemini_client import GeminiClient
from app.infra.sheets.sheets_client import GoogleSheetsClient

logger = get_logger("infra.dependencies")


def build_llm_client(settings: Settings) -> GeminiClient:
    return GeminiClient(
        api_key=settings.gemini_api_key,
        model_name=settings.gemini_model,
        temperature=settings.gemini_temperature,
        max_retries=settings.gemini_max_retries,
        timeout=settings.gemini_timeout,
    )


def build_sheets_client(settings: Settings) -> GoogleSheetsClient:
    credentials = load_sheets_credentials(settings)
    return GoogleSheetsClient(
        credentials, value_input_option=settings.sheets_value_input_option
    )


def init_clients(app, settings: Settings) -> None:
    """Build whichever clients are not already on app.state.

    Raises:
        StartupError: if required settings or credentials are missing
    """
    require_settings(settings)
    if getattr(app.state, "llm_client", None) is None:
        app.state.llm_client = build_llm_client(settings)
    if getattr(app.state, "sheets_client", None) is None:
        app.state.sheets_client = build_sheets_client(settings)
    logger.info(
        "clients.initialized",
        model=settings.gemini_model,
        append_range=settings.sheets_append_range,
    )


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_llm_client(request: Request) -> LLMServicePort:
    return request.app.state.llm_client


def get_sheets_client(request: Request) -> SpreadsheetPort:
    return request.app.state.sheets_client

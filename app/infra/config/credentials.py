"""
Google service-account credential loading for the Sheets client.

Credentials are resolved once at startup, in priority order:

1. ``GOOGLE_SERVICE_ACCOUNT_JSON`` - inline service-account JSON
2. ``GOOGLE_CLIENT_EMAIL`` + ``GOOGLE_PRIVATE_KEY`` - explicit JWT credentials
3. ``GOOGLE_APPLICATION_CREDENTIALS`` - path to a key file
4. ``credentials.json`` in the working directory (local fallback)
5. application-default credentials

Any failure raises StartupError; the application refuses to start.
"""

import json
import os
from typing import Any, Dict

import google.auth
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account

from app.domain.exceptions import StartupError
from app.infra.config.logging_config import get_logger
from app.infra.config.settings import Settings

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"

logger = get_logger("infra.credentials")


def _from_info(info: Dict[str, Any]):
    info.setdefault("token_uri", DEFAULT_TOKEN_URI)
    return service_account.Credentials.from_service_account_info(
        info, scopes=SHEETS_SCOPES
    )


def load_sheets_credentials(settings: Settings):
    """Resolve credentials for the Sheets API from settings."""
    try:
        if settings.google_service_account_json:
            info = json.loads(settings.google_service_account_json)
            logger.info("credentials.loaded", source="inline_json")
            return _from_info(info)

        if settings.google_client_email or settings.google_private_key:
            if not (settings.google_client_email and settings.google_private_key):
                raise StartupError(
                    "GOOGLE_CLIENT_EMAIL and GOOGLE_PRIVATE_KEY must be set together"
                )
            info = {
                "type": "service_account",
                "client_email": settings.google_client_email,
                # PEM from .env may carry escaped newlines
                "private_key": settings.google_private_key.replace("\\n", "\n"),
            }
            logger.info("credentials.loaded", source="client_email")
            return _from_info(info)

        if not settings.google_use_default_credentials:
            key_file = settings.google_application_credentials
            if not key_file and os.path.exists(settings.local_credentials_file):
                key_file = settings.local_credentials_file
            if key_file:
                logger.info("credentials.loaded", source="key_file", path=key_file)
                return service_account.Credentials.from_service_account_file(
                    key_file, scopes=SHEETS_SCOPES
                )

        credentials, project_id = google.auth.default(scopes=SHEETS_SCOPES)
        logger.info("credentials.loaded", source="application_default", project=project_id)
        return credentials

    except StartupError:
        raise
    except (GoogleAuthError, ValueError, KeyError, OSError) as e:
        # json.JSONDecodeError is a ValueError
        logger.critical("credentials.failed", error=str(e))
        raise StartupError(f"Unable to load Google credentials: {e}") from e


def require_settings(settings: Settings) -> None:
    """Fail fast when a value needed to serve requests is missing."""
    missing = [
        name
        for name, value in (
            ("GEMINI_API_KEY", settings.gemini_api_key),
            ("GOOGLE_SHEET_ID", settings.google_sheet_id),
        )
        if not value
    ]
    if missing:
        error_msg = f"Missing required environment variables: {', '.join(missing)}"
        logger.critical("settings.invalid", missing=missing)
        raise StartupError(error_msg)

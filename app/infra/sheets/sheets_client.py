"""
Google Sheets v4 client.

The discovery client is synchronous; requests are executed in a worker
thread so the event loop keeps serving other requests. httplib2 transports
are not thread-safe, so every request is built with its own authorized
transport.
"""

import asyncio
from typing import Any, Dict, List, Sequence

import google_auth_httplib2
import httplib2
from googleapiclient.discovery import build
from googleapiclient.http import HttpRequest

from app.application.ports import SpreadsheetPort
from app.infra.config.logging_config import get_logger


class GoogleSheetsClient(SpreadsheetPort):
    def __init__(self, credentials, value_input_option: str = "USER_ENTERED", service=None):
        self.credentials = credentials
        self.value_input_option = value_input_option
        if service is None:
            service = build(
                "sheets",
                "v4",
                http=self._authorized_http(),
                requestBuilder=self._build_request,
                cache_discovery=False,
            )
        self._values = service.spreadsheets().values()
        self._log = get_logger("infra.sheets")

    def _authorized_http(self) -> google_auth_httplib2.AuthorizedHttp:
        return google_auth_httplib2.AuthorizedHttp(self.credentials, http=httplib2.Http())

    def _build_request(self, http, *args, **kwargs) -> HttpRequest:
        # the shared http handed in by discovery is ignored
        return HttpRequest(self._authorized_http(), *args, **kwargs)

    async def append_row(
        self, spreadsheet_id: str, range_: str, row: Sequence[str]
    ) -> Dict[str, Any]:
        request = self._values.append(
            spreadsheetId=spreadsheet_id,
            range=range_,
            valueInputOption=self.value_input_option,
            body={"values": [list(row)]},
        )
        response = await asyncio.to_thread(request.execute)
        self._log.info(
            "sheets.append",
            range=range_,
            updated_range=response.get("updates", {}).get("updatedRange"),
        )
        return response

    async def read_values(self, spreadsheet_id: str, range_: str) -> List[List[Any]]:
        request = self._values.get(spreadsheetId=spreadsheet_id, range=range_)
        response = await asyncio.to_thread(request.execute)
        values = response.get("values", [])
        self._log.info("sheets.read", range=range_, rows=len(values))
        return values

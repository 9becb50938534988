"""
Use Case: Check Sheets Access

Reads a small range of the tracking spreadsheet to confirm that the
configured credentials can reach it.
"""

from typing import Any, List

from app.application.ports import SpreadsheetPort
from app.infra.config.logging_config import get_logger


class CheckSheetsAccessUseCase:
    def __init__(self, spreadsheet: SpreadsheetPort, spreadsheet_id: str, probe_range: str):
        self.spreadsheet = spreadsheet
        self.spreadsheet_id = spreadsheet_id
        self.probe_range = probe_range
        self._log = get_logger("usecase.check_sheets_access")

    async def execute(self) -> List[List[Any]]:
        values = await self.spreadsheet.read_values(self.spreadsheet_id, self.probe_range)
        self._log.info("usecase.sheets_probe.ok", rows=len(values))
        return values

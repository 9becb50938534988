"""
Domain validators and parsing rules for plan generation.
"""

from typing import Any

from app.domain.entities import GenerationRequest, ParsedResult
from app.domain.exceptions import InvalidInputError, MalformedModelResponseError

EMAIL_DELIMITER = "---EMAIL---"


class TaskValidators:
    @staticmethod
    def validate_tasks(tasks: Any) -> GenerationRequest:
        """Reject missing, non-text or whitespace-only task lists."""
        if not isinstance(tasks, str) or not tasks.strip():
            raise InvalidInputError()
        return GenerationRequest(tasks=tasks)


def split_model_response(text: str, delimiter: str = EMAIL_DELIMITER) -> ParsedResult:
    """Split the model reply into plan and email on the first delimiter.

    Text after the first delimiter, including any further delimiters, is the
    email. A reply without the delimiter is rejected.
    """
    plan, found, email = (text or "").partition(delimiter)
    if not found:
        raise MalformedModelResponseError(
            f"model response is missing the {delimiter!r} delimiter"
        )
    return ParsedResult(plan=plan.strip(), email=email.strip())

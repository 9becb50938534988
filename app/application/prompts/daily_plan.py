"""
Daily plan prompt.

Asks the model for a prioritized plan and a work-update email separated by
the email delimiter.
"""

from langchain_core.prompts import PromptTemplate

from app.domain.validators import EMAIL_DELIMITER


DAILY_PLAN_TEMPLATE = """
You are a professional productivity assistant. Based on the following raw list of tasks,
first, create a prioritized "Plan for Today" in a logical order.
Second, using that plan, draft a professional and concise work update email template.
The email should be ready to be copied and sent.

Separate the plan and the email with "{delimiter}".

Tasks:
{tasks}"""


class DailyPlanPrompts:
    """Centralized prompt template for daily plan generation."""

    template = PromptTemplate.from_template(DAILY_PLAN_TEMPLATE).partial(
        delimiter=EMAIL_DELIMITER
    )

    @classmethod
    def build_prompt(cls, tasks: str) -> str:
        """Embed the raw task list verbatim into the template."""
        return cls.template.format(tasks=tasks)

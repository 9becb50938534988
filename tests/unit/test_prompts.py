"""
Unit tests for the daily plan prompt.
"""

from app.application.prompts.daily_plan import DailyPlanPrompts
from app.domain.validators import EMAIL_DELIMITER


def test_prompt_embeds_tasks_verbatim():
    tasks = "write report, call client, review PR"

    prompt = DailyPlanPrompts.build_prompt(tasks)

    assert prompt.rstrip().endswith(f"Tasks:\n{tasks}")
    assert f'"{EMAIL_DELIMITER}"' in prompt
    assert "Plan for Today" in prompt
    assert "work update email" in prompt


def test_prompt_keeps_braces_in_tasks():
    tasks = "fix {config} parsing\n  - and {{double}} braces"

    prompt = DailyPlanPrompts.build_prompt(tasks)

    assert tasks in prompt


def test_prompt_is_deterministic():
    assert DailyPlanPrompts.build_prompt("a") == DailyPlanPrompts.build_prompt("a")

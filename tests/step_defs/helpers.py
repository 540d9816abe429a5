"""Shared helper functions for step definitions."""

from wdu_bdd.context import ScenarioContext


def require_person(scenario_context: ScenarioContext) -> tuple[str, str, str]:
    """Return the first name, last name and email stored earlier in the scenario.

    Raises:
        AssertionError: If a step that generates one of them has not run yet
    """
    person = {
        "first name": scenario_context.get_first_name(),
        "last name": scenario_context.get_last_name(),
        "email address": scenario_context.get_email_address(),
    }
    missing = [field for field, value in person.items() if value is None]
    if missing:
        raise AssertionError(
            f"No {', '.join(missing)} stored in the scenario context - "
            f"generate them in an earlier step"
        )
    return (
        person["first name"],
        person["last name"],
        person["email address"],
    )


def random_comment(scenario_context: ScenarioContext) -> str:
    first_name, last_name, email_address = require_person(scenario_context)
    return f"Please could you contact me? \n Thanks {first_name} {last_name} {email_address}"

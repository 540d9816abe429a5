"""Root conftest.py - fixtures and step definition registration for pytest-bdd.

Each scenario gets its own browser context, active tab, page objects and
scenario context. Nothing scenario-specific is kept at module level, so
scenarios cannot see each other's data.
"""

import logging
import random
from pathlib import Path
from typing import Any, Iterator

import pytest
from playwright.sync_api import Browser, BrowserContext, Playwright, sync_playwright

from wdu_bdd.browser import ActiveTab
from wdu_bdd.config import DEFAULT_ENV_FILE, Settings, load_settings
from wdu_bdd.context import ScenarioContext
from wdu_bdd.pages import PageActions, PageManager, load_selectors

logger = logging.getLogger("wdu_bdd.scenarios")

PROJECT_DIR = Path(__file__).parent
STEP_DEFS_DIR = PROJECT_DIR / "tests" / "step_defs"


def _discover_step_modules() -> list[str]:
    """Return the dotted names of all step definition modules.

    pytest-bdd registers steps as fixtures of the module that defines them,
    so every ``*_steps.py`` module is loaded as a plugin to make its steps
    visible to all features.
    """
    return [
        f"tests.step_defs.{step_file.stem}"
        for step_file in sorted(STEP_DEFS_DIR.glob("*_steps.py"))
    ]


pytest_plugins = _discover_step_modules()


# -- Settings and test data --


@pytest.fixture(scope="session")
def settings() -> Settings:
    """Settings from env/.env, overridden by the process environment."""
    return load_settings(PROJECT_DIR / DEFAULT_ENV_FILE)


@pytest.fixture(scope="session")
def selectors() -> dict[str, Any]:
    return load_selectors()


@pytest.fixture(autouse=True)
def faker_seed(settings: Settings) -> int:
    """Seed for the Faker plugin's ``faker`` fixture.

    A fresh seed per scenario keeps generated data unique; FAKER_SEED pins it
    to reproduce a failure.
    """
    seed = settings.faker_seed if settings.faker_seed is not None else random.randrange(2**32)
    logger.debug("Faker seed: %d", seed)
    return seed


# -- Scenario context --


@pytest.fixture
def scenario_context(request: pytest.FixtureRequest, settings: Settings) -> ScenarioContext:
    """Fresh per-scenario state, discarded after the scenario ends."""
    return ScenarioContext(
        parameters={
            "test_name": request.node.name,
            "base_url": settings.base_url,
        }
    )


# -- Browser --


@pytest.fixture(scope="session")
def playwright_driver() -> Iterator[Playwright]:
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_driver: Playwright, settings: Settings) -> Iterator[Browser]:
    browser_type = getattr(playwright_driver, settings.browser_engine)
    logger.info("Launching %s (headless=%s)", settings.browser_engine, settings.headless)
    browser = browser_type.launch(headless=settings.headless)
    yield browser
    browser.close()


@pytest.fixture
def browser_context(browser: Browser, settings: Settings) -> Iterator[BrowserContext]:
    """Isolated browser context, closed whether the scenario passes or fails."""
    context = browser.new_context(viewport=settings.viewport)
    context.set_default_timeout(settings.action_timeout)
    context.set_default_navigation_timeout(settings.navigation_timeout)
    yield context
    context.close()


@pytest.fixture
def active_tab(browser_context: BrowserContext, settings: Settings) -> ActiveTab:
    tab = ActiveTab(browser_context, viewport=settings.viewport)
    tab.open()
    return tab


@pytest.fixture
def pages(active_tab: ActiveTab, selectors: dict[str, Any], settings: Settings) -> PageManager:
    actions = PageActions(active_tab, selectors)
    return PageManager(actions, base_url=settings.base_url, login_url=settings.login_portal_url)


# -- pytest-bdd hooks --


def pytest_bdd_before_scenario(request, feature, scenario):
    logger.info("Scenario started: %s (%s)", scenario.name, feature.name)


def pytest_bdd_after_scenario(request, feature, scenario):
    logger.info("Scenario finished: %s", scenario.name)


def pytest_bdd_step_error(request, feature, scenario, step, step_func, step_func_args, exception):
    logger.error(
        "Step failed in scenario '%s': %s %s - %s: %s",
        scenario.name,
        step.keyword,
        step.name,
        type(exception).__name__,
        exception,
    )

"""Shared page actions used by every page object.

Page objects receive a ``PageActions`` instead of inheriting from a base
page, so each shared action (navigate, click by role, wait and click) has a
single implementation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from playwright.sync_api import Locator, Page

from ..browser import ActiveTab
from ..exceptions import SelectorNotFoundError

logger = logging.getLogger(__name__)

SELECTORS_FILE = Path(__file__).parent / "selectors.yaml"


def load_selectors(path: Path = SELECTORS_FILE) -> dict[str, Any]:
    """Load UI selectors from YAML configuration.

    Args:
        path: YAML file with selectors grouped by page

    Returns:
        Dictionary of selectors organized by page
    """
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class PageActions:
    """Driver interactions shared by all page objects.

    All actions run against ``tab.page`` at call time, so a page object keeps
    working after the scenario switches to a new browser tab.
    """

    def __init__(self, tab: ActiveTab, selectors: Optional[dict[str, Any]] = None):
        self.tab = tab
        self.selectors = selectors if selectors is not None else load_selectors()

    @property
    def page(self) -> Page:
        return self.tab.page

    def _selector_entry(self, selector_path: str) -> dict[str, Any]:
        value: Any = self.selectors
        for part in selector_path.split("."):
            if not isinstance(value, dict) or part not in value:
                raise SelectorNotFoundError(f"Unknown selector '{selector_path}'")
            value = value[part]
        if not isinstance(value, dict) or "selector" not in value:
            raise SelectorNotFoundError(f"'{selector_path}' is not a selector entry")
        return value

    def selector(self, selector_path: str, **kwargs: Any) -> str:
        """Return the raw selector string for a dotted key.

        Example:
            actions.selector("contact_us.submit_button")
            # Returns: 'input[value="SUBMIT"]'
        """
        entry = self._selector_entry(selector_path)
        selector = entry["selector"]
        return selector.format(**kwargs) if kwargs else selector

    def locator(self, selector_path: str, **kwargs: Any) -> Locator:
        """Build a Playwright locator from a dotted selector key."""
        entry = self._selector_entry(selector_path)
        selector = self.selector(selector_path, **kwargs)
        by = entry.get("by", "css").lower()

        if by == "role":
            return self.page.get_by_role(selector, name=entry.get("name"))
        if by == "placeholder":
            return self.page.get_by_placeholder(selector)
        if by == "xpath":
            return self.page.locator(f"xpath={selector}")
        if by == "css":
            return self.page.locator(selector)
        raise SelectorNotFoundError(f"Unsupported locator type '{by}' for '{selector_path}'")

    def navigate(self, url: str) -> None:
        logger.info("Navigating to %s", url)
        self.page.goto(url)

    def click_by_role(self, role: str, name: str) -> None:
        self.wait_and_click(self.page.get_by_role(role, name=name))

    def wait_and_click(self, locator: Locator) -> None:
        """Wait for the locator to be visible and then click on it."""
        locator.wait_for(state="visible")
        locator.click()

    def wait_and_click_selector(self, selector: str) -> None:
        """Wait for the selector to be attached and then click on it."""
        self.page.wait_for_selector(selector)
        self.page.click(selector)

    def fill(self, selector_path: str, text: str) -> None:
        self.locator(selector_path).fill(text)

    def switch_to_new_tab(self, timeout_ms: Optional[float] = None) -> Page:
        return self.tab.switch_to_new_tab(timeout_ms)

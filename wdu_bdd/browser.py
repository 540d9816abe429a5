"""Active browser tab tracking for one scenario.

Playwright hands out a new ``Page`` for every tab a site opens. Steps always
act on the most recently activated one, so the suite keeps it in an
``ActiveTab`` owned by the scenario instead of in a module-level variable.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from playwright.sync_api import BrowserContext, Dialog, Page

logger = logging.getLogger(__name__)


class ActiveTab:
    """The page that steps currently act on, plus the dialogs it raised.

    A dialog handler is attached exactly once to every page the tab learns
    about. It records the dialog message and accepts it so the page is not
    left blocked.
    """

    def __init__(self, browser_context: BrowserContext, viewport: dict[str, int]):
        self.browser_context = browser_context
        self.viewport = viewport
        self._page: Optional[Page] = None
        self._watched_pages: list[Page] = []
        self._dialog_messages: list[str] = []

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError("No page is open yet, call open() first")
        return self._page

    @property
    def last_dialog_message(self) -> Optional[str]:
        """Message of the most recent dialog, or ``None`` if none appeared."""
        return self._dialog_messages[-1] if self._dialog_messages else None

    def open(self) -> Page:
        """Open the first tab of the scenario and make it active."""
        page = self.browser_context.new_page()
        self._activate(page)
        return page

    def _activate(self, page: Page) -> None:
        if not any(watched is page for watched in self._watched_pages):
            page.on("dialog", self._on_dialog)
            self._watched_pages.append(page)
        self._page = page

    def _on_dialog(self, dialog: Dialog) -> None:
        message = dialog.message
        logger.info("Dialog (%s) appeared: %s", dialog.type, message)
        self._dialog_messages.append(message)
        dialog.accept()

    def switch_to_new_tab(self, timeout_ms: Optional[float] = None) -> Page:
        """Make the most recently opened tab active and maximise it.

        If the click that opens the tab has not produced a new page yet, wait
        for the browser context to report one.
        """
        pages = self.browser_context.pages
        if not pages or pages[-1] is self._page:
            if timeout_ms is None:
                self.browser_context.wait_for_event("page")
            else:
                self.browser_context.wait_for_event("page", timeout=timeout_ms)
            pages = self.browser_context.pages

        new_page = pages[-1]
        self._activate(new_page)
        new_page.bring_to_front()
        new_page.set_viewport_size(self.viewport)
        logger.info("Switched to new tab: %s", new_page.url)
        return new_page

    def wait_for_dialog_message(self, timeout_ms: float = 5_000, poll_ms: float = 100) -> Optional[str]:
        """Return the last dialog message, polling until one appears.

        Returns ``None`` when no dialog was seen within ``timeout_ms``.
        """
        deadline = time.monotonic() + timeout_ms / 1000
        while self.last_dialog_message is None and time.monotonic() < deadline:
            self.page.wait_for_timeout(poll_ms)
        return self.last_dialog_message

    def wait(self, seconds: float) -> None:
        self.page.wait_for_timeout(seconds * 1000)

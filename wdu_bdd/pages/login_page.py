"""Page object for the Login Portal page."""

from typing import Optional

from .actions import PageActions


class LoginPage:
    def __init__(self, actions: PageActions, url: str):
        self.actions = actions
        self.url = url

    def navigate_to_login_page(self) -> None:
        self.actions.navigate(self.url)

    def fill_username(self, username: str) -> None:
        self.actions.fill("login.username_field", username)

    def fill_password(self, password: str) -> None:
        self.actions.fill("login.password_field", password)

    def click_on_login_button(self) -> None:
        # The button sits under an overlay; force the click after hovering.
        login_button = self.actions.locator("login.login_button")
        login_button.hover()
        login_button.click(force=True)

    def get_alert_text(self, timeout_ms: float = 5_000) -> Optional[str]:
        """Message of the alert raised by the login attempt, ``None`` if none."""
        return self.actions.tab.wait_for_dialog_message(timeout_ms)

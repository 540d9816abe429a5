"""Page object for the webdriveruniversity.com homepage."""

from .actions import PageActions


class HomePage:
    CONTACT_US_LINK = "Contact Us Form"
    LOGIN_PORTAL_LINK = "Login Portal"

    def __init__(self, actions: PageActions, url: str):
        self.actions = actions
        self.url = url

    def navigate(self) -> None:
        self.actions.navigate(self.url)

    def click_on_contact_us_button(self) -> None:
        self.actions.click_by_role("link", self.CONTACT_US_LINK)

    def click_on_login_portal_button(self) -> None:
        self.actions.click_by_role("link", self.LOGIN_PORTAL_LINK)

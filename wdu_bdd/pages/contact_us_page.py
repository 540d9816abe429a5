"""Page object for the Contact Us form."""

from .actions import PageActions

SUCCESS_MESSAGE_TIMEOUT_MS = 60_000


class ContactUsPage:
    """Contact Us form: fill the fields, submit, read the outcome."""

    def __init__(self, actions: PageActions):
        self.actions = actions

    def fill_first_name(self, first_name: str) -> None:
        self.actions.fill("contact_us.first_name_field", first_name)

    def fill_last_name(self, last_name: str) -> None:
        self.actions.fill("contact_us.last_name_field", last_name)

    def fill_email_address(self, email_address: str) -> None:
        self.actions.fill("contact_us.email_address_field", email_address)

    def fill_comment(self, comment: str) -> None:
        self.actions.fill("contact_us.comment_field", comment)

    def click_on_submit_button(self) -> None:
        self.actions.wait_and_click_selector(self.actions.selector("contact_us.submit_button"))

    def get_successful_message(self) -> str:
        selector = self.actions.selector("contact_us.success_header")
        page = self.actions.page
        page.wait_for_selector(selector, timeout=SUCCESS_MESSAGE_TIMEOUT_MS)
        return page.inner_text(selector)

    def get_error_message(self) -> str:
        """Text of the response body; empty string if the body has none."""
        selector = self.actions.selector("contact_us.page_body")
        self.actions.page.wait_for_selector(selector)
        body_text = self.actions.locator("contact_us.page_body").text_content()
        return body_text or ""

    def get_header_text(self, message: str) -> str:
        """Return the first h1 or body text containing ``message``.

        Returns an empty string when no candidate element contains it.
        """
        selector = self.actions.selector("contact_us.header_or_body")
        self.actions.page.wait_for_selector(f"xpath={selector}", state="visible")

        for element in self.actions.locator("contact_us.header_or_body").element_handles():
            text = element.inner_text()
            if message in text:
                return text
        return ""

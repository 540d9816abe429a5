"""Builds the page objects used within one scenario."""

from .actions import PageActions
from .contact_us_page import ContactUsPage
from .home_page import HomePage
from .login_page import LoginPage


class PageManager:
    """One set of page objects sharing a single ``PageActions``."""

    def __init__(self, actions: PageActions, base_url: str, login_url: str):
        self.actions = actions
        self.home = HomePage(actions, base_url)
        self.contact_us = ContactUsPage(actions)
        self.login = LoginPage(actions, login_url)

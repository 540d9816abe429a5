"""Page objects for webdriveruniversity.com."""

from .actions import PageActions, load_selectors
from .contact_us_page import ContactUsPage
from .home_page import HomePage
from .login_page import LoginPage
from .manager import PageManager

__all__ = [
    "PageActions",
    "load_selectors",
    "ContactUsPage",
    "HomePage",
    "LoginPage",
    "PageManager",
]

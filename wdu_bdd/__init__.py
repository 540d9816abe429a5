"""End-to-end BDD suite for webdriveruniversity.com.

Library code shared by the pytest-bdd step definitions under tests/:
scenario context, browser session, page objects, settings and launcher.
"""

from .context import ScenarioContext

__all__ = ["ScenarioContext"]

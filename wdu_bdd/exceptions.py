"""Suite-specific exceptions."""


class WduBddError(Exception):
    """Base class for errors raised by the suite's own code."""


class ConfigError(WduBddError, ValueError):
    """Raised when a setting from env/.env or the environment is invalid."""


class SelectorNotFoundError(WduBddError, KeyError):
    """Raised when a dotted selector key is missing from selectors.yaml."""


class UnknownProfileError(WduBddError, ValueError):
    """Raised when the launcher is asked for a profile it does not know."""


class TestRunFailedError(WduBddError):
    """Raised when pytest exits with a non-zero status."""

    __test__ = False

    def __init__(self, profile: str, returncode: int):
        self.profile = profile
        self.returncode = returncode
        super().__init__(
            f"Some automation test(s) have failed for profile '{profile}' "
            f"(pytest exit code {returncode}) - please review."
        )

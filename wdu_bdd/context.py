"""Per-scenario shared state for step definitions."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Optional


class ScenarioContext:
    """State passed between the steps of a single scenario.

    One instance is created by the ``scenario_context`` fixture before the
    first step runs and dropped after teardown. Steps that generate test data
    store it here so that later steps assert on exactly the same values.

    Every field starts out as ``None``. Reading a field that was never set
    returns ``None`` instead of raising, so an out-of-order read surfaces as
    an assertion failure in the step that made it.
    """

    def __init__(self, parameters: Optional[Mapping[str, Any]] = None):
        self._parameters = MappingProxyType(dict(parameters or {}))

        # Base URL
        self._url: Optional[str] = None

        # Person
        self._first_name: Optional[str] = None
        self._last_name: Optional[str] = None
        self._email_address: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(url={self._url!r}, "
            f"first_name={self._first_name!r}, last_name={self._last_name!r}, "
            f"email_address={self._email_address!r})"
        )

    @property
    def parameters(self) -> Mapping[str, Any]:
        """Read-only options handed over by the runner for this scenario."""
        return self._parameters

    @staticmethod
    def _require_value(field: str, value: str) -> str:
        if value == "":
            raise ValueError(f"{field} must not be empty")
        return value

    def set_url(self, url: str) -> None:
        self._url = self._require_value("url", url)

    def set_first_name(self, first_name: str) -> None:
        self._first_name = self._require_value("first_name", first_name)

    def set_last_name(self, last_name: str) -> None:
        self._last_name = self._require_value("last_name", last_name)

    def set_email_address(self, email_address: str) -> None:
        self._email_address = self._require_value("email_address", email_address)

    def get_url(self) -> Optional[str]:
        return self._url

    def get_first_name(self) -> Optional[str]:
        return self._first_name

    def get_last_name(self) -> Optional[str]:
        return self._last_name

    def get_email_address(self) -> Optional[str]:
        return self._email_address

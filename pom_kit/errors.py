"""Exception types raised by the page-object layer.

``PomKitError`` is the common base. Drivers raise ``ElementNotFound`` and
``NavigationFailure``; pages raise ``PageNotLoaded`` when their defining
element never shows up.
"""

from __future__ import annotations

from typing import Any


class PomKitError(Exception):
    """Base exception for the entire library."""


class ElementNotFound(PomKitError):
    """No element matched the locator at lookup time."""

    def __init__(self, locator: Any) -> None:
        super().__init__(f"no element matches {locator}")
        self.locator = locator


class NavigationFailure(PomKitError):
    """The browser could not reach the target URL."""

    def __init__(self, url: str) -> None:
        super().__init__(f"navigation to {url} failed")
        self.url = url


class PageNotLoaded(PomKitError):
    """A page's defining element never became displayed after loading."""

    def __init__(self, page: str, locator: Any) -> None:
        super().__init__(f"{page} did not load: {locator} not displayed")
        self.page = page
        self.locator = locator

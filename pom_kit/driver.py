"""Driver capability consumed by the pages, and its Playwright adapter."""

from __future__ import annotations

import json
import logging
from typing import Protocol

from playwright.sync_api import Error as PWError
from playwright.sync_api import Locator as PWLocator
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .errors import ElementNotFound, NavigationFailure
from .pages.base import By, Locator


logger = logging.getLogger(__name__)


class ElementHandle(Protocol):
    def click(self) -> None: ...

    def send_keys(self, text: str) -> None: ...

    def is_displayed(self) -> bool: ...


class DriverCapability(Protocol):
    def navigate(self, url: str) -> None: ...

    def find_element(self, locator: Locator) -> ElementHandle: ...


def to_selector(locator: Locator) -> str:
    """Translate a Locator into a Playwright selector string."""
    quoted = json.dumps(locator.value)
    if locator.by == By.ID:
        return f"[id={quoted}]"
    if locator.by == By.CSS:
        return locator.value
    if locator.by == By.NAME:
        return f"[name={quoted}]"
    if locator.by == By.XPATH:
        return f"xpath={locator.value}"
    if locator.by == By.LINK_TEXT:
        return f"a:text-is({quoted})"
    raise ValueError(f"unsupported locator strategy: {locator.by!r}")


class PlaywrightElement:
    def __init__(self, target: PWLocator) -> None:
        self._target = target

    def click(self) -> None:
        self._target.click()

    def send_keys(self, text: str) -> None:
        self._target.press_sequentially(text)

    def is_displayed(self) -> bool:
        return self._target.is_visible()


class PlaywrightDriver:
    """DriverCapability backed by a Playwright sync ``Page``.

    ``timeout_ms`` is the implicit wait applied to every lookup.
    """

    def __init__(self, page: Page, timeout_ms: int = 5_000) -> None:
        self.page = page
        self.timeout_ms = timeout_ms

    @property
    def current_url(self) -> str:
        return self.page.url

    @property
    def title(self) -> str:
        return self.page.title()

    def navigate(self, url: str) -> None:
        try:
            self.page.goto(url, wait_until="load")
        except PWError as exc:
            raise NavigationFailure(url) from exc

    def find_element(self, locator: Locator) -> PlaywrightElement:
        target = self.page.locator(to_selector(locator)).first
        try:
            target.wait_for(state="attached", timeout=self.timeout_ms)
        except PlaywrightTimeoutError as exc:
            logger.debug("No element for %s after %sms", locator, self.timeout_ms)
            raise ElementNotFound(locator) from exc
        return PlaywrightElement(target)

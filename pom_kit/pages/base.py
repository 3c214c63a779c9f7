"""Shared page vocabulary.

``BasePage`` is the only object that talks to the driver. Concrete pages
hold one and build their workflows out of its primitives (``visit``,
``find``, ``click``, ``type``, ``is_displayed``), so a change in the
automation library only touches the driver adapter and this module.
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..errors import ElementNotFound

if TYPE_CHECKING:
    from ..driver import DriverCapability, ElementHandle


logger = logging.getLogger(__name__)

_ABSOLUTE_URL = re.compile(
    r"^(?:[A-Za-z][A-Za-z0-9+.\-]*://|(?:about|blob|data|file|javascript|mailto):)",
    re.IGNORECASE,
)


class By:
    """Locator strategies understood by the drivers."""

    ID = "id"
    CSS = "css selector"
    NAME = "name"
    XPATH = "xpath"
    LINK_TEXT = "link text"

    ALL = frozenset({ID, CSS, NAME, XPATH, LINK_TEXT})


@dataclass(frozen=True, slots=True)
class Locator:
    by: str
    value: str

    def __post_init__(self) -> None:
        if self.by not in By.ALL:
            raise ValueError(f"unknown locator strategy: {self.by!r}")
        if not self.value:
            raise ValueError("locator value must not be empty")

    @classmethod
    def id(cls, value: str) -> Locator:
        return cls(By.ID, value)

    @classmethod
    def css(cls, value: str) -> Locator:
        return cls(By.CSS, value)

    @classmethod
    def name(cls, value: str) -> Locator:
        return cls(By.NAME, value)

    @classmethod
    def xpath(cls, value: str) -> Locator:
        return cls(By.XPATH, value)

    @classmethod
    def link_text(cls, value: str) -> Locator:
        return cls(By.LINK_TEXT, value)

    def __str__(self) -> str:
        return f"{self.by}={self.value!r}"


@dataclass(frozen=True, slots=True)
class Found:
    handle: ElementHandle


@dataclass(frozen=True, slots=True)
class NotFound:
    locator: Locator


Lookup = Found | NotFound


def is_absolute_url(url: str) -> bool:
    return bool(_ABSOLUTE_URL.match(url))


class BasePage:
    """Primitive page operations over a borrowed driver.

    The driver is shared with the enclosing test and is never closed here.
    Element handles are resolved afresh on every call.
    """

    def __init__(self, driver: DriverCapability, base_url: str = "") -> None:
        self.driver = driver
        self.base_url = base_url

    def url_for(self, url: str) -> str:
        if is_absolute_url(url):
            return url
        return f"{self.base_url}{url}"

    def visit(self, url: str) -> None:
        target = self.url_for(url)
        logger.info("Navigating to %s", target)
        self.driver.navigate(target)

    def lookup(self, locator: Locator) -> Lookup:
        """Resolve *locator* without raising.

        Returns ``Found`` with a fresh handle, or ``NotFound`` when the
        driver reports that nothing matches.
        """
        try:
            handle = self.driver.find_element(locator)
        except ElementNotFound:
            return NotFound(locator)
        return Found(handle)

    def find(self, locator: Locator) -> ElementHandle:
        result = self.lookup(locator)
        if isinstance(result, NotFound):
            raise ElementNotFound(locator)
        return result.handle

    def click(self, locator: Locator) -> None:
        logger.debug("click %s", locator)
        self.find(locator).click()

    def type(self, locator: Locator, text: str) -> None:
        logger.debug("type into %s", locator)
        self.find(locator).send_keys(text)

    def is_displayed(self, locator: Locator) -> bool:
        result = self.lookup(locator)
        if isinstance(result, NotFound):
            logger.debug("%s absent, reporting not displayed", locator)
            return False
        return result.handle.is_displayed()

    def wait_for_displayed(
        self,
        locator: Locator,
        *,
        timeout: float = 5.0,
        poll_interval: float = 0.25,
    ) -> bool:
        """Poll ``is_displayed`` until it is true or *timeout* seconds pass.

        Always checks at least once, so a zero timeout is a plain check.
        """
        deadline = time.monotonic() + max(0.0, timeout)
        while True:
            if self.is_displayed(locator):
                return True
            if time.monotonic() >= deadline:
                logger.debug("Timeout waiting for %s", locator)
                return False
            time.sleep(poll_interval)

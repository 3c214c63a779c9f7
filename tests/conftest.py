from __future__ import annotations

import pytest

from pom_kit.errors import ElementNotFound, NavigationFailure
from pom_kit.pages.base import Locator


BASE_URL = "https://example.test"
VALID_USER = ("tomsmith", "SuperSecretPassword!")


class FakeElement:
    def __init__(self, app: "FakeLoginApp", locator: Locator) -> None:
        self.app = app
        self.locator = locator
        self.clicks = 0
        self.typed = ""
        self.visible = True

    def click(self) -> None:
        self.clicks += 1
        self.app.on_click(self)

    def send_keys(self, text: str) -> None:
        self.typed += text

    def is_displayed(self) -> bool:
        return self.visible


class FakeLoginApp:
    """Tiny in-memory stand-in for the login/secure-area pages."""

    def __init__(self, driver: "FakeDriver") -> None:
        self.driver = driver

    def render(self, url: str) -> dict[Locator, FakeElement]:
        path = url.removeprefix(BASE_URL)
        if path == "/login":
            return self._elements(
                Locator.id("login"),
                Locator.id("username"),
                Locator.id("password"),
                Locator.css("button"),
            )
        if path == "/secure":
            return self._elements(
                Locator.css("#content .example h2"),
                Locator.css('a[href="/logout"]'),
                Locator.css(".flash.success"),
            )
        return {}

    def _elements(self, *locators: Locator) -> dict[Locator, FakeElement]:
        return {loc: FakeElement(self, loc) for loc in locators}

    def on_click(self, element: FakeElement) -> None:
        if element.locator == Locator.css("button"):
            dom = self.driver.elements
            creds = (dom[Locator.id("username")].typed, dom[Locator.id("password")].typed)
            if creds == VALID_USER:
                self.driver.load(f"{BASE_URL}/secure")
            else:
                flash = Locator.css(".flash.error")
                dom[flash] = FakeElement(self, flash)
        elif element.locator == Locator.css('a[href="/logout"]'):
            # redirect to the login form with a "You logged out" banner
            self.driver.load(f"{BASE_URL}/login")
            flash = Locator.css(".flash.success")
            self.driver.elements[flash] = FakeElement(self, flash)


class FakeDriver:
    """DriverCapability over a dict of locator -> element."""

    def __init__(self) -> None:
        self.visited: list[str] = []
        self.lookups: list[Locator] = []
        self.elements: dict[Locator, FakeElement] = {}
        self.unreachable: set[str] = set()
        self.app = FakeLoginApp(self)

    def load(self, url: str) -> None:
        self.elements = self.app.render(url)

    def navigate(self, url: str) -> None:
        if url in self.unreachable:
            raise NavigationFailure(url)
        self.visited.append(url)
        self.load(url)

    def find_element(self, locator: Locator) -> FakeElement:
        self.lookups.append(locator)
        try:
            return self.elements[locator]
        except KeyError:
            raise ElementNotFound(locator) from None


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()

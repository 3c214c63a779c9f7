from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import PageNotLoaded
from .base import BasePage, Locator
from .login import LoginPage

if TYPE_CHECKING:
    from ..driver import DriverCapability


class SecureAreaPage:
    """Landing page shown after a successful login."""

    path = "/secure"

    heading = Locator.css("#content .example h2")
    logout_link = Locator.css('a[href="/logout"]')

    def __init__(
        self,
        driver: DriverCapability,
        base_url: str = "",
        *,
        load_timeout: float = 5.0,
        navigate: bool = True,
    ) -> None:
        # navigate=False when the login redirect already brought us here
        self._base = BasePage(driver, base_url)
        if navigate:
            self._base.visit(self.path)
        if not self._base.wait_for_displayed(self.heading, timeout=load_timeout):
            raise PageNotLoaded(type(self).__name__, self.heading)

    def logout(self) -> LoginPage:
        self._base.click(self.logout_link)
        return LoginPage(self._base.driver, self._base.base_url, navigate=False)

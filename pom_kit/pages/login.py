from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import PageNotLoaded
from .base import BasePage, Locator

if TYPE_CHECKING:
    from ..driver import DriverCapability


class LoginPage:
    """The form-authentication page."""

    path = "/login"

    login_form = Locator.id("login")
    username_input = Locator.id("username")
    password_input = Locator.id("password")
    submit_button = Locator.css("button")
    success_message = Locator.css(".flash.success")
    failure_message = Locator.css(".flash.error")

    def __init__(
        self,
        driver: DriverCapability,
        base_url: str = "",
        *,
        load_timeout: float = 5.0,
        navigate: bool = True,
    ) -> None:
        # navigate=False adopts the page a redirect already landed on
        self._base = BasePage(driver, base_url)
        if navigate:
            self._base.visit(self.path)
        if not self._base.wait_for_displayed(self.login_form, timeout=load_timeout):
            raise PageNotLoaded(type(self).__name__, self.login_form)

    def authenticate(self, username: str, password: str) -> None:
        self._base.type(self.username_input, username)
        self._base.type(self.password_input, password)
        self._base.click(self.submit_button)

    def success_message_present(self) -> bool:
        return self._base.is_displayed(self.success_message)

    def failure_message_present(self) -> bool:
        return self._base.is_displayed(self.failure_message)

from __future__ import annotations

import contextlib
import logging
from typing import Iterator

from playwright.sync_api import Browser, BrowserContext, Playwright, sync_playwright

from pom_kit.configs import get_element_timeout_ms
from pom_kit.driver import PlaywrightDriver


logger = logging.getLogger(__name__)


def _context_args() -> dict:
    return {
        "java_script_enabled": True,
        "ignore_https_errors": True,
        "viewport": {"width": 1280, "height": 800},
    }


@contextlib.contextmanager
def launch(
    playwright: Playwright,
    chrome_bin: str | None = None,
    headless: bool = True,
) -> Iterator[Browser]:
    launch_args = {
        "headless": headless,
        "args": [
            "--disable-dev-shm-usage",
            "--no-sandbox",
            "--disable-gpu",
        ],
    }
    if chrome_bin:
        launch_args["executable_path"] = chrome_bin

    browser = playwright.chromium.launch(**launch_args)
    try:
        yield browser
    finally:
        browser.close()


@contextlib.contextmanager
def new_context(browser: Browser) -> Iterator[BrowserContext]:
    context = browser.new_context(**_context_args())
    try:
        yield context
    finally:
        context.close()


@contextlib.contextmanager
def pw() -> Iterator[Playwright]:
    p = sync_playwright().start()
    try:
        yield p
    finally:
        p.stop()


@contextlib.contextmanager
def session(
    chrome_bin: str | None = None,
    headless: bool = True,
    timeout_ms: int | None = None,
) -> Iterator[PlaywrightDriver]:
    """One browser session per test: yields a driver on a fresh page.

    Everything is torn down on exit, so page objects built from the driver
    must not be used after the block.
    """
    timeout = get_element_timeout_ms(timeout_ms)
    with pw() as p:
        with launch(p, chrome_bin=chrome_bin, headless=headless) as browser:
            with new_context(browser) as ctx:
                page = ctx.new_page()
                logger.debug("Browser session started (headless=%s)", headless)
                try:
                    yield PlaywrightDriver(page, timeout_ms=timeout)
                finally:
                    page.close()
                    logger.debug("Browser session closed")

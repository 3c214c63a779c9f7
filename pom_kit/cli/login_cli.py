from __future__ import annotations

import logging
import sys

import typer

from pom_kit.configs import get_base_url, get_chrome_executable, is_headless
from pom_kit.errors import PomKitError
from pom_kit.infra.browser import session
from pom_kit.pages.base import BasePage, Locator
from pom_kit.pages.login import LoginPage


app = typer.Typer(help="Run page objects by hand against a live site")


@app.callback()
def setup(verbose: bool = typer.Option(False, help="Verbose progress output")):
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command()
def login(
    username: str = typer.Argument(...),
    password: str = typer.Argument(...),
    base_url: str | None = typer.Option(None, help="Application base URL (default: BASE_URL env)"),
    bin: str | None = typer.Option(None, help="Chromium/Chrome executable path"),
    headed: bool = typer.Option(False, help="Show the browser window"),
):
    """Submit the login form and report whether it succeeded."""
    url = get_base_url(base_url)
    with session(chrome_bin=get_chrome_executable(bin), headless=is_headless(headed)) as driver:
        try:
            page = LoginPage(driver, url)
            page.authenticate(username, password)
            logged = page.success_message_present()
        except PomKitError as exc:
            typer.echo(f"Error: {exc}")
            raise typer.Exit(code=2)
    typer.echo(f"logged_in={logged}")
    if not logged:
        raise typer.Exit(code=1)


@app.command()
def visible(
    path: str = typer.Argument(..., help="Path or absolute URL to open"),
    selector: str = typer.Argument(..., help="CSS selector to check"),
    base_url: str | None = typer.Option(None, help="Application base URL (default: BASE_URL env)"),
    bin: str | None = typer.Option(None, help="Chromium/Chrome executable path"),
    headed: bool = typer.Option(False, help="Show the browser window"),
):
    """Open a page and report whether an element is displayed."""
    url = get_base_url(base_url)
    with session(chrome_bin=get_chrome_executable(bin), headless=is_headless(headed)) as driver:
        page = BasePage(driver, url)
        try:
            page.visit(path)
        except PomKitError as exc:
            typer.echo(f"Error: {exc}")
            raise typer.Exit(code=2)
        displayed = page.is_displayed(Locator.css(selector))
    typer.echo(f"displayed={displayed}")


def main():
    try:
        app()
    except Exception as e:
        typer.echo(f"Error: {e}")
        raise


if __name__ == "__main__":
    main()

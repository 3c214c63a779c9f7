import os


DEFAULT_BASE_URL = "http://the-internet.herokuapp.com"
DEFAULT_ELEMENT_TIMEOUT_MS = 5_000


def get_base_url(base_url: str | None = None) -> str:
    # explicit > env > default; the slash is dropped once so visit() can concatenate
    url = base_url or os.getenv("BASE_URL") or DEFAULT_BASE_URL
    return url.rstrip("/")


def get_chrome_executable(bin_path: str | None) -> str | None:
    return bin_path or os.getenv("CHROME_BIN") or None


def is_headless(headed: bool = False) -> bool:
    if headed:
        return False
    return os.getenv("HEADLESS", "true").strip().lower() not in ("0", "false", "no", "off")


def get_element_timeout_ms(timeout_ms: int | None = None) -> int:
    if timeout_ms is None:
        raw = os.getenv("ELEMENT_TIMEOUT_MS")
        if not raw:
            return DEFAULT_ELEMENT_TIMEOUT_MS
        try:
            timeout_ms = int(raw)
        except ValueError as exc:
            raise ValueError(f"ELEMENT_TIMEOUT_MS must be an integer, got {raw!r}") from exc
    if timeout_ms < 0:
        raise ValueError(f"element timeout must be >= 0, got {timeout_ms}")
    return timeout_ms

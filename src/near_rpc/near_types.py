from typing import Protocol, Awaitable, Mapping

# Keep this module dependency-free to avoid circular imports.

class HttpResponse(Protocol):
    """The two attributes of an HTTP response the transport reads."""

    @property
    def status_code(self) -> int:
        ...

    @property
    def content(self) -> bytes:
        ...


class HttpSender(Protocol):
    """Minimal protocol for the HTTP client used by the transport.

    Matches the subset of `httpx.AsyncClient` our code calls, so callers can
    inject their own configured client (timeouts, proxies, limits) or a mock
    in tests.
    """

    def post(
        self,
        url: str,
        *,
        content: bytes,
        headers: Mapping[str, str],
    ) -> Awaitable[HttpResponse]:
        ...

__all__ = ["HttpResponse", "HttpSender"]

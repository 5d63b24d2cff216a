import httpx

from typing import Any, Dict, Optional, Type, TypeVar

from .errors import (
    EmptyResultError,
    HttpError,
    InvalidResponseError,
    InvalidURLError,
    RequestTimeoutError,
    TransportError,
)
from .jsonrpc import decode_result, encode_request, new_request_id, parse_response, to_rpc_error
from .log import get_logger
from .near_types import HttpSender
from .naming import SNAKE_CASE, NamingStrategy

T = TypeVar("T")

logger = get_logger(__name__)

_HEADERS: Dict[str, str] = {"Content-Type": "application/json"}


def validate_base_url(url: str) -> str:
    """Return `url` unchanged if it is an absolute http(s) URL.

    Raises:
        InvalidURLError: for anything else.
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidURLError(str(url))
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise InvalidURLError(url) from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidURLError(url)
    return url


class JsonRpcTransport:
    """
    One JSON-RPC call per HTTP POST against a single endpoint.

    The transport keeps no per-call state: each call builds its own id and
    body, so one instance can serve any number of concurrent calls. Response
    ids are not matched against request ids; every call owns its own
    request/response pair at the HTTP level.

    Pass `http_client` to reuse a configured `httpx.AsyncClient` (timeouts,
    limits, proxies). It is left open by `aclose`; a client created here is
    closed by it.
    """

    def __init__(
        self,
        base_url: str,
        http_client: Optional[HttpSender] = None,
        naming: NamingStrategy = SNAKE_CASE,
    ):
        self.base_url = validate_base_url(base_url)
        self.naming = naming
        self._owns_http = http_client is None
        self._http: HttpSender = http_client if http_client is not None else httpx.AsyncClient()

    async def call(self, method: str, params: Any, result_type: Type[T]) -> T:
        """
        Execute `method` with `params` and decode its result as `result_type`.

        Raises:
            RequestTimeoutError: the HTTP client timed out.
            TransportError: the HTTP exchange failed.
            HttpError: non-200 status with no JSON-RPC envelope in the body.
            InvalidResponseError: 200 status with no JSON-RPC envelope in the body.
            NearRpcError: the node returned a JSON-RPC error (whatever the status).
            EmptyResultError: neither `result` nor `error` was present.
            ResultDecodeError: `result` did not match `result_type`.
        """
        request_id = new_request_id()
        body = encode_request(method, params, request_id=request_id, naming=self.naming)
        logger.debug("→ %s id=%s", method, request_id)

        try:
            response = await self._http.post(self.base_url, content=body, headers=_HEADERS)
        except httpx.TimeoutException as e:
            logger.warning("%s timed out against %s: %s", method, self.base_url, e)
            raise RequestTimeoutError(f"Request to {self.base_url} timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.warning("%s failed against %s: %s", method, self.base_url, e, exc_info=True)
            raise TransportError(f"HTTP request to {self.base_url} failed: {e}") from e
        except OSError as e:
            # senders other than httpx surface socket failures as-is
            logger.warning("%s failed against %s: %s", method, self.base_url, e, exc_info=True)
            raise TransportError(f"HTTP request to {self.base_url} failed: {e}") from e

        logger.debug("← %s id=%s status=%s", method, request_id, response.status_code)
        return self._decode(method, response.status_code, response.content, result_type)

    def _decode(self, method: str, status: int, content: bytes, result_type: Type[T]) -> T:
        # JSON-RPC errors win over the HTTP status: nodes answer some of them
        # with 4xx/5xx and a perfectly valid envelope.
        try:
            envelope = parse_response(content)
        except ValueError as e:
            if status != 200:
                logger.warning("%s: HTTP %s without a JSON-RPC body", method, status)
                raise HttpError(status, content) from e
            logger.warning("%s: undecodable response body: %s", method, e)
            raise InvalidResponseError(
                f"Invalid response from server: {e}", status_code=status, body=content
            ) from e

        if envelope.error is not None:
            error = to_rpc_error(envelope.error)
            logger.info("%s returned RPC error %s: %s", method, error.code, error.message)
            raise error

        if status != 200:
            logger.warning("%s: HTTP %s with an error-free envelope", method, status)
            raise HttpError(status, content)

        if envelope.result is None:
            raise EmptyResultError()

        return decode_result(envelope.result, result_type, self.naming)

    async def aclose(self) -> None:
        if self._owns_http and isinstance(self._http, httpx.AsyncClient):
            await self._http.aclose()

    async def __aenter__(self) -> "JsonRpcTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

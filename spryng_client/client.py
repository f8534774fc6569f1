import asyncio
import re
from concurrent.futures import ThreadPoolExecutor
from typing import Awaitable, Dict, Optional, TypeVar

import httpx
import structlog

from .config import ClientConfig
from .encoding import encode_body
from .exceptions import GatewayError, ParseError, TransportError, describe_error_code
from .models import Credentials, KeyAuth, PasswordAuth, SendResult, SmsRequest
from .request_builder import validate

T = TypeVar("T")

logger = structlog.get_logger(__name__)

SUCCESS_CODE = 1
CREDIT_AUTH_FAILURE = -1

_DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]{1,3}(,[0-9]{3})+|[0-9]+)(\.[0-9]+)?|[+-]?\.[0-9]+")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_credit_amount(body: str) -> float:
    """Parse a credit balance written with a period decimal point."""
    text = body.strip()
    if not _DECIMAL_PATTERN.fullmatch(text):
        raise ParseError(f"Credit amount is not a number: {text!r}", body=body)
    return float(text.replace(",", ""))


def parse_status_code(body: str) -> int:
    text = body.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ParseError(f"Send status is not an integer: {text!r}", body=body)
    return int(text)


def _run_blocking(awaitable: Awaitable[T]) -> T:
    """
    Run a coroutine to completion from synchronous code.

    The coroutine's own exception is raised, never a wrapper around it.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(awaitable)
    # Called from inside an event loop: block on a separate loop in a worker thread
    with ThreadPoolExecutor(max_workers=1) as executor:
        return executor.submit(asyncio.run, awaitable).result()


class GatewayClient:
    """
    HTTP client for the Spryng SMS gateway.

    Features:
    - Password or API key authentication.
    - Request validation before anything is sent.
    - Gateway-specific percent-encoding with Latin-1 or UTF-8 bodies.
    - Status code mapping to typed exceptions.

    Every operation issues exactly one POST and never retries. A client
    holds no per-call state and can be shared between callers.
    """

    def __init__(
        self,
        username: str,
        secret: str,
        use_api_key: bool = False,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if use_api_key:
            self.credentials: Credentials = KeyAuth(username, secret)
        else:
            self.credentials = PasswordAuth(username, secret)
        self.config = config or ClientConfig()
        self._transport = transport

    @classmethod
    def with_password(cls, username: str, password: str, **kwargs) -> "GatewayClient":
        return cls(username, password, use_api_key=False, **kwargs)

    @classmethod
    def with_api_key(cls, username: str, api_key: str, **kwargs) -> "GatewayClient":
        return cls(username, api_key, use_api_key=True, **kwargs)

    def __repr__(self) -> str:
        return f"GatewayClient(credentials={self.credentials!r}, base_url={self.config.base_url!r})"

    def _headers(self, charset: str) -> Dict[str, str]:
        return {
            "User-Agent": self.config.user_agent,
            "Content-Type": f"application/x-www-form-urlencoded; charset={charset}",
        }

    async def _post(self, path: str, fields: Dict[str, str]) -> str:
        """POST a field map and return the response text."""
        body, charset = encode_body(fields)
        try:
            async with httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(path, content=body, headers=self._headers(charset))
                response.raise_for_status()
                return response.text
        except httpx.TimeoutException as e:
            raise TransportError(f"Request to {path} timed out") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise TransportError(f"HTTP {status} error from {path}", status_code=status) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {path} failed: {e}") from e

    async def get_credit_amount_async(self) -> float:
        """
        Get the credit balance of the authenticated account.

        Raises:
            GatewayError: The gateway rejected the credentials (code -1)
            ParseError: The response was not a number
            TransportError: The HTTP request failed
        """
        text = await self._post(self.config.check_path, self.credentials.auth_fields())
        credits = parse_credit_amount(text)
        if credits == CREDIT_AUTH_FAILURE:
            logger.warning("Credit check rejected", code=CREDIT_AUTH_FAILURE)
            raise GatewayError(CREDIT_AUTH_FAILURE)
        logger.debug("Credit check completed", credits=credits)
        return credits

    def get_credit_amount(self) -> float:
        """Blocking version of get_credit_amount_async."""
        return _run_blocking(self.get_credit_amount_async())

    async def execute_sms_request_async(self, request: SmsRequest) -> SendResult:
        """
        Validate and send an SMS request.

        Args:
            request: The request to send

        Returns:
            SendResult for the accepted request

        Raises:
            ValidationError: The request broke a field rule; nothing was sent
            GatewayError: The gateway refused the request
            ParseError: The response was not an integer status
            TransportError: The HTTP request failed
        """
        request_fields = validate(request)

        fields = {"OPERATION": "send"}
        fields.update(self.credentials.auth_fields())
        fields.update(request_fields)

        text = await self._post(self.config.send_path, fields)
        code = parse_status_code(text)
        if code != SUCCESS_CODE:
            logger.warning("SMS rejected by gateway", code=code, reason=describe_error_code(code))
            raise GatewayError(code)

        logger.info(
            "SMS accepted by gateway",
            destinations=len(request.destinations),
            route=fields["ROUTE"],
            reference=request.reference,
        )
        return SendResult(
            status_code=code,
            destinations=request.destinations,
            reference=request.reference or None,
        )

    def execute_sms_request(self, request: SmsRequest) -> SendResult:
        """Blocking version of execute_sms_request_async."""
        return _run_blocking(self.execute_sms_request_async(request))

"""HTTP client for the acquiring bank authorization endpoint."""

import uuid

import httpx
import structlog

from payment_gateway.clients.base import AcquiringBankClient
from payment_gateway.models import (
    AcquiringBankError,
    AuthorizationRequest,
    AuthorizationResult,
    AuthorizationStatus,
)

logger = structlog.get_logger(__name__)


class HttpAcquiringBankClient(AcquiringBankClient):
    """
    Client for the acquiring bank's JSON authorization API.

    Response mapping:
    - 400 -> BAD_REQUEST
    - 503 -> UNAVAILABLE
    - any other non-2xx -> AcquiringBankError
    - 2xx with "authorized": true -> AUTHORIZED (with authorization_code)
    - 2xx otherwise, including an unreadable body -> DECLINED
    """

    def __init__(
        self,
        base_url: str,
        endpoint: str = "/payments",
        timeout_seconds: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the acquiring bank client.

        Args:
            base_url: Base URL of the bank (e.g., "http://localhost:8080")
            endpoint: Authorization path appended to base_url
            timeout_seconds: Request timeout in seconds (default: 10.0)
            http_client: Optional pre-built httpx client (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.endpoint = "/" + endpoint.lstrip("/")
        self.timeout_seconds = timeout_seconds
        self.http_client = http_client or httpx.AsyncClient(timeout=timeout_seconds)

        logger.info(
            "acquiring_bank_client_initialized",
            base_url=self.base_url,
            endpoint=self.endpoint,
            timeout_seconds=timeout_seconds,
        )

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.endpoint}"

    async def close(self) -> None:
        """Close the HTTP client connection pool."""
        await self.http_client.aclose()

    async def authorize(self, request: AuthorizationRequest) -> AuthorizationResult:
        correlation_id = str(uuid.uuid4())

        logger.info(
            "bank_authorization_request",
            card_last4=request.card_number[-4:],
            amount=request.amount,
            currency=request.currency,
            correlation_id=correlation_id,
            url=self.url,
        )

        try:
            response = await self.http_client.post(
                self.url,
                json=request.to_dict(),
                headers={"X-Request-ID": correlation_id},
            )
        except httpx.TimeoutException as e:
            logger.error(
                "bank_authorization_timeout",
                correlation_id=correlation_id,
                error=str(e),
            )
            raise AcquiringBankError("Acquiring bank timeout") from e
        except httpx.RequestError as e:
            # Network errors, connection errors, etc.
            logger.error(
                "bank_authorization_request_error",
                correlation_id=correlation_id,
                error=str(e),
            )
            raise AcquiringBankError(f"Acquiring bank request error: {e}") from e

        if response.status_code == 400:
            logger.warning("bank_bad_request", correlation_id=correlation_id)
            return AuthorizationResult(status=AuthorizationStatus.BAD_REQUEST)

        if response.status_code == 503:
            logger.warning("bank_unavailable", correlation_id=correlation_id)
            return AuthorizationResult(status=AuthorizationStatus.UNAVAILABLE)

        if not response.is_success:
            logger.error(
                "bank_unexpected_status",
                status_code=response.status_code,
                correlation_id=correlation_id,
            )
            raise AcquiringBankError(
                f"Acquiring bank returned unexpected status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError:
            logger.warning("bank_response_unreadable", correlation_id=correlation_id)
            body = None

        if isinstance(body, dict) and body.get("authorized") is True:
            authorization_code = body.get("authorization_code")
            logger.info(
                "bank_authorization_success",
                correlation_id=correlation_id,
                authorization_code=authorization_code,
            )
            return AuthorizationResult(
                status=AuthorizationStatus.AUTHORIZED,
                authorization_code=authorization_code,
            )

        logger.info("bank_authorization_declined", correlation_id=correlation_id)
        return AuthorizationResult(status=AuthorizationStatus.DECLINED)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

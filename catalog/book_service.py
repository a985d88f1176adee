"""
Book projection service.
Fetches the Lord of the Rings book catalog from the-one-api.dev and reduces
every record to its title.
"""

import time
from typing import List, Optional

import httpx
import structlog

from .exceptions import GENERIC_FETCH_ERROR, UpstreamRejectedError, UpstreamTransportError
from .models import ProjectedBook, UpstreamEnvelope
from utilities.logger import UpstreamLogger

logger = structlog.get_logger(__name__)

UPSTREAM_BOOKS_URL = "https://the-one-api.dev/v2/book?limit=100"


def project_books(
    envelope: UpstreamEnvelope,
    upstream_logger: Optional[UpstreamLogger] = None
) -> List[ProjectedBook]:
    """
    Reduce every upstream record to ``{"name": ...}``, keeping upstream order.

    Records without a name are projected with an empty title.
    """
    books = []
    for position, record in enumerate(envelope.docs):
        if record.name is None:
            if upstream_logger:
                upstream_logger.log_missing_name(position)
            books.append(ProjectedBook(name=""))
        else:
            books.append(ProjectedBook(name=record.name))
    return books


class BookProjectionService:
    """
    Proxies the upstream book list. Holds no state besides its HTTP client.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        upstream_url: str = UPSTREAM_BOOKS_URL,
        expose_transport_errors: bool = True
    ):
        """
        Initialize the service.

        Args:
            client: HTTP client used for the upstream call. Owned by the caller.
            upstream_url: Full URL of the upstream book list
            expose_transport_errors: Forward the raw transport failure message
                to callers. When False they get the generic message instead.
        """
        self.client = client
        self.upstream_url = upstream_url
        self.expose_transport_errors = expose_transport_errors

        if expose_transport_errors:
            logger.warning(
                "Transport error messages are forwarded to API callers",
                setting="expose_transport_errors"
            )

    async def fetch_books(self) -> List[ProjectedBook]:
        """
        Fetch the upstream book list and project it.

        Returns:
            Projected books in upstream order

        Raises:
            UpstreamRejectedError: upstream answered with a non-2xx status
            UpstreamTransportError: the request failed or the body could not be decoded
        """
        start_time = time.monotonic()
        upstream_logger = UpstreamLogger("book_service").bind_context(upstream_url=self.upstream_url)
        upstream_logger.log_request()

        try:
            response = await self.client.get(self.upstream_url)
        except Exception as e:
            raise self._transport_error(e, upstream_logger)

        if not response.is_success:
            upstream_logger.log_rejected(response.status_code, response.text)
            raise UpstreamRejectedError(response.status_code)

        try:
            envelope = UpstreamEnvelope.from_payload(response.json())
        except Exception as e:
            raise self._transport_error(e, upstream_logger)

        books = project_books(envelope, upstream_logger)
        upstream_logger.log_projected(len(books), time.monotonic() - start_time)
        return books

    def _transport_error(self, error: Exception, upstream_logger: UpstreamLogger) -> UpstreamTransportError:
        """Log a failure and wrap it for the caller."""
        message = str(error) or error.__class__.__name__
        upstream_logger.log_transport_error(message)
        if not self.expose_transport_errors:
            return UpstreamTransportError(GENERIC_FETCH_ERROR)
        return UpstreamTransportError(message)

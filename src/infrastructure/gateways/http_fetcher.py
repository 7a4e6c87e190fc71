import asyncio
import logging
from typing import Awaitable, Callable, Optional

import httpx
from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    RetryError,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_incrementing,
)

from src.core.config import FetcherSettings
from src.core.entities.leaderboard import ApiResponse
from src.core.errors import FetchError, FetchErrorKind

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[None]]


def build_client(settings: Optional[FetcherSettings] = None) -> httpx.AsyncClient:
    """
    Creates the connection-pooled client shared by every fetch in a run.
    The caller owns it and is responsible for closing it.
    """
    settings = settings or FetcherSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout_seconds),
    )


class HttpFetcher:
    """
    GETs a leaderboard URL and decodes the JSON envelope into an ApiResponse.

    Only transport failures (timeouts, DNS, refused connections) are retried,
    with a linear backoff of 1s, 2s, ... between attempts. A non-200 status or
    an undecodable body means the server answered, so those fail at once.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        settings: Optional[FetcherSettings] = None,
        sleep: SleepFn = asyncio.sleep,
    ):
        self.client = client
        self.settings = settings or FetcherSettings()
        self._sleep = sleep

    async def _get(self, url: str) -> httpx.Response:
        # Deadline covers the whole attempt, body included, not each phase
        deadline = self.settings.timeout_seconds
        try:
            return await asyncio.wait_for(
                self.client.get(
                    url,
                    headers={"User-Agent": self.settings.user_agent},
                    timeout=deadline,
                ),
                deadline,
            )
        except asyncio.TimeoutError as e:
            raise httpx.TimeoutException(f"no complete response from {url} within {deadline}s") from e

    async def fetch(self, url: str) -> ApiResponse:
        retry_limit = self.settings.retry_limit
        retrying = AsyncRetrying(
            stop=stop_after_attempt(retry_limit),
            wait=wait_incrementing(start=1, increment=1),
            retry=retry_if_exception_type(httpx.TransportError),
            sleep=self._sleep,
            before_sleep=before_sleep_log(logger, logging.WARNING),
        )

        try:
            resp = await retrying(self._get, url)
        except RetryError as e:
            last_error = e.last_attempt.exception()
            logger.error(f"Giving up on {url} after {retry_limit} attempts: {last_error!r}")
            raise FetchError(
                FetchErrorKind.RETRIES_EXHAUSTED,
                url,
                f"failed to send request to {url} after {retry_limit} attempts: {last_error!r}",
            ) from last_error

        if resp.status_code != 200:
            logger.error(f"Unexpected status {resp.status_code} from {url}")
            raise FetchError(
                FetchErrorKind.BAD_STATUS,
                url,
                f"unexpected status code: {resp.status_code}\nResponse body: {resp.text}",
                status_code=resp.status_code,
                body=resp.text,
            )

        try:
            return ApiResponse.model_validate_json(resp.content)
        except ValidationError as e:
            raise FetchError(
                FetchErrorKind.DECODE_ERROR,
                url,
                f"failed to decode JSON response from {url}: {e}",
                status_code=resp.status_code,
            ) from e

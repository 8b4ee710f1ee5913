import json
import time
from collections.abc import Iterator

import httpx

from certifier.logging.logger import Log
from certifier.storage.base import BaseBlobStore
from certifier.storage.exceptions import (
    InvalidStoreResponseError,
    NetworkUnavailableError,
    PayloadTooLargeError,
    StoreRejectedError,
    UploadTimeoutError,
)
from certifier.storage.identifier import extract_blob_id
from certifier.storage.models import StoredBlob
from certifier.storage.policy import MAX_UPLOAD_BYTES, MIB, upload_timeout_seconds


class _DeadlineExceeded(Exception):
    """Raised from the request body iterator once the upload allowance is spent."""


class WalrusClientAdapter(BaseBlobStore):
    """Blob store adapter for the Walrus publisher/aggregator HTTP API."""

    BLOBS_PATH = "/v1/blobs"
    CHUNK_SIZE = 64 * 1024

    def __init__(
        self,
        *,
        publisher_url: str,
        aggregator_url: str,
        base_timeout_seconds: float,
        timeout_per_mib_seconds: float,
        download_timeout_seconds: float = 30.0,
        max_bytes: int = MAX_UPLOAD_BYTES,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._publisher_url = publisher_url.rstrip("/")
        self._aggregator_url = aggregator_url.rstrip("/")
        self._base_timeout_seconds = base_timeout_seconds
        self._timeout_per_mib_seconds = timeout_per_mib_seconds
        self._download_timeout_seconds = download_timeout_seconds
        self._max_bytes = max_bytes
        self._client = httpx.Client(transport=transport)

    def store(self, data: bytes, *, size: int, content_type: str) -> StoredBlob:
        """Upload ``data`` within a size-scaled wall-clock allowance.

        The allowance covers the whole exchange: sending the body, waiting
        for the status line and reading the reply. It is checked between
        body chunks in both directions and once more when the reply is
        complete, so a reply that arrives after the deadline is a timeout,
        never a success. Each individual socket operation is additionally
        bounded by the full allowance through ``httpx.Timeout``.
        """
        size = max(size, len(data))
        if size > self._max_bytes:
            raise PayloadTooLargeError(size, self._max_bytes)

        timeout = upload_timeout_seconds(
            size,
            base_seconds=self._base_timeout_seconds,
            per_mib_seconds=self._timeout_per_mib_seconds,
        )
        url = f"{self._publisher_url}{self.BLOBS_PATH}"
        Log.info(f"Uploading {size} bytes to {url}", size=size, timeout=round(timeout, 1))

        started = time.monotonic()
        deadline = started + timeout
        try:
            with self._client.stream(
                "PUT",
                url,
                content=self._body(data, deadline),
                headers={"Content-Type": content_type, "Content-Length": str(len(data))},
                timeout=httpx.Timeout(timeout),
            ) as response:
                status_code = response.status_code
                body = self._read_reply(response, deadline)
                encoding = response.charset_encoding or "utf-8"
                succeeded = response.is_success
            if time.monotonic() > deadline:
                raise _DeadlineExceeded
        except (_DeadlineExceeded, httpx.TimeoutException) as exc:
            raise UploadTimeoutError(size, timeout, time.monotonic() - started) from exc
        except httpx.RequestError as exc:
            raise NetworkUnavailableError(
                f"Network error - could not connect to blob store at {url}: {exc}"
            ) from exc
        elapsed = time.monotonic() - started
        Log.info(f"Blob store responded with status {status_code} after {elapsed:.2f}s")

        text = body.decode(encoding, errors="replace")
        if not succeeded:
            raise StoreRejectedError(status_code, text)

        try:
            payload = json.loads(body)
        except ValueError as exc:
            raise InvalidStoreResponseError(text) from exc
        Log.debug(f"Blob store response: {payload!r}")

        blob_id = extract_blob_id(payload)
        Log.info(f"Stored {size / MIB:.2f} MiB as blob {blob_id}")
        return StoredBlob(blob_id=blob_id, size_bytes=size, elapsed_seconds=elapsed)

    def fetch(self, blob_id: str) -> bytes:
        url = self.blob_url(blob_id)
        try:
            response = self._client.get(url, timeout=self._download_timeout_seconds)
        except httpx.RequestError as exc:
            raise NetworkUnavailableError(f"Could not fetch blob {blob_id} from {url}: {exc}") from exc
        if not response.is_success:
            raise StoreRejectedError(response.status_code, response.text)
        return response.content

    def blob_url(self, blob_id: str) -> str:
        return f"{self._aggregator_url}{self.BLOBS_PATH}/{blob_id}"

    def close(self) -> None:
        self._client.close()

    def _body(self, data: bytes, deadline: float) -> Iterator[bytes]:
        view = memoryview(data)
        for offset in range(0, len(data), self.CHUNK_SIZE):
            if time.monotonic() > deadline:
                raise _DeadlineExceeded
            yield bytes(view[offset : offset + self.CHUNK_SIZE])

    @staticmethod
    def _read_reply(response: httpx.Response, deadline: float) -> bytes:
        chunks: list[bytes] = []
        for chunk in response.iter_bytes():
            if time.monotonic() > deadline:
                raise _DeadlineExceeded
            chunks.append(chunk)
        return b"".join(chunks)

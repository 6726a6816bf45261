"""Minimal client for the Cloudinary upload and admin REST APIs.

Upload and destroy calls are signed: the request parameters, sorted by name
and joined as ``k=v&...``, are concatenated with the API secret and hashed
with SHA-1. Admin calls use HTTP basic auth with the key pair.
"""

import hashlib
import time
from typing import Any

import httpx

from storefront_api.core.application.exceptions import ImageProcessingError, StorageError
from storefront_api.infrastructure.common.retry import RetryPolicy
from storefront_api.infrastructure.configuration.media_settings import MediaSettings
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)
from storefront_api.infrastructure.observability.redaction_service import (
    redact_dict,
    redact_text,
)

logger = LoggerFactoryService.build_logger(__name__)

API_BASE_URL = "https://api.cloudinary.com/v1_1"
UNSIGNED_PARAMS = {"file", "api_key", "resource_type", "cloud_name"}


class CloudinaryApiError(StorageError):
    def __init__(self, status: int, detail: str):
        super().__init__("Cloud storage request failed", [detail])
        self.status = status
        self.retryable = status == 429 or status >= 500


def _retryable(exc: BaseException) -> bool:
    if isinstance(exc, httpx.TransportError):
        return True
    return isinstance(exc, CloudinaryApiError) and exc.retryable


def sign_params(params: dict[str, Any], api_secret: str) -> str:
    payload = "&".join(
        f"{key}={params[key]}"
        for key in sorted(params)
        if key not in UNSIGNED_PARAMS and params[key] not in (None, "")
    )
    return hashlib.sha1(f"{payload}{api_secret}".encode()).hexdigest()


class CloudinaryClient:
    def __init__(self, settings: MediaSettings) -> None:
        if not settings.cloudinary_configured:
            raise ValueError("Cloudinary credentials are not configured")
        self.cloud_name = settings.cloudinary_cloud_name
        self.api_key = settings.cloudinary_api_key
        self.api_secret = settings.cloudinary_api_secret.get_secret_value()
        self.base_url = f"{API_BASE_URL}/{self.cloud_name}"
        self.timeout = settings.cloudinary_timeout_seconds
        self.retry_policy = RetryPolicy(
            max_attempts=settings.cloudinary_max_attempts, is_retryable=_retryable
        )

    def upload(self, data: bytes, filename: str, public_id: str) -> dict[str, Any]:
        """Uploads an image under ``public_id``. Returns the upload resource."""
        params = self._signed({"public_id": public_id, "overwrite": "false"})
        return self._call(
            "upload",
            lambda client: client.post(
                f"{self.base_url}/image/upload", data=params, files={"file": (filename, data)}
            ),
            params,
        )

    def destroy(self, public_id: str) -> bool:
        params = self._signed({"public_id": public_id, "invalidate": "true"})
        result = self._call(
            "destroy",
            lambda client: client.post(f"{self.base_url}/image/destroy", data=params),
            params,
        )
        return result.get("result") == "ok"

    def usage(self) -> dict[str, Any]:
        return self._call(
            "usage",
            lambda client: client.get(
                f"{self.base_url}/usage", auth=(self.api_key, self.api_secret)
            ),
        )

    def _signed(self, params: dict[str, Any]) -> dict[str, Any]:
        signed = {**params, "timestamp": str(int(time.time()))}
        signed["signature"] = sign_params(signed, self.api_secret)
        signed["api_key"] = self.api_key
        return signed

    def _call(self, operation: str, send, params: dict[str, Any] | None = None) -> dict[str, Any]:
        def attempt() -> dict[str, Any]:
            logger.info(f"Cloudinary {operation} request {redact_dict(params or {})}")
            with httpx.Client(timeout=self.timeout) as client:
                response = send(client)
            return self._parse(response)

        try:
            return self.retry_policy.run(attempt)
        except httpx.HTTPError as e:
            logger.error(f"Cloudinary {operation} failed: {redact_text(str(e))}")
            raise StorageError(
                "Cloud storage request failed", [f"Cloudinary {operation} failed: {e}"]
            ) from e

    @staticmethod
    def _parse(response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            body = {}
        if response.is_success:
            return body
        detail = (body.get("error") or {}).get("message") or response.reason_phrase
        logger.warning(f"Cloudinary answered {response.status_code}: {redact_text(detail)}")
        if response.status_code == 400:
            # the service rejects files it cannot decode with a 400
            raise ImageProcessingError("Image processing failed", [detail])
        raise CloudinaryApiError(response.status_code, detail)

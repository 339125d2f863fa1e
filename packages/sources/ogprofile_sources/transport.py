"""HTTP download helpers for remote speaker and logo images."""

from __future__ import annotations

import os
import ssl
import urllib.error
import urllib.request

import certifi

from ogprofile_core.errors import RemoteFetchError
from ogprofile_core.logging_setup import get_logger

DEFAULT_USER_AGENT = "OgProfile/0.1 (+https://morespeakers.com)"
DEFAULT_TIMEOUT_S = 30

logger = get_logger("transport")


def _build_ssl_context() -> ssl.SSLContext:
    """Create TLS context for image downloads with explicit CA handling."""
    if os.environ.get("OGPROFILE_ALLOW_INSECURE_TLS", "").strip() == "1":
        return ssl._create_unverified_context()

    ca_bundle = os.environ.get("OGPROFILE_CA_BUNDLE", "").strip()
    if ca_bundle:
        return ssl.create_default_context(cafile=ca_bundle)

    return ssl.create_default_context(cafile=certifi.where())


def _urlopen(url: str, timeout: int, user_agent: str = DEFAULT_USER_AGENT, accept: str = "image/*,*/*;q=0.8"):
    request = urllib.request.Request(
        url,
        headers={
            "User-Agent": user_agent,
            "Accept": accept,
        },
    )
    return urllib.request.urlopen(request, timeout=timeout, context=_build_ssl_context())


def fetch_bytes(url: str, timeout_s: int = DEFAULT_TIMEOUT_S, user_agent: str = DEFAULT_USER_AGENT) -> bytes:
    """Download ``url`` and return the body. Non-success responses raise ``RemoteFetchError``."""
    try:
        with _urlopen(url, timeout=timeout_s, user_agent=user_agent) as response:
            status = getattr(response, "status", 200)
            if not 200 <= int(status) < 300:
                raise RemoteFetchError(url, status=int(status))
            body = response.read()
    except urllib.error.HTTPError as exc:
        logger.warning(
            f"fetch failed url={url} status={exc.code}",
            extra={"event": "fetch_failed", "url": url, "status": exc.code},
        )
        raise RemoteFetchError(url, status=exc.code) from exc
    except urllib.error.URLError as exc:
        logger.warning(
            f"fetch failed url={url} reason={exc.reason}",
            extra={"event": "fetch_failed", "url": url},
        )
        raise RemoteFetchError(url, reason=str(exc.reason)) from exc

    logger.debug(f"fetched {len(body)} bytes from {url}")
    return body

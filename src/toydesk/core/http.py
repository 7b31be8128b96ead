"""Shared httpx client factory.

Some Python builds fail SSL verification with httpx's default context.
Passing an explicit ``ssl.create_default_context()`` loads the system
certificate store instead.
"""

from __future__ import annotations

import ssl
from typing import Any

import httpx

from toydesk import __version__

DEFAULT_USER_AGENT = f"toydesk/{__version__}"


def _ssl_context() -> ssl.SSLContext:
    """Return an SSL context backed by the system cert store."""
    return ssl.create_default_context()


def make_httpx_client(**kwargs: Any) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` with system SSL verification.

    Accepts the same keyword arguments as ``httpx.AsyncClient``.
    If ``verify`` is not explicitly provided, uses the system SSL context.
    Sets the toydesk User-Agent unless the caller supplies one.
    """
    if "transport" not in kwargs:
        kwargs.setdefault("verify", _ssl_context())
    headers = dict(kwargs.pop("headers", None) or {})
    headers.setdefault("User-Agent", DEFAULT_USER_AGENT)
    kwargs["headers"] = headers
    return httpx.AsyncClient(**kwargs)

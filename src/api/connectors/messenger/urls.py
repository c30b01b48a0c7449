"""Montagem de URLs da Graph API.

Centraliza percent-encoding de segmentos de path e query string.
O access_token sempre viaja como query param.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping


def build_graph_url(
    base_url: str,
    *segments: str,
    query: Mapping[str, str | None] | None = None,
) -> str:
    """Monta URL absoluta a partir de base, segmentos e query.

    Args:
        base_url: Host + versão (ex: https://graph.facebook.com/v3.1)
        segments: Segmentos de path, codificados individualmente
        query: Query params; valores None são omitidos

    Returns:
        URL completa já codificada
    """
    path = "/".join(quote(segment, safe="") for segment in segments)
    params = {key: value for key, value in (query or {}).items() if value is not None}
    url = httpx.URL(f"{base_url.rstrip('/')}/{path}", params=params)
    return str(url)


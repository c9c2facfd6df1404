"""
HTTP plumbing shared by the client data-access objects
"""

from typing import Any, Optional

import httpx

from jargon_buster.client.config import ClientSettings
from jargon_buster.client.errors import ClientError


def build_http_client(
    settings: ClientSettings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """One shared client per app; every request carries the public key."""
    return httpx.AsyncClient(
        base_url=settings.store_url,
        headers={"apikey": settings.store_public_key},
        transport=transport,
    )


def bearer(access_token: Optional[str]) -> dict[str, str]:
    return {"Authorization": f"Bearer {access_token}"} if access_token else {}


def error_message(response: httpx.Response) -> str:
    """Best human-readable message from an error response"""
    try:
        body: Any = response.json()
    except ValueError:
        return response.text or response.reason_phrase

    if not isinstance(body, dict) or "error" not in body:
        return response.reason_phrase
    message = str(body["error"])
    details = body.get("details")
    if isinstance(details, list) and details and isinstance(details[0], dict) and "msg" in details[0]:
        message = f"{message}: {details[0]['msg']}"
    return message


async def send(
    http: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    error_cls: type[ClientError],
    **kwargs: Any,
) -> httpx.Response:
    """Issue a request, turning transport failures and non-2xx replies into error_cls"""
    try:
        response = await http.request(method, url, **kwargs)
    except httpx.HTTPError as e:
        raise error_cls(str(e) or type(e).__name__) from e

    if response.is_error:
        raise error_cls(error_message(response), status_code=response.status_code)
    return response

"""
Posty5 API credential.

A single API key, sent as the X-API-Key header on every API call.
The connection test lists one short link.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from src.node_registry.models import CredentialDefinition
from src.posty5.config import Settings

from .constants import CREDENTIAL_NAME, SHORT_LINK
from .transport import Posty5ApiError, Posty5Gateway, RequestDescriptor


POSTY5_API_CREDENTIAL = CredentialDefinition(
    name=CREDENTIAL_NAME,
    display_name="Posty5 API",
    description="API key from the Posty5 dashboard",
    documentation_url="https://posty5.com",
    properties=[
        {
            "displayName": "API Key",
            "name": "apiKey",
            "type": "string",
            "typeOptions": {"password": True},
            "default": "",
            "required": True,
            "description": "Your Posty5 API key",
        },
    ],
    auth_type="generic",
)

# Request issued by check_credentials()
CREDENTIAL_TEST_REQUEST = RequestDescriptor(
    method="GET",
    path=SHORT_LINK,
    query={"page": 1, "pageSize": 1},
)


def check_credentials(
    credentials: Dict[str, Any],
    settings: Optional[Settings] = None,
) -> Dict[str, str]:
    """
    Check an API key against the live API.

    Returns:
        {"status": "OK", "message": ...} or {"status": "Error", "message": ...}
    """
    gateway = Posty5Gateway(api_key=credentials.get("apiKey", ""), settings=settings)
    try:
        gateway.send(CREDENTIAL_TEST_REQUEST)
    except Posty5ApiError as e:
        return {"status": "Error", "message": e.message}
    return {"status": "OK", "message": "Connection successful"}


import logging
import os
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse

from vkauth.config import load_client_config
from vkauth.errors import BadCodeError
from vkauth.masking import mask_secrets
from vkauth.vk_client import VKClient


logger = logging.getLogger(__name__)


def get_vk_client() -> VKClient:
    """Create a VKClient configured from the environment."""
    return VKClient(load_client_config())


router = APIRouter()


@router.get("/login")
def login(client: VKClient = Depends(get_vk_client)) -> RedirectResponse:
    """Redirect the user to the VK authorization dialog."""
    return RedirectResponse(client.dialog_url())


@router.get("/callback")
def callback(request: Request, client: VKClient = Depends(get_vk_client)):
    """Handle the VK redirect: exchange the code for a token and look up the user.

    When FRONTEND_URL is set the token is forwarded there in the query string,
    otherwise the token and the user's name are returned as JSON.
    """
    error = request.query_params.get("error")
    if error:
        detail = request.query_params.get("error_description") or error
        raise HTTPException(status_code=400, detail=detail)

    try:
        token = client.get_access_token(str(request.url))
    except BadCodeError:
        raise HTTPException(status_code=400, detail="Missing authorization code")
    except Exception as exc:
        logger.warning("vk_token_exchange_failed reason=%s", mask_secrets(str(exc)))
        raise HTTPException(status_code=502, detail="Token exchange failed") from exc

    try:
        user = client.get_user(token.user_id)
    except Exception as exc:
        logger.warning(
            "vk_user_lookup_failed user_id=%s reason=%s", token.user_id, mask_secrets(str(exc))
        )
        raise HTTPException(status_code=502, detail="Profile lookup failed") from exc

    frontend_url = os.getenv("FRONTEND_URL")
    if frontend_url:
        query = urlencode(
            {
                "access_token": token.access_token,
                "expires_in": str(token.expires_in),
                "user_id": str(token.user_id),
            }
        )
        return RedirectResponse(f"{frontend_url}?{query}")

    return JSONResponse(
        {
            "access_token": token.access_token,
            "expires_in": token.expires_in,
            "user_id": token.user_id,
            "email": token.email,
            "name": user.name,
        }
    )

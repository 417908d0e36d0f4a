from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Protocol
from urllib.parse import parse_qs, urlencode, urlsplit

import requests

from vkauth.errors import BadCodeError, BadResponseError
from vkauth.masking import mask_secrets
from vkauth.models import AccessToken, ClientConfig, Gender, UserProfile, UsersResponse, VKUser

logger = logging.getLogger(__name__)

SCHEME = "https"
OAUTH_HOST = "oauth.vk.com"
API_HOST = "api.vk.com"
API_VERSION = "5.23"
PROFILE_FIELDS = "photo_max,sex,bdate,photo"
BIRTHDAY_FORMAT = "%d.%m.%Y"


class HTTPResponse(Protocol):
    text: str


class HTTPFetcher(Protocol):
    """Anything able to perform a GET, e.g. ``requests.Session``."""

    def get(self, url: str) -> HTTPResponse: ...


def _build_url(host: str, path: str, params: dict[str, str]) -> str:
    # Sorted keys keep the query string stable between calls.
    query = urlencode(sorted(params.items()))
    return f"{SCHEME}://{host}/{path}?{query}"


class VKClient:
    """OAuth client for vk.com.

    Builds the authorization dialog and token exchange URLs, trades the code
    from the redirect for an access token and looks up user profiles. Every
    network call goes through ``fetcher``, so tests can pass a fake one.
    """

    def __init__(self, config: ClientConfig, fetcher: HTTPFetcher | None = None):
        self._config = config
        self._fetcher = fetcher if fetcher is not None else requests.Session()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def dialog_url(self) -> str:
        """URL of the VK authorization dialog the user should be sent to."""
        return _build_url(
            OAUTH_HOST,
            "authorize",
            {
                "client_id": self._config.app_id,
                "redirect_uri": self._config.redirect_url,
                "scope": self._config.scope,
                "response_type": "code",
                "v": API_VERSION,
            },
        )

    def access_token_url(self, code: str) -> str:
        return _build_url(
            OAUTH_HOST,
            "access_token",
            {
                "client_id": self._config.app_id,
                "client_secret": self._config.app_secret,
                "code": code,
                "redirect_uri": self._config.redirect_url,
            },
        )

    def user_url(self, user_id: int) -> str:
        return _build_url(
            API_HOST,
            "method/users.get",
            {
                "v": API_VERSION,
                "fields": PROFILE_FIELDS,
                "uids": str(user_id),
            },
        )

    def get_access_token(self, request_url: str) -> AccessToken:
        """Exchange the code from VK's redirect request for an access token.

        Raises ``BadCodeError`` when the redirect has no ``code`` parameter.
        Transport errors of the fetcher and ``pydantic.ValidationError`` for
        an undecodable body are not wrapped.
        """
        code = _query_param(request_url, "code")
        if not code:
            logger.debug("No authorization code in redirect: %s", mask_secrets(request_url))
            raise BadCodeError()

        response = self._get(self.access_token_url(code))
        return AccessToken.model_validate_json(response.text)

    def get_user(self, user_id: int) -> UserProfile:
        """Fetch the profile of ``user_id`` via users.get."""
        response = self._get(self.user_url(user_id))
        answer = UsersResponse.model_validate_json(response.text)
        if len(answer.response) != 1:
            logger.debug("users.get returned %d records for uid=%s", len(answer.response), user_id)
            raise BadResponseError()
        return _to_profile(answer.response[0])

    def _get(self, url: str) -> HTTPResponse:
        logger.debug("GET %s", mask_secrets(url))
        return self._fetcher.get(url)


def _query_param(url: str, name: str) -> str:
    values = parse_qs(urlsplit(url).query).get(name)
    return values[0] if values else ""


def _to_profile(user: VKUser) -> UserProfile:
    return UserProfile(
        id=user.id,
        name=f"{user.first_name} {user.last_name}",
        photo=user.photo_max,
        gender=_gender(user.sex),
        birthday=_parse_birthday(user.bdate),
    )


def _gender(sex: int) -> Gender:
    if sex == 2:
        return Gender.MALE
    if sex == 1:
        return Gender.FEMALE
    return Gender.UNKNOWN


def _parse_birthday(value: str | None) -> date | None:
    # VK omits the year when the user hides it ("D.M"); such dates stay unset.
    if not value:
        return None
    try:
        return datetime.strptime(value, BIRTHDAY_FORMAT).date()
    except ValueError:
        return None

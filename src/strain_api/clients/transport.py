#!/usr/bin/env python3
"""
Module: transport
Created: 2026-10-18T10:31:52+01:00
Project: strain_api
Template: http client

The default way StrainClient turns a URL into response bytes.

Anything callable as ``fetcher(url) -> bytes`` can stand in for
HTTPResourceFetcher (see StrainClient.set_resource_fetcher). A fetcher
reports failure by raising a StrainAPIError subclass.
"""

import logging
import re
from typing import Callable, Optional

import requests

from strain_api.clients.errors import StrainAPIConnectionError, StrainAPIStatusError

logger = logging.getLogger(__name__)

BASE_URL_HOST = "strainapi.evanbusse.com"
BASE_URL = f"https://{BASE_URL_HOST}"
USER_AGENT = "strain-api-client-python/v1"

ResourceFetcher = Callable[[str], bytes]

# https://host/<api key>/... -> https://host/***/...
_API_KEY_IN_PATH = re.compile(r"^(https?://[^/]+/)[^/]+")


def mask_api_key(url: str) -> str:
    """Hide the API key path segment so URLs are safe to log"""
    return _API_KEY_IN_PATH.sub(r"\1***", url)


class HTTPResourceFetcher:
    """
    Plain HTTPS GET against The Strain API:
    - Reuses a Session carrying the Host and User-Agent headers
    - No timeout unless one is given
    - No retries; the first failure is final
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None, user_agent: str = USER_AGENT):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'Host': BASE_URL_HOST,
            'User-Agent': user_agent,
        })

    def __call__(self, url: str) -> bytes:
        logger.debug("GET %s", mask_api_key(url))

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", mask_api_key(url), e)
            raise StrainAPIConnectionError(f"There was a problem connecting to the api: {e}") from e

        if response.status_code != 200:
            logger.warning("GET %s returned %s", mask_api_key(url), response.status_code)
            raise StrainAPIStatusError(response.status_code, response.text)

        return response.content

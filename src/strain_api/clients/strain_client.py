#!/usr/bin/env python3
"""
Module: strain_client
Created: 2026-10-18T11:02:47+01:00
Project: strain_api
Template: auth (api key in path)

Client for The Strain API (https://strainapi.evanbusse.com).

The API key is the first path segment of every URL:

    https://strainapi.evanbusse.com/<api key>/strains/search/race/indica

Each operation builds its path, hands the full URL to the resource
fetcher, and validates the returned JSON into the models in
``strain_api.clients.models``. Failures raise StrainAPIError subclasses
with the operation's context attached.
"""

import logging
from typing import Callable, Dict, List, Optional, Protocol, Type, TypeVar, Union, runtime_checkable
from urllib.parse import quote

from pydantic import TypeAdapter, ValidationError

from strain_api.clients.environconfig import EnvironmentConfig
from strain_api.clients.errors import (
    DescriptionNotFoundError,
    StrainAPIDecodeError,
    StrainAPIError,
)
from strain_api.clients.models import (
    Effect,
    EffectsByType,
    Flavor,
    Race,
    Strain,
    StrainEffectResult,
    StrainFlavorResult,
    StrainNameResult,
    StrainRaceResult,
    decode_effects,
    decode_strain_catalog,
)
from strain_api.clients.transport import (
    BASE_URL,
    HTTPResourceFetcher,
    ResourceFetcher,
    mask_api_key,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

STRAINS_BASE_PATH = "/strains"
STRAIN_SEARCH_BASE_PATH = STRAINS_BASE_PATH + "/search"
STRAIN_DATA_BASE_PATH = STRAINS_BASE_PATH + "/data"

# Body the API answers with at /<api key> when the key is accepted
CAN_CONNECT_RESPONSE = b"Seems legit to me man..."


def _segment(value: str) -> str:
    """Percent-escape a single path segment ("Blue Dream" -> "Blue%20Dream")"""
    return quote(str(value), safe="")


@runtime_checkable
class Client(Protocol):
    """What callers can rely on from any Strain API client (StrainClient or a stand-in)"""

    def list_all_effects(self) -> List[Effect]: ...

    def list_all_flavors(self) -> List[Flavor]: ...

    def list_all_strains(self) -> Dict[str, Strain]: ...

    def search_strains_by_name(self, name: str) -> List[StrainNameResult]: ...

    def search_strains_by_race(self, race: Union[Race, str]) -> List[StrainRaceResult]: ...

    def search_strains_by_flavor(self, flavor: Flavor) -> List[StrainFlavorResult]: ...

    def search_strains_by_effect_name(self, effect_name: str) -> List[StrainEffectResult]: ...

    def get_strain_description_by_id(self, strain_id: int) -> str: ...

    def get_strain_flavors_by_id(self, strain_id: int) -> List[Flavor]: ...

    def get_strain_effects_by_id(self, strain_id: int) -> EffectsByType: ...

    def can_connect(self) -> bool: ...

    def set_resource_fetcher(self, fetcher: ResourceFetcher) -> ResourceFetcher: ...


class StrainClient:
    """
    Strain API client:
    - API key carried in the URL path
    - Pluggable resource fetcher (HTTP GET by default)
    - Responses decoded into frozen pydantic models
    """

    def __init__(self, api_key: str, fetcher: Optional[ResourceFetcher] = None):
        self.api_key = api_key
        self._fetcher = fetcher or HTTPResourceFetcher()

    @classmethod
    def from_env(cls, config: Optional[EnvironmentConfig] = None) -> "StrainClient":
        """Build a client from STRAIN_API_KEY / STRAIN_API_TIMEOUT"""
        config = config or EnvironmentConfig()
        return cls(config.api_key, HTTPResourceFetcher(timeout=config.timeout))

    def set_resource_fetcher(self, fetcher: ResourceFetcher) -> ResourceFetcher:
        """Install a new fetcher and return the one it replaces"""
        current = self._fetcher
        self._fetcher = fetcher
        return current

    def build_url(self, path: str) -> str:
        """``path`` must start with '/' (or be empty for the API root)"""
        return f"{BASE_URL}/{self.api_key}{path}"

    def _fetch(self, path: str) -> bytes:
        return self._fetcher(self.build_url(path))

    def _get(self, path: str, shape: Type[T], context: str,
             decode: Optional[Callable[[bytes], T]] = None) -> T:
        """
        Fetch ``path`` and decode the body as ``shape``.

        ``decode`` replaces plain pydantic validation for payloads whose wire
        shape differs from the model (the catalog map, effects by type).
        """
        decode = decode or TypeAdapter(shape).validate_json
        try:
            body = self._fetch(path)
        except StrainAPIError as e:
            e.context = context
            raise

        try:
            return decode(body)
        except ValidationError as e:
            logger.warning("Could not parse %s: %s", mask_api_key(self.build_url(path)), e)
            raise StrainAPIDecodeError(f"Problem parsing response: {e}", context) from e

    def can_connect(self) -> bool:
        """True only if the API root answers with its exact greeting"""
        try:
            body = self._fetch("")
        except StrainAPIError as e:
            logger.debug("Connectivity check failed: %s", e)
            return False
        if isinstance(body, str):
            body = body.encode()
        return body == CAN_CONNECT_RESPONSE

    # --- search data ---
    def list_all_effects(self) -> List[Effect]:
        return self._get("/searchdata/effects", List[Effect], "Problem listing all effects")

    def list_all_flavors(self) -> List[Flavor]:
        return self._get("/searchdata/flavors", List[Flavor], "Problem listing all flavors")

    # --- strain search ---
    def list_all_strains(self) -> Dict[str, Strain]:
        """
        Every strain in the catalog, keyed by name (expensive, use sparingly).

        The payload leaves the name out of each value, so it is copied in
        from the key; whatever name the value carried is replaced.
        """
        return self._get(STRAIN_SEARCH_BASE_PATH + "/all", Dict[str, Strain],
                         "Problem listing all strains", decode=decode_strain_catalog)

    def search_strains_by_name(self, name: str) -> List[StrainNameResult]:
        return self._get(f"{STRAIN_SEARCH_BASE_PATH}/name/{_segment(name)}", List[StrainNameResult],
                         f"Problem searching strains by name {name!r}")

    def search_strains_by_race(self, race: Union[Race, str]) -> List[StrainRaceResult]:
        race = Race(race)
        return self._get(f"{STRAIN_SEARCH_BASE_PATH}/race/{_segment(race.value)}", List[StrainRaceResult],
                         f"Problem searching strains by race {race.value!r}")

    def search_strains_by_flavor(self, flavor: Flavor) -> List[StrainFlavorResult]:
        return self._get(f"{STRAIN_SEARCH_BASE_PATH}/flavor/{_segment(flavor)}", List[StrainFlavorResult],
                         f"Problem searching strains by flavor {flavor!r}")

    def search_strains_by_effect_name(self, effect_name: str) -> List[StrainEffectResult]:
        return self._get(f"{STRAIN_SEARCH_BASE_PATH}/effect/{_segment(effect_name)}", List[StrainEffectResult],
                         f"Problem searching strains by effect {effect_name!r}")

    # --- per-strain data ---
    def _data_path(self, data_element_name: str, strain_id: int) -> str:
        return f"{STRAIN_DATA_BASE_PATH}/{data_element_name}/{int(strain_id)}"

    def get_strain_description_by_id(self, strain_id: int) -> str:
        context = f"Problem getting the description for strain with ID {strain_id}"
        result = self._get(self._data_path("desc", strain_id), Dict[str, Optional[str]], context)

        description = result.get("desc")
        if not description:
            raise DescriptionNotFoundError("Unable to find description in result", context)
        return description

    def get_strain_flavors_by_id(self, strain_id: int) -> List[Flavor]:
        return self._get(self._data_path("flavors", strain_id), List[Flavor],
                         f"Problem getting flavors for strain with ID {strain_id}")

    def get_strain_effects_by_id(self, strain_id: int) -> EffectsByType:
        """
        Effects grouped by type. Use EffectType.POSITIVE / NEGATIVE / MEDICAL
        as keys; each Effect carries the type it was listed under.
        """
        return self._get(self._data_path("effects", strain_id), EffectsByType,
                         f"Problem retrieving effects for strain with ID {strain_id}", decode=decode_effects)


if __name__ == '__main__':
    from strain_api.clients.logging_setup import setup_logging

    config = EnvironmentConfig()
    setup_logging(config.log_level)
    client = StrainClient.from_env(config)

    if client.can_connect():
        for strain in client.search_strains_by_race(Race.SATIVA)[:5]:
            print(f"{strain.id:>6} | {strain.name}")
    else:
        print("Could not reach The Strain API - check STRAIN_API_KEY")

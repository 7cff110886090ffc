"""Registry client: manifest fetching with cache, and on-demand file fetching."""

import json
import logging

from pydantic import ValidationError

from pushui.integrations.http import HttpClient, HttpTransportError
from pushui.io.cache import RegistryCache
from pushui.models.registry import Registry
from pushui.output import warning_output
from pushui.registry.exceptions import RegistryError, RegistryFetchError, RegistryValidationError

logger = logging.getLogger(__name__)

# Points to GitHub raw
DEFAULT_REGISTRY_URL = "https://raw.githubusercontent.com/chathura-mpa/pushui/main/registry"

CACHE_TTL_SECONDS = 60 * 60


class RegistryClient:
    """Fetches the registry manifest and component files.

    The manifest is served from cache while it is at most CACHE_TTL_SECONDS
    old. When a fresh fetch fails for any reason the last cached copy is used
    regardless of age; only with no cache at all does the error reach the
    caller. Component files are never cached.
    """

    def __init__(
        self,
        http: HttpClient,
        cache: RegistryCache,
        default_url: str = DEFAULT_REGISTRY_URL,
    ) -> None:
        self._http = http
        self._cache = cache
        self._default_url = default_url

    def fetch_registry(self, registry_url: str | None = None) -> Registry:
        """Fetch the registry manifest from cache or remote.

        Args:
            registry_url: Base URL override (None = default registry)

        Returns:
            Validated Registry

        Raises:
            RegistryFetchError: If the fetch failed and no cache exists
            RegistryValidationError: If the manifest is invalid and no cache exists
        """
        cached = self._cache.read(max_age_seconds=CACHE_TTL_SECONDS)
        if cached is not None:
            return cached

        base_url = self._base_url(registry_url)
        try:
            registry = self._fetch_manifest(f"{base_url}/index.json")
        except RegistryError as e:
            stale = self._cache.read(max_age_seconds=None)
            if stale is None:
                raise
            logger.debug("Registry fetch failed, using stale cache: %s", e)
            warning_output("Using cached registry (fetch failed)")
            return stale

        self._cache.write(registry)
        return registry

    def fetch_component_file(
        self, component_name: str, file_name: str, registry_url: str | None = None
    ) -> str:
        """Fetch raw content of one component file.

        Raises:
            RegistryFetchError: On transport failure or non-2xx status
        """
        url = f"{self._base_url(registry_url)}/components/{component_name}/{file_name}"
        return self._get_text(url)

    def _base_url(self, registry_url: str | None) -> str:
        base_url = registry_url or self._default_url
        return base_url.rstrip("/")

    def _fetch_manifest(self, url: str) -> Registry:
        body = self._get_text(url)
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise RegistryValidationError(url, f"not valid JSON ({e})") from e

        try:
            return Registry.model_validate(data)
        except ValidationError as e:
            raise RegistryValidationError(url, f"{e.error_count()} validation error(s)") from e

    def _get_text(self, url: str) -> str:
        try:
            response = self._http.get(url)
        except HttpTransportError as e:
            raise RegistryFetchError(url, None, e.detail) from e

        if not response.ok:
            raise RegistryFetchError(url, response.status_code, response.reason)

        return response.text

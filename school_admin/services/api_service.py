import httpx
from urllib.parse import quote
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union
from school_admin.config.settings import Settings
from school_admin.utils.logger import logger

ResourceKey = Union[str, int, Tuple[Union[str, int], ...]]


class ResourceRequestError(Exception):
    """
    Single failure signal for every backend call.

    Status errors, connection problems, timeouts and undecodable bodies all end up
    here; callers are not expected to tell them apart.
    """

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")


class APIService:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.backend_url = settings.BACKEND_URL.rstrip("/")
        self.transport = transport
        if settings.REQUEST_TIMEOUT_SECONDS > 0:
            self.timeout = httpx.Timeout(settings.REQUEST_TIMEOUT_SECONDS, connect=settings.CONNECT_TIMEOUT_SECONDS)
        else:
            self.timeout = httpx.Timeout(None)
        logger.info(f"APIService initialized with backend_url: {self.backend_url}")

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.backend_url, timeout=self.timeout, transport=self.transport)

    async def request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Issues one request and returns the decoded JSON body (None for empty bodies).

        Raises ResourceRequestError on any non-2xx response or transport failure.
        """
        url = f"{self.backend_url}{path}"
        try:
            async with self._client() as client:
                logger.debug(f"{method} {url}")
                response = await client.request(method, path, json=json, params=params)
                response.raise_for_status()
                if not response.content:
                    return None
                return response.json()
        except httpx.TimeoutException as e:
            logger.error(f"Timeout on {method} {url}: {e}", exc_info=True)
            raise ResourceRequestError(method, url, "timeout") from e
        except httpx.ConnectError as e:
            logger.error(f"Connection error on {method} {url}. Is the backend running on {self.backend_url}? Error: {type(e).__name__}: {e}", exc_info=True)
            raise ResourceRequestError(method, url, "connection error") from e
        except httpx.RequestError as e:
            logger.error(f"Request error on {method} {url}: {type(e).__name__}: {e}", exc_info=True)
            raise ResourceRequestError(method, url, type(e).__name__) from e
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP {e.response.status_code} error on {method} {url}: {e.response.text}", exc_info=True)
            raise ResourceRequestError(method, url, f"HTTP {e.response.status_code}") from e
        except ValueError as e:
            logger.error(f"Undecodable response body from {method} {url}: {e}", exc_info=True)
            raise ResourceRequestError(method, url, "invalid JSON") from e


def key_path(key: ResourceKey) -> str:
    """Composite keys become consecutive path segments, in the order given."""
    parts: Sequence[Union[str, int]] = key if isinstance(key, tuple) else (key,)
    return "/".join(quote(str(part), safe="") for part in parts)


class ResourceClient:
    """
    Collector-pattern client for one backend resource.

    GET    /{resource}          -> {list_key: [...]}
    POST   /{resource}          draft
    PUT    /{resource}/{key...} draft
    DELETE /{resource}/{key...}
    """

    def __init__(self, api: APIService, resource: str, list_key: str):
        self.api = api
        self.resource = resource.strip("/")
        self.list_key = list_key

    async def list(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        data = await self.api.request("GET", f"/{self.resource}", params=params)
        if not isinstance(data, dict):
            return []
        items = data.get(self.list_key)
        if items is None:
            items = []
        elif not isinstance(items, list):
            logger.error(f"'{self.list_key}' from /{self.resource} is {type(items).__name__}, not a list")
            raise ResourceRequestError("GET", f"{self.api.backend_url}/{self.resource}", "invalid collection")
        logger.info(f"Fetched {len(items)} {self.resource}")
        return list(items)

    async def create(self, draft: Dict[str, Any]) -> None:
        await self.api.request("POST", f"/{self.resource}", json=draft)
        logger.info(f"Created {self.resource} record")

    async def update(self, key: ResourceKey, draft: Dict[str, Any]) -> None:
        await self.api.request("PUT", f"/{self.resource}/{key_path(key)}", json=draft)
        logger.info(f"Updated {self.resource}/{key_path(key)}")

    async def delete(self, key: ResourceKey) -> None:
        await self.api.request("DELETE", f"/{self.resource}/{key_path(key)}")
        logger.info(f"Deleted {self.resource}/{key_path(key)}")

"""
Fake aiohttp session.

Stands in for aiohttp.ClientSession so the LWA provider and SP-API
client can be exercised without network access.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class RecordedCall:
    method: str
    url: str
    kwargs: Dict[str, Any] = field(default_factory=dict)

    @property
    def headers(self) -> Dict[str, str]:
        return self.kwargs.get("headers") or {}

    @property
    def params(self) -> Dict[str, str]:
        return self.kwargs.get("params") or {}


class FakeResponse:
    """Async context manager with the slice of aiohttp.ClientResponse the code reads."""

    def __init__(self, status: int, body: str, raises: Optional[BaseException] = None):
        self.status = status
        self._body = body
        self._raises = raises

    async def text(self) -> str:
        return self._body

    async def __aenter__(self) -> "FakeResponse":
        if self._raises is not None:
            raise self._raises
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return False


@dataclass
class _Route:
    method: str
    fragment: str
    status: int
    body: str
    raises: Optional[BaseException] = None


class FakeClientSession:
    """
    Routes requests by method and URL fragment.

    When several fragments match, one the URL ends with beats one it merely
    contains, and then the longest wins. So ".../orders/v0/orders" serves
    the list call while "/123/orderItems" serves that order's item lookup.
    """

    def __init__(self):
        self.calls: List[RecordedCall] = []
        self._routes: List[_Route] = []

    def add(
        self,
        method: str,
        fragment: str,
        status: int = 200,
        body: Union[str, Dict[str, Any], List[Any], None] = "",
        raises: Optional[BaseException] = None,
    ) -> "FakeClientSession":
        """Register a route; with `raises`, entering the response raises it instead."""
        if body is None:
            body = ""
        elif not isinstance(body, str):
            body = json.dumps(body)
        self._routes.append(_Route(method.upper(), fragment, status, body, raises))
        return self

    def request(self, method: str, url: Any, **kwargs: Any) -> FakeResponse:
        method = method.upper()
        url = str(url)
        self.calls.append(RecordedCall(method, url, kwargs))

        matches = [r for r in self._routes if r.method == method and r.fragment in url]
        if not matches:
            return FakeResponse(404, json.dumps({"errors": [{"message": f"no route for {url}"}]}))
        route = max(matches, key=lambda r: (url.endswith(r.fragment), len(r.fragment)))
        return FakeResponse(route.status, route.body, route.raises)

    def get(self, url: Any, **kwargs: Any) -> FakeResponse:
        return self.request("GET", url, **kwargs)

    def post(self, url: Any, **kwargs: Any) -> FakeResponse:
        return self.request("POST", url, **kwargs)

    def calls_to(self, fragment: str, method: Optional[str] = None) -> List[RecordedCall]:
        return [
            c for c in self.calls
            if fragment in c.url and (method is None or c.method == method.upper())
        ]

    async def close(self) -> None:
        pass

"""
Async HTTP client for GitHub owned storage.

Thin aiohttp wrapper returning response bodies together with their headers.
"""
import asyncio
import logging
from typing import Dict, Optional, Any, List, Tuple

import aiohttp

from .config import APIConfig
from .errors import TransportError, HTTPStatusError
from ..logging import get_logger

OCTET_STREAM = 'application/octet-stream'

Headers = Dict[str, List[str]]


class AsyncHttpClient:
    """
    Asynchronous HTTP client used by the upload core.
    
    Features:
    - Lazily created, reusable aiohttp session
    - Configurable proxy, SSL, timeouts
    - Multi-valued response headers
    
    No retries are attempted; every failure surfaces as a TransportError.
    
    Example:
        >>> async with AsyncHttpClient(APIConfig(token="...")) as client:
        ...     body, headers = await client.post_with_full_response(url, {"name": "a"})
    """
    
    def __init__(
        self,
        config: Optional[APIConfig] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """
        Initialize HTTP client.
        
        Args:
            config: Client configuration (uses defaults if not provided)
            session: Optional externally owned aiohttp session
        """
        self._config = config or APIConfig.default()
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger('gei_archive.api')
        # basicConfig() not called; otherwise inherit from root
        if not logging.getLogger().handlers:
            self._logger.setLevel(self._config.log_level)
    
    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config
    
    async def __aenter__(self) -> 'AsyncHttpClient':
        await self._ensure_session()
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
    
    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(**self._config.get_connector_kwargs())
            self._session = aiohttp.ClientSession(
                connector=connector,
                **self._config.get_session_kwargs()
            )
            self._owns_session = True
        return self._session
    
    async def close(self):
        """Close session if we own it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self._session = None
    
    async def post(self, url: str, body: Any) -> str:
        """POST and return the response body."""
        text, _ = await self._send('POST', url, body)
        return text
    
    async def post_with_full_response(self, url: str, body: Any) -> Tuple[str, Headers]:
        """POST and return the response body with its headers."""
        return await self._send('POST', url, body)
    
    async def patch_with_full_response(self, url: str, body: Any) -> Tuple[str, Headers]:
        """PATCH and return the response body with its headers."""
        return await self._send('PATCH', url, body)
    
    async def put(self, url: str, body: Any) -> str:
        """PUT and return the response body."""
        text, _ = await self._send('PUT', url, body)
        return text
    
    @staticmethod
    def _request_kwargs(body: Any) -> Dict[str, Any]:
        """Translate a request body into aiohttp request kwargs."""
        if body is None:
            return {}
        if isinstance(body, dict):
            return {'json': body}
        if isinstance(body, (bytes, bytearray, memoryview)):
            return {'data': body, 'headers': {'Content-Type': OCTET_STREAM}}
        if isinstance(body, str):
            return {'data': body.encode('utf-8')}
        if hasattr(body, 'iter_chunks'):
            headers = {'Content-Type': OCTET_STREAM}
            length = getattr(body, 'length', None)
            if length is not None:
                headers['Content-Length'] = str(length)
            return {'data': body.iter_chunks(), 'headers': headers}
        raise TypeError(f"Unsupported request body type: {type(body).__name__}")
    
    @staticmethod
    def _collect_headers(raw_headers) -> Headers:
        """Group multi-valued response headers by name."""
        headers: Headers = {}
        for name, value in raw_headers.items():
            headers.setdefault(name, []).append(value)
        return headers
    
    async def _send(self, method: str, url: str, body: Any) -> Tuple[str, Headers]:
        """
        Issue a single request.
        
        Raises:
            HTTPStatusError: If the server answers with status >= 400
            TransportError: If the request cannot be completed
        """
        session = await self._ensure_session()
        kwargs = self._request_kwargs(body)
        proxy = self._config.proxy.to_aiohttp_proxy() if self._config.proxy else None
        
        self._logger.debug(f"{method} {url}")
        
        try:
            async with session.request(method, url, proxy=proxy, **kwargs) as response:
                try:
                    text = await response.text()
                except UnicodeDecodeError as e:
                    raise TransportError(
                        f"{method} {url} returned an undecodable body (HTTP {response.status})",
                        method=method, url=url
                    ) from e
                if response.status >= 400:
                    self._logger.debug(f"{method} {url} -> HTTP {response.status}")
                    raise HTTPStatusError(response.status, method, url, text)
                self._logger.debug(f"{method} {url} -> HTTP {response.status}")
                return text, self._collect_headers(response.headers)
        except asyncio.TimeoutError as e:
            raise TransportError(f"{method} {url} timed out", method=method, url=url) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"{method} {url} failed: {e}", method=method, url=url) from e

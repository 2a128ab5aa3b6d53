"""Pytest fixtures for gei_archive tests."""
import json
from typing import Any, Dict, List, Optional

import pytest

BASE_URL = 'https://uploads.github.com'
SESSION_GUID = 'c2a3f1e4-9b1d-4c7e-8f00-5d2b7a9e1c33'


def part_location(part_number: int, guid: str = SESSION_GUID) -> str:
    """Relative part URL as issued by the storage service."""
    return (
        f"/organizations/1234/gei/archive/blobs/uploads"
        f"?part_number={part_number}&guid={guid}&upload_id=upl-77"
    )


class FakeTransport:
    """
    Recording transport double.
    
    Bodies are copied when recorded, so reused buffers can be checked
    for exactly what was sent at the time of the call.
    """
    
    def __init__(self, guid: str = SESSION_GUID):
        self.guid = guid
        self.calls: List[Dict[str, Any]] = []
        self.single_response = json.dumps({'uri': 'gei://archive/single-7f3e'})
        self.start_headers: Dict[str, List[str]] = {'Location': [part_location(1, guid)]}
        self.part_headers: Optional[Dict[str, List[str]]] = None
        self.errors: Dict[str, Exception] = {}
        self.fail_on_part: Optional[int] = None
        self._parts = 0
    
    @staticmethod
    async def _materialize(body: Any) -> Any:
        if hasattr(body, 'iter_chunks'):
            return b''.join([piece async for piece in body.iter_chunks()])
        if isinstance(body, (bytearray, memoryview)):
            return bytes(body)
        return body
    
    def _record(self, method: str, url: str, body: Any) -> None:
        self.calls.append({'method': method, 'url': url, 'body': body})
        if method in self.errors:
            raise self.errors[method]
    
    def part_url(self, part_number: int) -> str:
        """Absolute URL of the given part."""
        return BASE_URL + part_location(part_number, self.guid)
    
    def methods(self) -> List[str]:
        return [call['method'] for call in self.calls]
    
    def bodies(self, method: str) -> List[Any]:
        return [call['body'] for call in self.calls if call['method'] == method]
    
    async def post(self, url, body):
        self._record('POST', url, await self._materialize(body))
        return self.single_response
    
    async def post_with_full_response(self, url, body):
        self._record('POST_FULL', url, await self._materialize(body))
        return '', self.start_headers
    
    async def patch_with_full_response(self, url, body):
        self._parts += 1
        if self.fail_on_part == self._parts:
            self.errors.setdefault('PATCH', ConnectionError("connection reset"))
        self._record('PATCH', url, await self._materialize(body))
        if self.part_headers is not None:
            return '', self.part_headers
        return '', {'location': [part_location(self._parts + 1, self.guid)]}
    
    async def put(self, url, body):
        self._record('PUT', url, await self._materialize(body))
        return ''
    
    async def close(self):
        pass


@pytest.fixture
def transport():
    """Returns a recording fake transport."""
    return FakeTransport()


@pytest.fixture
def threshold():
    """Scaled down size threshold (100 KiB stands in for 100 MiB)."""
    return 100 * 1024


@pytest.fixture
def make_payload():
    """Returns a factory for deterministic test content."""
    def _make(size: int) -> bytes:
        return bytes((i * 7 + i // 251) % 256 for i in range(size))
    return _make

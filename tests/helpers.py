import json

import httpx


class RecordingHandler:
    def __init__(self, status_code: int = 200, payload=None, content: bytes | None = None) -> None:
        self.status_code = status_code
        self.payload = payload
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    def body(self, index: int = 0):
        return json.loads(self.requests[index].content)

import json

import httpx

BASE_URL = "http://search.test/"

SEARCH_BODY = {
    "total_hits": 2,
    "assets": [
        {"type": "series", "id": "s1"},
        {"type": "movie", "video_id": "a1"},
    ],
}


class TrackingStream(httpx.SyncByteStream):
    def __init__(self, body: bytes, chunk_size: int = 16):
        self.body = body
        self.chunk_size = chunk_size
        self.sent = 0
        self.closed = False

    def __iter__(self):
        for i in range(0, len(self.body), self.chunk_size):
            chunk = self.body[i : i + self.chunk_size]
            self.sent += len(chunk)
            yield chunk

    def close(self):
        self.closed = True


def json_response(status_code: int, body, content_type: str = "application/json") -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(body).encode(), headers={"Content-Type": content_type})

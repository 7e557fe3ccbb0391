# clients/http_utils.py
import time
from typing import Any, Dict, Optional

import requests

CHUNK_SIZE = 64 * 1024


def get_with_deadline(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = 6.0,
) -> requests.Response:
    """
    GET whose whole call, body download included, is bounded by `timeout`.

    requests' own timeout only bounds connect and each socket read, so a
    server trickling bytes could hold the worker thread indefinitely.
    Raises requests.Timeout once the deadline passes.
    """
    deadline = time.monotonic() + timeout
    resp = requests.get(url, params=params, headers=headers, timeout=timeout, stream=True)

    chunks = []
    try:
        for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
            if time.monotonic() > deadline:
                raise requests.Timeout(f"GET {url} exceeded {timeout}s total")
            chunks.append(chunk)
    except BaseException:
        resp.close()
        raise

    # Body is fully read; .json() and .text work from the buffered content
    resp._content = b"".join(chunks)
    return resp

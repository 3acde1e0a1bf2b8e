"""HTTP transport for the ARI REST interface and its error types."""

from __future__ import annotations

import json
from typing import Any

import requests
from requests.adapters import HTTPAdapter

MAX_IDLE_CONNECTIONS = 20
"""Maximum number of idle pooled connections kept by a transport."""

REQUEST_TIMEOUT = 2.0
"""Maximum number of seconds to wait for any response."""


class RequestError(Exception):
    """A request that completed with a non-2xx status."""

    def __init__(self, code: int, text: str) -> None:
        super().__init__(text)
        self.code = code
        self.text = text

    def __str__(self) -> str:
        return self.text


class DataGetError(Exception):
    """Failure to fetch the data of an ARI entity."""

    def __init__(self, cause: BaseException, entity_type: str, entity_id: str) -> None:
        super().__init__(cause, entity_type, entity_id)
        self.cause = cause
        self.entity_type = entity_type
        self.entity_id = entity_id

    def __str__(self) -> str:
        return (
            f"Error getting data for {self.entity_type} "
            f"'{self.entity_id}': {self.cause}"
        )


def code_from_error(err: BaseException) -> int:
    """Return the status code carried by a request error, or 0."""
    if isinstance(err, RequestError):
        return err.code
    return 0


def data_get_error(
    cause: BaseException | None, entity_type: str, entity_id: str
) -> DataGetError | None:
    """Wrap a cause in a DataGetError; None when there is no cause."""
    if cause is None:
        return None
    return DataGetError(cause, entity_type, entity_id)


class Transport:
    """Sends JSON requests to an ARI server."""

    def __init__(
        self,
        url: str,
        username: str = "",
        password: str = "",
        timeout: float = REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.url = url
        self.username = username
        self.password = password
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(pool_maxsize=MAX_IDLE_CONNECTIONS)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

    def close(self) -> None:
        self.session.close()

    def request(self, method: str, path: str, body: Any = None) -> Any:
        """Send a request and return the decoded JSON response, if any.

        Raises RequestError for a non-2xx status and ValueError when the
        response body is not valid JSON.
        """
        data = json.dumps(body) if body is not None else None
        auth = (self.username, self.password) if self.username else None
        response = self.session.request(
            method,
            self.url + path,
            data=data,
            headers={"Content-Type": "application/json"},
            auth=auth,
            timeout=self.timeout,
        )
        if not 200 <= response.status_code < 300:
            raise RequestError(
                response.status_code,
                f"Non-2XX response: {response.status_code} {response.reason}".rstrip(),
            )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ValueError("failed to decode response") from exc

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, body: Any = None) -> Any:
        return self.request("POST", path, body)

    def put(self, path: str, body: Any = None) -> Any:
        return self.request("PUT", path, body)

    def delete(self, path: str, query: str = "") -> Any:
        if query:
            path = f"{path}?{query}"
        return self.request("DELETE", path)
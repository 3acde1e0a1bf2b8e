"""Accessors for device states, endpoints, mailboxes and text messages."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlencode

import requests

from .models import (
    DeviceStateData,
    DeviceStateHandle,
    EndpointData,
    EndpointHandle,
    endpoint_key_id,
)
from .transport import DataGetError, RequestError, Transport

_FETCH_ERRORS = (RequestError, requests.RequestException, ValueError)


def _fetch(transport: Transport, path: str, entity_type: str, entity_id: str) -> Any:
    """GET an entity's data, raising DataGetError on failure."""
    try:
        return transport.get(path)
    except _FETCH_ERRORS as exc:
        raise DataGetError(exc, entity_type, entity_id) from exc


class DeviceState:
    """Device state resources."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def get(self, name: str) -> DeviceStateHandle:
        """Return a handle to the named device state."""
        return DeviceStateHandle(name, self)

    def list(self) -> list[str]:
        """Return the names of the known device states."""
        devices = self.transport.get("/deviceStates") or []
        return [device.get("name", "") for device in devices]

    def data(self, name: str) -> DeviceStateData:
        """Return the current state of a device."""
        if not name:
            raise ValueError("device key not supplied")
        result = _fetch(self.transport, f"/deviceStates/{name}", "deviceState", name)
        return DeviceStateData.from_dict(result or {})

    def update(self, name: str, state: str) -> None:
        """Set the state of a device, creating it if needed."""
        self.transport.put(f"/deviceStates/{name}", {"deviceState": state})

    def delete(self, name: str) -> None:
        """Delete a device state."""
        self.transport.delete(f"/deviceStates/{name}")


class Endpoint:
    """Endpoint resources, identified by ``tech/resource``."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def get(self, endpoint_id: str) -> EndpointHandle:
        """Return a handle to an endpoint."""
        return EndpointHandle(endpoint_id, self)

    def _ids(self, path: str) -> list[str]:
        endpoints = self.transport.get(path) or []
        return [
            endpoint_key_id(item.get("technology", ""), item.get("resource", ""))
            for item in endpoints
        ]

    def list(self) -> list[str]:
        """Return the ids of all endpoints."""
        return self._ids("/endpoints")

    def list_by_tech(self, tech: str) -> list[str]:
        """Return the ids of the endpoints of one technology."""
        return self._ids(f"/endpoints/{tech}")

    def data(self, endpoint_id: str) -> EndpointData:
        """Return the current state of an endpoint."""
        if not endpoint_id:
            raise ValueError("endpoint key not supplied")
        result = _fetch(
            self.transport, f"/endpoints/{endpoint_id}", "endpoint", endpoint_id
        )
        return EndpointData.from_dict(result or {})


class Mailbox:
    """Mailbox resources."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def list(self) -> list[str]:
        """Return the names of the mailboxes."""
        mailboxes = self.transport.get("/mailboxes") or []
        return [item.get("name", "") for item in mailboxes]

    def data(self, name: str) -> dict[str, Any]:
        """Return the state of a mailbox."""
        if not name:
            raise ValueError("mailbox key not supplied")
        return _fetch(self.transport, f"/mailboxes/{name}", "mailbox", name)

    def update(self, name: str, old_messages: int, new_messages: int) -> None:
        """Set the old and new message counts of a mailbox."""
        self.transport.put(
            f"/mailboxes/{name}",
            {"oldMessages": str(old_messages), "newMessages": str(new_messages)},
        )

    def delete(self, name: str) -> None:
        """Delete a mailbox."""
        self.transport.delete(f"/mailboxes/{name}")


class TextMessage:
    """Sending text messages to endpoints."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def send(
        self,
        sender: str,
        tech: str,
        resource: str,
        body: str,
        variables: Mapping[str, str] | None = None,
    ) -> None:
        """Send a text message to the endpoint ``tech/resource``."""
        query = urlencode(sorted({"from": sender, "body": body}.items()))
        self.transport.put(
            f"/endpoints/{tech}/{resource}/sendMessage?{query}",
            dict(variables or {}),
        )

    def send_by_uri(
        self,
        sender: str,
        to: str,
        body: str,
        variables: Mapping[str, str] | None = None,
    ) -> None:
        """Send a text message to a free-form destination URI."""
        query = urlencode(sorted({"from": sender, "to": to, "body": body}.items()))
        self.transport.put(f"/endpoints/sendMessage?{query}", dict(variables or {}))
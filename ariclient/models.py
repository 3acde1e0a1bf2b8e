"""Value types and resource handles shared by the ARI accessors."""

from __future__ import annotations

import secrets
import time
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any, Mapping, Protocol, Sequence

ENDPOINT_ID_SEPARATOR = "|"

_CROCKFORD = "0123456789abcdefghjkmnpqrstvwxyz"


def new_id() -> str:
    """Return a new unique, time-ordered resource identifier."""
    value = (int(time.time() * 1000) << 80) | secrets.randbits(80)
    chars = []
    for _ in range(26):
        value, digit = divmod(value, 32)
        chars.append(_CROCKFORD[digit])
    return "".join(reversed(chars))


class Direction(str, Enum):
    """Audio direction, as used by mute, snoop and others."""

    NONE = "none"
    IN = "in"
    OUT = "out"
    BOTH = "both"


@dataclass
class DTMFOptions:
    """Timing options for sending DTMF."""

    before: timedelta = timedelta(0)
    between: timedelta = timedelta(0)
    duration: timedelta = timedelta(0)
    after: timedelta = timedelta(0)


# --- configuration -------------------------------------------------------


def parse_config_id(value: str) -> tuple[str, str, str]:
    """Split a ``class/type/name`` configuration id into its parts."""
    pieces = value.split("/")
    if len(pieces) < 3:
        raise ValueError("invalid input ID")
    return pieces[0], pieces[1], pieces[2]


@dataclass
class ConfigTuple:
    """A single attribute/value pair of a configuration object."""

    attribute: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"attribute": self.attribute, "value": self.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ConfigTuple:
        return cls(attribute=data.get("attribute", ""), value=data.get("value", ""))


@dataclass
class ConfigData:
    """The data of a dynamic configuration object."""

    config_class: str
    type: str
    name: str
    fields: list[ConfigTuple] = field(default_factory=list)

    def id(self) -> str:
        return f"{self.config_class}/{self.type}/{self.name}"


class _ConfigAccessor(Protocol):
    def data(self, config_id: str) -> ConfigData: ...

    def update(self, config_id: str, tuples: Sequence[ConfigTuple]) -> None: ...

    def delete(self, config_id: str) -> None: ...


@dataclass
class ConfigHandle:
    """Reference to a configuration object on the server."""

    id: str
    accessor: _ConfigAccessor

    def data(self) -> ConfigData:
        return self.accessor.data(self.id)

    def update(self, tuples: Sequence[ConfigTuple]) -> None:
        self.accessor.update(self.id, tuples)

    def delete(self) -> None:
        self.accessor.delete(self.id)


# --- device state --------------------------------------------------------


@dataclass
class DeviceStateData:
    """The state of a named device."""

    name: str
    state: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DeviceStateData:
        return cls(name=data.get("name", ""), state=data.get("state", ""))


class _DeviceStateAccessor(Protocol):
    def data(self, name: str) -> DeviceStateData: ...

    def update(self, name: str, state: str) -> None: ...

    def delete(self, name: str) -> None: ...


@dataclass
class DeviceStateHandle:
    """Reference to a device state on the server."""

    id: str
    accessor: _DeviceStateAccessor

    def data(self) -> DeviceStateData:
        return self.accessor.data(self.id)

    def update(self, state: str) -> None:
        """Update the device state, creating it if it does not exist."""
        self.accessor.update(self.id, state)

    def delete(self) -> None:
        self.accessor.delete(self.id)


# --- endpoints -----------------------------------------------------------


def endpoint_key_id(tech: str, resource: str) -> str:
    """Return the key id (``tech/resource``) of an endpoint."""
    return f"{tech}/{resource}"


def from_endpoint_id(value: str) -> tuple[str, str]:
    """Split an endpoint id of the form ``tech|resource``."""
    items = value.split(ENDPOINT_ID_SEPARATOR)
    if len(items) < 2:
        raise ValueError(
            f"Endpoint ID is not in tech{ENDPOINT_ID_SEPARATOR}resource format"
        )
    if len(items) > 2:
        raise ValueError(
            "EndpointIDSeparator is conflicting with tech and resource identifiers"
        )
    return items[0], items[1]


@dataclass
class EndpointData:
    """An external device, identified by technology and resource."""

    technology: str
    resource: str
    state: str = ""
    channel_ids: list[str] = field(default_factory=list)

    def id(self) -> str:
        return f"{self.technology}{ENDPOINT_ID_SEPARATOR}{self.resource}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EndpointData:
        return cls(
            technology=data.get("technology", ""),
            resource=data.get("resource", ""),
            state=data.get("state", ""),
            channel_ids=list(data.get("channel_ids") or []),
        )


class _EndpointAccessor(Protocol):
    def data(self, endpoint_id: str) -> EndpointData: ...


@dataclass
class EndpointHandle:
    """Reference to an endpoint on the server."""

    id: str
    accessor: _EndpointAccessor

    def data(self) -> EndpointData:
        return self.accessor.data(self.id)
"""Accessor for mixing bridges."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

import requests

from .models import new_id
from .timefmt import encode_duration
from .transport import DataGetError, RequestError, Transport

_FETCH_ERRORS = (RequestError, requests.RequestException, ValueError)


def _fetch(transport: Transport, path: str, entity_type: str, entity_id: str) -> Any:
    """GET an entity's data, raising DataGetError on failure."""
    try:
        return transport.get(path)
    except _FETCH_ERRORS as exc:
        raise DataGetError(exc, entity_type, entity_id) from exc


@dataclass
class AddChannelOptions:
    """Options applied to a channel when it is added to a bridge."""

    absorb_dtmf: bool = False
    mute: bool = False
    role: str = ""

    def to_request(self, channel_id: str) -> dict[str, Any]:
        body: dict[str, Any] = {"channel": channel_id}
        if self.absorb_dtmf:
            body["absorbDTMF"] = True
        if self.mute:
            body["mute"] = True
        if self.role:
            body["role"] = self.role
        return body


@dataclass
class RecordingOptions:
    """Options for recording a bridge or channel."""

    format: str = ""
    max_duration: timedelta = timedelta(0)
    max_silence: timedelta = timedelta(0)
    exists: str = ""
    beep: bool = False
    terminate: str = ""

    def to_request(self, name: str) -> dict[str, Any]:
        """Return the request body that starts a recording with this name."""
        body: dict[str, Any] = {
            "name": name,
            "format": self.format,
            "maxDurationSeconds": encode_duration(self.max_duration),
            "maxSilenceSeconds": encode_duration(self.max_silence),
            "beep": self.beep,
        }
        if self.exists:
            body["ifExists"] = self.exists
        if self.terminate:
            body["terminateOn"] = self.terminate
        return body


class Bridge:
    """Bridge resources."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def create(self, bridge_id: str = "", bridge_type: str = "", name: str = "") -> str:
        """Create a bridge and return its id, generating one when none is given."""
        if not bridge_id:
            bridge_id = new_id()
        body: dict[str, str] = {"bridgeId": bridge_id}
        if bridge_type:
            body["type"] = bridge_type
        if name:
            body["name"] = name
        self.transport.post(f"/bridges/{bridge_id}", body)
        return bridge_id

    def list(self) -> list[str]:
        """Return the ids of the current bridges."""
        bridges = self.transport.get("/bridges") or []
        return [item.get("id", "") for item in bridges]

    def data(self, bridge_id: str) -> dict[str, Any]:
        """Return the details of a bridge."""
        if not bridge_id:
            raise ValueError("bridge key not supplied")
        return _fetch(self.transport, f"/bridges/{bridge_id}", "bridge", bridge_id)

    def add_channel(
        self,
        bridge_id: str,
        channel_id: str,
        options: AddChannelOptions | None = None,
    ) -> None:
        """Add a channel to a bridge."""
        options = options or AddChannelOptions()
        self.transport.post(
            f"/bridges/{bridge_id}/addChannel", options.to_request(channel_id)
        )

    def remove_channel(self, bridge_id: str, channel_id: str) -> None:
        """Remove a channel from a bridge."""
        self.transport.post(
            f"/bridges/{bridge_id}/removeChannel", {"channel": channel_id}
        )

    def delete(self, bridge_id: str) -> None:
        """Shut down a bridge; its channels are removed, not hung up."""
        self.transport.delete(f"/bridges/{bridge_id}")

    def moh(self, bridge_id: str, moh_class: str) -> None:
        """Play the given music-on-hold class to the bridge."""
        self.transport.post(f"/bridges/{bridge_id}/moh", {"mohClass": moh_class})

    def stop_moh(self, bridge_id: str) -> None:
        """Stop any music on hold playing to the bridge."""
        self.transport.delete(f"/bridges/{bridge_id}/moh")

    def play(self, bridge_id: str, playback_id: str = "", *args: str) -> str:
        """Play media URIs on the bridge and return the playback id."""
        if not playback_id:
            playback_id = new_id()
        self.transport.post(
            f"/bridges/{bridge_id}/play/{playback_id}", {"media": list(args)}
        )
        return playback_id

    def record(
        self, bridge_id: str, name: str, options: RecordingOptions | None = None
    ) -> str:
        """Start recording the bridge and return the recording name."""
        options = options or RecordingOptions()
        self.transport.post(f"/bridges/{bridge_id}/record", options.to_request(name))
        return name

    def video_source(self, bridge_id: str, channel_id: str) -> None:
        """Make a channel the video source of a multi-party bridge."""
        self.transport.post(f"/bridges/{bridge_id}/videoSource/{channel_id}")

    def video_source_delete(self, bridge_id: str) -> None:
        """Remove any explicit video source from a multi-party bridge."""
        self.transport.delete(f"/bridges/{bridge_id}/videoSource")
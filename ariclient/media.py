"""Accessors for playbacks, recordings and sounds."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlencode

import requests

from .transport import DataGetError, RequestError, Transport

_FETCH_ERRORS = (RequestError, requests.RequestException, ValueError)


def _fetch(transport: Transport, path: str, entity_type: str, entity_id: str) -> Any:
    """GET an entity's data, raising DataGetError on failure."""
    try:
        return transport.get(path)
    except _FETCH_ERRORS as exc:
        raise DataGetError(exc, entity_type, entity_id) from exc


class Playback:
    """Playback resources."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def data(self, playback_id: str) -> dict[str, Any]:
        """Return the details of a playback."""
        if not playback_id:
            raise ValueError("playback key not supplied")
        return _fetch(
            self.transport, f"/playbacks/{playback_id}", "playback", playback_id
        )

    def control(self, playback_id: str, operation: str) -> None:
        """Apply an operation: restart, pause, unpause, reverse or forward."""
        self.transport.post(
            f"/playbacks/{playback_id}/control", {"operation": operation}
        )

    def stop(self, playback_id: str) -> None:
        """Stop a playback."""
        self.transport.delete(f"/playbacks/{playback_id}")


class LiveRecording:
    """Recordings in progress."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def data(self, name: str) -> dict[str, Any]:
        """Return the state of a live recording."""
        if not name:
            raise ValueError("liveRecording key not supplied")
        return _fetch(
            self.transport, f"/recordings/live/{name}", "liveRecording", name
        )

    def stop(self, name: str) -> None:
        """Stop the recording; the server refuses if it is already stopped."""
        if not name:
            raise ValueError("liveRecording key not supplied")
        self.transport.post(f"/recordings/live/{name}/stop")

    def pause(self, name: str) -> None:
        self.transport.post(f"/recordings/live/{name}/pause")

    def resume(self, name: str) -> None:
        self.transport.delete(f"/recordings/live/{name}/pause")

    def mute(self, name: str) -> None:
        self.transport.post(f"/recordings/live/{name}/mute")

    def unmute(self, name: str) -> None:
        self.transport.delete(f"/recordings/live/{name}/mute")

    def scrap(self, name: str) -> None:
        """Stop the recording and discard it."""
        self.transport.delete(f"/recordings/live/{name}")


class StoredRecording:
    """Completed recordings."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def list(self) -> list[str]:
        """Return the names of the stored recordings."""
        recordings = self.transport.get("/recordings/stored") or []
        return [item.get("name", "") for item in recordings]

    def data(self, name: str) -> dict[str, Any]:
        """Return the details of a stored recording."""
        if not name:
            raise ValueError("storedRecording key not supplied")
        return _fetch(
            self.transport, f"/recordings/stored/{name}", "storedRecording", name
        )

    def copy(self, name: str, dest: str) -> str:
        """Copy a stored recording and return the name of the copy."""
        self.transport.post(
            f"/recordings/stored/{name}/copy", {"destinationRecordingName": dest}
        )
        return dest

    def delete(self, name: str) -> None:
        self.transport.delete(f"/recordings/stored/{name}")


class Sound:
    """Sound files available on the server."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def data(self, name: str) -> dict[str, Any]:
        """Return the details of a sound."""
        if not name:
            raise ValueError("sound key not supplied")
        return _fetch(self.transport, f"/sounds/{name}", "sound", name)

    def list(self, filters: Mapping[str, str] | None = None) -> list[str]:
        """Return sound names, optionally filtered by ``lang`` or ``format``."""
        path = "/sounds"
        if filters:
            path += "?" + urlencode(sorted(filters.items()))
        sounds = self.transport.get(path) or []
        return [item.get("name", "") for item in sounds]
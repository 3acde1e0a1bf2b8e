# ariclient

Python accessors for the HTTP side of the Asterisk REST Interface (ARI).
The package sends JSON requests to an ARI server and covers bridges,
playbacks, live and stored recordings, sounds, device states, endpoints,
mailboxes and text messages, together with the value types, identifier
helpers and time formats those resources use.

## Modules

| Module                 | Contents |
|------------------------|----------|
| `ariclient.transport`  | `Transport`, `RequestError`, `DataGetError`, `code_from_error`, `data_get_error` |
| `ariclient.bridge`     | `Bridge`, `AddChannelOptions`, `RecordingOptions` |
| `ariclient.media`      | `Playback`, `LiveRecording`, `StoredRecording`, `Sound` |
| `ariclient.devices`    | `DeviceState`, `Endpoint`, `Mailbox`, `TextMessage` |
| `ariclient.models`     | `Direction`, `DTMFOptions`, config, device-state and endpoint types and handles, `new_id` and id helpers |
| `ariclient.timefmt`    | `format_datetime`, `parse_datetime`, `encode_duration`, `decode_duration` |

## Connecting

Every accessor takes a `Transport`, which holds the server's root URL
and the credentials. Requests go out as JSON with HTTP basic
authentication when a username is set, and time out after
`REQUEST_TIMEOUT` (2 seconds) unless another timeout is given.

```python
from ariclient.transport import Transport

password = "password"
transport = Transport(
    "http://localhost:8088/ari",
    username="asterisk",
    password=password,
)
```

`Transport.get`, `post`, `put` and `delete` return the decoded JSON
body, or `None` when the response has no body. `delete(path, query)`
appends `query` to the path after a `?`.

## Working with resources

```python
from ariclient.bridge import AddChannelOptions, Bridge, RecordingOptions
from ariclient.devices import DeviceState, Endpoint, Mailbox, TextMessage
from ariclient.media import Playback, Sound, StoredRecording

bridges = Bridge(transport)
bridge_id = bridges.create("conf-1", "mixing", "conference")
bridges.add_channel(bridge_id, "chan-1", AddChannelOptions(mute=True))
playback_id = bridges.play(bridge_id, "", "sound:hello-world")
bridges.record(bridge_id, "conf-1-recording", RecordingOptions(format="wav"))

Playback(transport).control(playback_id, "pause")
StoredRecording(transport).copy("conf-1-recording", "conf-1-archive")
print(Sound(transport).list({"lang": "en"}))

states = DeviceState(transport)
states.update("Stasis:desk-12", "INUSE")
handle = states.get("Stasis:desk-12")
print(handle.data().state)

print(Endpoint(transport).list())          # ids of the form "tech/resource"
Mailbox(transport).update("1000@default", 2, 1)
TextMessage(transport).send("sip:alice", "PJSIP", "bob", "hi there", {})
```

`Bridge.create` and `Bridge.play` generate an identifier with `new_id()`
when given an empty one, and return the identifier used.
`Bridge.record` and `StoredRecording.copy` return the name of the
recording they produce. The `list` methods return identifiers
(names, ids, or `tech/resource` for endpoints); the `data` methods
return the server's description of one resource: `DeviceStateData` and
`EndpointData` for device states and endpoints, the decoded JSON
dictionary for the others.

`RecordingOptions.to_request(name)` shows the body a recording request
will carry; durations are sent as whole seconds.

## Identifiers and value types

- `parse_config_id("class/type/name")` splits a configuration id and
  raises `ValueError` when it has fewer than three parts.
- `endpoint_key_id(tech, resource)` gives `tech/resource`;
  `EndpointData.id()` gives `tech|resource`, and `from_endpoint_id`
  splits that form back, raising `ValueError` for too few or too many
  parts.
- `ConfigHandle`, `DeviceStateHandle` and `EndpointHandle` hold an id and
  an accessor and forward `data`, `update` and `delete` to it; a
  `ConfigHandle` works with any object that provides those three
  methods for configuration ids.
- `Direction` enumerates `none`, `in`, `out` and `both`; `DTMFOptions`
  holds DTMF timing as `timedelta` values.

## Errors

A non-2xx answer raises `RequestError`, which carries the HTTP status
in `code`; `code_from_error(err)` returns that code for a
`RequestError` and 0 for any other exception. A response body that is
not JSON raises `ValueError`.

The `data` methods raise `ValueError` when given an empty identifier,
and raise `DataGetError` when the fetch fails, naming the entity type
and identifier and keeping the underlying exception in `cause`:

```python
from ariclient.devices import Mailbox
from ariclient.transport import DataGetError, code_from_error

try:
    Mailbox(transport).data("missing@default")
except DataGetError as err:
    print(err, code_from_error(err.cause))
```

## Time values

ARI sends timestamps as `2005-02-04T13:12:06.000+0000` and durations as
whole seconds. `format_datetime` renders a `datetime` in that form
(naive values are taken as UTC) and `parse_datetime` reads it back as
an aware `datetime`, raising `ValueError` for text in another shape and
`TypeError` for a non-string. `encode_duration` turns a `timedelta`
into whole seconds, truncating toward zero; `decode_duration` accepts
only an integer and raises `TypeError` otherwise.

## What this package does not do

- There is no single client object and no reading of connection
  settings from the environment; build a `Transport` and the accessors
  you need yourself.
- It does not connect to the ARI event websocket, so it receives no
  events and offers no subscriptions.
- There is no accessor for channels: answering, hanging up,
  originating, playing to or recording a channel, DTMF, snooping and
  channel variables are not available.
- There are no accessors for the Asterisk system resources:
  server info, global variables, logging channels, modules, dynamic
  configuration objects and application subscriptions.
- It has no command-line program.
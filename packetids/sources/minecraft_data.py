import logging
import re
from typing import Any, Literal

import requests

from packetids.errors import DecodeError, FetchError, SchemaError

type Phase = Literal["login", "play", "status"]
type Side = Literal["clientbound", "serverbound"]
type Key = str | int
type Packets = dict[str, str]
type ProtocolIds = dict[Phase, dict[Side, Packets]]

log = logging.getLogger(__name__)

PROTOCOL_VERSION = "1.16.2"
BASE_URL = "https://raw.githubusercontent.com/PrismarineJS/minecraft-data/master/data/pc"
PROTOCOL_URL = f"{BASE_URL}/{PROTOCOL_VERSION}/protocol.json"

# handshaking has no clientbound packets and is left out
PHASES: list[Phase] = ["login", "play", "status"]
SIDES: dict[Side, str] = {
    "clientbound": "toClient",
    "serverbound": "toServer",
}

# "packet": ["container", [{"name": "name", "type": ["mapper", {"mappings": {...}}]}, ...]]
PACKET_PATH: tuple[Key, ...] = ("types", "packet", 1, 0, "type", 1, "mappings")


def fetch_protocol(url: str = PROTOCOL_URL) -> Any:
    log.info("Fetching %s", url)
    try:
        with requests.get(url) as r:
            r.raise_for_status()
            return r.json()
    except requests.exceptions.JSONDecodeError as e:
        error_message = f"{url} did not return valid JSON: {e}"
        raise DecodeError(error_message) from e
    except requests.RequestException as e:
        error_message = f"GET {url} failed: {e}"
        raise FetchError(error_message) from e


def format_path(keys: tuple[Key, ...]) -> str:
    path = ""
    for key in keys:
        if isinstance(key, int):
            path += f"[{key}]"
        else:
            path += f".{key}" if path else key
    return path or "<root>"


def unnest(data: Any, *keys: Key) -> Any:
    """Reach through nested dicts and lists following `keys`.

    String keys index dicts and integer keys index lists. Raises SchemaError
    naming the first step that does not match.
    """
    for i, key in enumerate(keys):
        path = format_path(keys[:i])
        if isinstance(key, int):
            if not isinstance(data, list):
                error_message = f"expected a list at {path}, got {type(data).__name__}"
                raise SchemaError(error_message)
            if key >= len(data):
                error_message = f"index {key} out of range at {path}"
                raise SchemaError(error_message)
        else:
            if not isinstance(data, dict):
                error_message = f"expected an object at {path}, got {type(data).__name__}"
                raise SchemaError(error_message)
            if key not in data:
                error_message = f"key {key!r} not found at {path}"
                raise SchemaError(error_message)
        data = data[key]
    return data


def parse_packet_id(pkt_id: str) -> int:
    """Packet ids are integer literals, usually hex ("0x1a")."""
    try:
        return int(pkt_id, 0)
    except ValueError:
        error_message = f"packet id {pkt_id!r} is not an integer literal"
        raise SchemaError(error_message) from None


def to_camel(name: str) -> str:
    """spawn_entity_living -> SpawnEntityLiving, set_slot2 -> SetSlot2."""
    name = re.sub(r"([a-zA-Z])(\d+)([a-zA-Z]?)", r"\1 \2 \3", name)
    words = (re.sub(r"[^a-zA-Z0-9]", "", w) for w in re.split(r"[_\-.\s]+", name))
    return "".join(w[:1].upper() + w[1:] for w in words)


def validate_mappings(mappings: Any, path: str):
    expected = f"Expected {path} to be dict[str, str]"
    if not isinstance(mappings, dict):
        error_message = f"{expected}, got {type(mappings).__name__} instead"
        raise SchemaError(error_message)

    for key, value in mappings.items():
        if not isinstance(value, str):
            error_message = f"{expected}, got value {value!r} instead"
            raise SchemaError(error_message)
        parse_packet_id(key)


def get_packets(protocol: Any, phase: Phase, side: Side) -> Packets:
    """Map each packet's normalized name to its id, as written in the schema."""
    keys = (phase, SIDES[side], *PACKET_PATH)
    mappings = unnest(protocol, *keys)
    validate_mappings(mappings, format_path(keys))

    packets: Packets = {}
    for pkt_id, raw_name in mappings.items():
        name = to_camel(raw_name)
        if not name.isidentifier():
            error_message = f"{side} packet {pkt_id} has no usable name: {raw_name!r}"
            raise SchemaError(error_message)
        if name in packets:
            error_message = f"{side} packets {packets[name]} and {pkt_id} are both named {name}"
            raise SchemaError(error_message)
        packets[name] = pkt_id

    return packets

import logging
import sys
from typing import Any

from packetids import compile_packets
from packetids.errors import PacketIdsError, SchemaError
from packetids.sources import minecraft_data
from packetids.sources.minecraft_data import PHASES, Packets, ProtocolIds

log = logging.getLogger(__name__)

SUFFIXES = {
    "clientbound": "Clientbound",
    "serverbound": "Serverbound",
}


def rename_shared(packets: Packets, shared: set[str], suffix: str) -> Packets:
    renamed: Packets = {}
    for name, pkt_id in packets.items():
        if name in shared:
            name += suffix
        if name in renamed:
            error_message = f"{name} is declared twice once shared names are suffixed"
            raise SchemaError(error_message)
        renamed[name] = pkt_id
    return renamed


def ensure_unique_names(clientbound: Packets, serverbound: Packets) -> tuple[Packets, Packets]:
    """Suffix every name used by both sides with the side it belongs to.

    Returns new mappings; the ids are kept as they are.
    """
    shared = clientbound.keys() & serverbound.keys()
    for name in sorted(shared):
        log.debug("%s is used by both sides, suffixing it", name)

    return (
        rename_shared(clientbound, shared, SUFFIXES["clientbound"]),
        rename_shared(serverbound, shared, SUFFIXES["serverbound"]),
    )


def check_global_names(protocol_ids: ProtocolIds):
    seen: dict[str, str] = {}
    for phase, sides in protocol_ids.items():
        for side, packets in sides.items():
            where = f"{phase} {side}"
            for name in packets:
                if name in seen:
                    error_message = f"{name} is declared in both {seen[name]} and {where}"
                    raise SchemaError(error_message)
                seen[name] = where


def get_protocol_ids(protocol: Any) -> ProtocolIds:
    protocol_ids: ProtocolIds = {}
    for phase in PHASES:
        try:
            clientbound, serverbound = ensure_unique_names(
                minecraft_data.get_packets(protocol, phase, "clientbound"),
                minecraft_data.get_packets(protocol, phase, "serverbound"),
            )
        except SchemaError as e:
            raise SchemaError(f"{phase}: {e}") from e

        log.info("%s: %d clientbound, %d serverbound", phase, len(clientbound), len(serverbound))
        protocol_ids[phase] = {"clientbound": clientbound, "serverbound": serverbound}

    check_global_names(protocol_ids)
    return protocol_ids


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    try:
        protocol_ids = get_protocol_ids(minecraft_data.fetch_protocol())
        compile_packets.write_packet_ids(protocol_ids, compile_packets.OUTPUT_FILE)
    except PacketIdsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

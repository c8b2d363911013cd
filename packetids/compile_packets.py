import logging
from pathlib import Path

from packetids.errors import FileError
from packetids.sources.minecraft_data import PHASES, SIDES, Packets, Phase, ProtocolIds, Side, parse_packet_id

log = logging.getLogger(__name__)

OUTPUT_FILE = "packetIDs.go"
TYPE_NAME = "PktID"
HEADER = f"""
// This file is automatically generated by packetids. DO NOT EDIT.

package data

//go:generate python -m packetids

// {TYPE_NAME} represents a packet ID used in the minecraft protocol.
type {TYPE_NAME} int32

// Valid {TYPE_NAME} values.
const (
""".lstrip()

GROUP_COMMENTS: dict[tuple[Phase, Side], str] = {
    ("login", "clientbound"): "Clientbound packets for connections in the login state.",
    ("login", "serverbound"): "Serverbound packets for connections in the login state.",
    ("play", "clientbound"): "Clientbound packets for connections in the play state.",
    ("play", "serverbound"): "Serverbound packets for connections in the play state.",
    ("status", "clientbound"): "Clientbound packets used to respond to ping/status requests.",
    ("status", "serverbound"): "Serverbound packets used to ping or read server status.",
}


def max_len(protocol_ids: ProtocolIds) -> int:
    return max(
        (len(name) for sides in protocol_ids.values() for packets in sides.values() for name in packets),
        default=0,
    )


def sort_packets(packets: Packets) -> list[tuple[str, str]]:
    return sorted(packets.items(), key=lambda item: (parse_packet_id(item[1]), item[0]))


def format_entry(name: str, pkt_id: str, width: int) -> str:
    return f"  {name:<{width}} {TYPE_NAME} = {pkt_id}\n"


def render(protocol_ids: ProtocolIds) -> str:
    width = max_len(protocol_ids)
    lines = [HEADER]
    for phase in PHASES:
        for side in SIDES:
            lines.append(f"  // {GROUP_COMMENTS[phase, side]}\n")
            lines.extend(format_entry(name, pkt_id, width) for name, pkt_id in sort_packets(protocol_ids[phase][side]))
        lines.append("\n")
    lines.append(")\n")
    return "".join(lines)


def write_packet_ids(protocol_ids: ProtocolIds, output_file: str | Path):
    content = render(protocol_ids)
    try:
        with open(output_file, "w") as out:
            out.write(content)
    except OSError as e:
        error_message = f"cannot write {output_file}: {e}"
        raise FileError(error_message) from e

    log.info("Wrote %s", output_file)

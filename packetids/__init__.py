"""Generate Go packet ID constants from minecraft-data's protocol.json."""

"""Azure infrastructure: translators, location handling and SDK-backed clients."""

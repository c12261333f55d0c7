"""Azure region name canonicalization."""


def normalize_location(location: str) -> str:
    """Canonicalize a region name: ``"East US"`` and ``"eastus"`` both become ``"eastus"``."""
    return location.replace(" ", "").lower()

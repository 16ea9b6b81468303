"""Video identifier input."""
from .identifiers import parse_identifiers, read_identifiers_file, collect_identifiers

__all__ = ["parse_identifiers", "read_identifiers_file", "collect_identifiers"]

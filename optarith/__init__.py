"""Fixed-width integer helpers, binary GCDs, big-integer utilities, a group interface and a max-heap."""

__version__ = "0.1.0"
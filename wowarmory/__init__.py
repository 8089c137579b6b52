"""Client for the World of Warcraft community web API, with dataclass records for its replies."""

__version__ = "0.1.0"
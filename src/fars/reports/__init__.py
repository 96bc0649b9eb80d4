"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, plot generation, and HTML output.
No analysis logic lives here — this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: map_state() for producing one state's accident map.
"""

from .generators import (
    NO_DATA_MESSAGE,
    map_state,
)

__all__ = [
    'NO_DATA_MESSAGE',
    'map_state',
]

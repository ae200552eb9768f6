"""Response envelope convention: map application outcomes to HTTP status + JSON body."""

from api_envelope.mapper import MappedResponse, ResponseMapper, map_outcome

__version__ = "1.0.0"

__all__ = ["MappedResponse", "ResponseMapper", "map_outcome"]

"""PRD decoding, validation and loading."""

from prdcheck.core.prd.graph import DependencyGraph
from prdcheck.core.prd.loader import PrdLoader
from prdcheck.core.prd.ranges import canonicalize_id_ranges, format_id_ranges, parse_id_ranges, ranges_from_ids
from prdcheck.core.prd.reservations import ReservationIndex
from prdcheck.core.prd.schema import DecodedStory, StoryDecoder
from prdcheck.core.prd.validator import BacklogValidator, validate_prd

__all__ = [
    "BacklogValidator",
    "DecodedStory",
    "DependencyGraph",
    "PrdLoader",
    "ReservationIndex",
    "StoryDecoder",
    "canonicalize_id_ranges",
    "format_id_ranges",
    "parse_id_ranges",
    "ranges_from_ids",
    "validate_prd",
]

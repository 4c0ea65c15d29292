"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class LookupOperation(str, Enum):
    """Cache namespace for each cacheable lookup."""

    KEYWORD = "KeywordLookup"
    ZIPCODE = "ZipcodeLookup"
    STATECODE = "StatecodeLookup"
    LAT_LONG = "LatLongLookup"
    STATE_BY_ZIP = "GetStateByZip"
    STATES = "GetStates"

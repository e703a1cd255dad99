"""
CaptureDesk Server - Timezone Identifiers

Canonical IANA timezone identifiers from zoneinfo (the tzdata package provides
the database where the system has none). Only region zones and UTC are
offered; backward-compatibility aliases such as US/Pacific, EST5EDT or Zulu
are left out.
"""

from functools import lru_cache
from typing import FrozenSet, List
import zoneinfo

# Region prefixes of canonical zones
REGIONS = (
    "Africa", "America", "Antarctica", "Arctic", "Asia",
    "Atlantic", "Australia", "Europe", "Indian", "Pacific",
)

# Links kept in the region areas for old names
_LEGACY_REGION_NAMES = {
    "America/Buenos_Aires", "America/Catamarca", "America/Cordoba", "America/Fort_Wayne",
    "America/Indianapolis", "America/Jujuy", "America/Knox_IN", "America/Louisville",
    "America/Mendoza", "America/Porto_Acre", "America/Rosario", "America/Santa_Isabel",
    "America/Shiprock", "America/Virgin", "America/Ensenada", "America/Atka",
    "Antarctica/South_Pole", "Asia/Ashkhabad", "Asia/Calcutta", "Asia/Chongqing",
    "Asia/Chungking", "Asia/Dacca", "Asia/Harbin", "Asia/Istanbul", "Asia/Kashgar",
    "Asia/Katmandu", "Asia/Macao", "Asia/Rangoon", "Asia/Saigon", "Asia/Tel_Aviv",
    "Asia/Thimbu", "Asia/Ujung_Pandang", "Asia/Ulan_Bator", "Atlantic/Faeroe",
    "Atlantic/Jan_Mayen", "Australia/ACT", "Australia/Canberra", "Australia/LHI",
    "Australia/NSW", "Australia/North", "Australia/Queensland", "Australia/South",
    "Australia/Tasmania", "Australia/Victoria", "Australia/West", "Australia/Yancowinna",
    "Europe/Belfast", "Europe/Kiev", "Europe/Nicosia", "Europe/Tiraspol",
    "Pacific/Enderbury", "Pacific/Johnston", "Pacific/Ponape", "Pacific/Samoa",
    "Pacific/Truk", "Pacific/Yap",
}


@lru_cache(maxsize=1)
def TimezoneIdentifiers() -> FrozenSet[str]:
    """Set of valid timezone identifiers"""
    names = {
        name for name in zoneinfo.available_timezones()
        if name.split("/", 1)[0] in REGIONS and "/" in name
    }
    return frozenset((names - _LEGACY_REGION_NAMES) | {"UTC"})


def ListTimezones() -> List[str]:
    """Sorted list of valid timezone identifiers"""
    return sorted(TimezoneIdentifiers())


def IsValidTimezone(name: str) -> bool:
    """Exact-match membership test"""
    return name in TimezoneIdentifiers()

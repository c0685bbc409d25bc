from __future__ import annotations

"""
Static division data for the three tiers.

- LOCATION_TO_DIVISIONS: canonical location -> (tier1, tier2, tier3) division
- TIER*_NEIGHBORS: per-tier geographic neighbor graphs (division -> neighbors)
- TIER_BALANCE: per-tier size bounds and iteration caps for the balancer

Ambiguous city names carry a disambiguated key (e.g. "Portland ME") so that the
plain key keeps its historical meaning (e.g. "Portland" is Portland, OR).
Keep this module pure data (no randomness, no I/O at import time).
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

DivisionTriple = Tuple[str, str, str]

LOCATION_TO_DIVISIONS: Dict[str, DivisionTriple] = {
    # Tier 1 markets
    "Boston": ("Atlantic", "Northeast", "New England MBL"),
    "Brooklyn": ("Atlantic", "Northeast", "New England MBL"),
    "New York": ("Atlantic", "Northeast", "New England MBL"),
    "Philadelphia": ("Atlantic", "Northeast", "Greater Philadelphia MBL"),
    "Toronto": ("Atlantic", "Northeast", "Twin Cities MBL"),
    "Chicago": ("Central", "Great Lakes", "Greater Chicago MBL"),
    "Cleveland": ("Central", "Great Lakes", "Greater Detroit MBL"),
    "Detroit": ("Central", "Great Lakes", "Greater Detroit MBL"),
    "Indiana": ("Central", "Great Lakes", "Midwest College Towns MBL"),
    "Milwaukee": ("Central", "Great Lakes", "Greater Chicago MBL"),
    "Atlanta": ("Southeast", "Southeast", "Atlanta Metro MBL"),
    "Charlotte": ("Southeast", "Southeast", "North Carolina Triangle MBL"),
    "Miami": ("Southeast", "Southeast", "South Florida MBL"),
    "Orlando": ("Southeast", "Southeast", "South Florida MBL"),
    "Washington": ("Southeast", "Southeast", "Greater Philadelphia MBL"),
    "Denver": ("Northwest", "Southwest", "Mountain West MBL"),
    "Minnesota": ("Northwest", "Great Plains", "Twin Cities MBL"),
    "Oklahoma City": ("Northwest", "Great Plains", "Gulf Coast MBL"),
    "Portland": ("Northwest", "Pacific Northwest", "Greater Seattle MBL"),
    "Utah": ("Northwest", "Southwest", "Mountain West MBL"),
    "Golden State": ("Pacific", "California", "Bay Area MBL"),
    "LA": ("Pacific", "California", "Greater Los Angeles MBL"),
    "Phoenix": ("Pacific", "Southwest", "Phoenix Metro MBL"),
    "Sacramento": ("Pacific", "California", "Central Valley MBL"),
    "Dallas": ("Southwest", "Texas", "Dallas-Fort Worth MBL"),
    "Houston": ("Southwest", "Texas", "Greater Houston MBL"),
    "Memphis": ("Southwest", "South", "Tennessee Valley MBL"),
    "New Orleans": ("Southwest", "South", "Gulf Coast MBL"),
    "San Antonio": ("Southwest", "Texas", "Dallas-Fort Worth MBL"),
    # Tier 2 markets
    "Seattle": ("Northwest", "Pacific Northwest", "Greater Seattle MBL"),
    "Tacoma": ("Northwest", "Pacific Northwest", "Greater Seattle MBL"),
    "Spokane": ("Northwest", "Pacific Northwest", "Greater Seattle MBL"),
    "Salem": ("Northwest", "Pacific Northwest", "Pacific NW Small Cities MBL"),
    "Eugene": ("Northwest", "Pacific Northwest", "Pacific NW Small Cities MBL"),
    "Vancouver": ("Northwest", "Pacific Northwest", "Pacific NW Small Cities MBL"),
    "Victoria": ("Northwest", "Pacific Northwest", "Pacific NW Small Cities MBL"),
    "Boise": ("Northwest", "Pacific Northwest", "Pacific NW Small Cities MBL"),
    "San Diego": ("Pacific", "California", "Greater Los Angeles MBL"),
    "Anaheim": ("Pacific", "California", "Greater Los Angeles MBL"),
    "Riverside": ("Pacific", "California", "Inland Empire MBL"),
    "Ontario": ("Pacific", "California", "Inland Empire MBL"),
    "Tijuana": ("Pacific", "California", "Border Cities MBL"),
    "Oakland": ("Pacific", "California", "Bay Area MBL"),
    "San Jose": ("Pacific", "California", "Bay Area MBL"),
    "Fresno": ("Pacific", "California", "Central Valley MBL"),
    "Las Vegas": ("Pacific", "Southwest", "Mountain West MBL"),
    "Reno": ("Pacific", "Southwest", "Mountain West MBL"),
    "Albuquerque": ("Northwest", "Southwest", "Mountain West MBL"),
    "Las Cruces": ("Southwest", "Southwest", "Border Cities MBL"),
    "Tucson": ("Pacific", "Southwest", "Phoenix Metro MBL"),
    "Hermosillo": ("Pacific", "Southwest", "Border Cities MBL"),
    "Ciudad Juárez": ("Southwest", "Southwest", "Border Cities MBL"),
    "Colorado Springs": ("Northwest", "Southwest", "Mountain West MBL"),
    "Omaha": ("Central", "Great Plains", "Midwest College Towns MBL"),
    "Lincoln": ("Central", "Great Plains", "Midwest College Towns MBL"),
    "Wichita": ("Southwest", "Great Plains", "Midwest College Towns MBL"),
    "Kansas City": ("Central", "Great Plains", "Midwest College Towns MBL"),
    "Des Moines": ("Central", "Great Plains", "Midwest College Towns MBL"),
    "Sioux Falls": ("Northwest", "Great Plains", "Twin Cities MBL"),
    "Tulsa": ("Southwest", "Great Plains", "Gulf Coast MBL"),
    "St. Louis": ("Central", "Great Plains", "Ohio Valley MBL"),
    "Pittsburgh": ("Central", "Great Lakes", "Greater Philadelphia MBL"),
    "Columbus": ("Central", "Great Lakes", "Ohio Valley MBL"),
    "Cincinnati": ("Central", "Great Lakes", "Ohio Valley MBL"),
    "Grand Rapids": ("Central", "Great Lakes", "Greater Detroit MBL"),
    "Madison": ("Central", "Great Lakes", "Greater Chicago MBL"),
    "Fort Wayne": ("Central", "Great Lakes", "Midwest College Towns MBL"),
    "Toledo": ("Central", "Great Lakes", "Greater Detroit MBL"),
    "Buffalo": ("Atlantic", "Great Lakes", "Upstate New York MBL"),
    "Louisville": ("Central", "South", "Ohio Valley MBL"),
    "Nashville": ("Southwest", "South", "Tennessee Valley MBL"),
    "Birmingham": ("Southeast", "South", "Tennessee Valley MBL"),
    "Greenville": ("Southeast", "South", "North Carolina Triangle MBL"),
    "Little Rock": ("Southwest", "South", "Tennessee Valley MBL"),
    "Chattanooga": ("Southeast", "South", "Tennessee Valley MBL"),
    "Knoxville": ("Southeast", "South", "Tennessee Valley MBL"),
    "Mobile": ("Southeast", "South", "Gulf Coast MBL"),
    "Columbia": ("Southeast", "Southeast", "North Carolina Triangle MBL"),
    "Raleigh": ("Southeast", "Southeast", "North Carolina Triangle MBL"),
    "Richmond": ("Southeast", "Southeast", "North Carolina Triangle MBL"),
    "Norfolk": ("Southeast", "Southeast", "North Carolina Triangle MBL"),
    "Greensboro": ("Southeast", "Southeast", "North Carolina Triangle MBL"),
    "Charleston": ("Southeast", "Southeast", "North Carolina Triangle MBL"),
    "Savannah": ("Southeast", "Southeast", "Atlanta Metro MBL"),
    "Montreal": ("Atlantic", "Northeast", "New England MBL"),
    "Quebec": ("Atlantic", "Northeast", "New England MBL"),
    "Ottawa": ("Atlantic", "Northeast", "New England MBL"),
    "Hartford": ("Atlantic", "Northeast", "New England MBL"),
    "Providence": ("Atlantic", "Northeast", "New England MBL"),
    "Albany": ("Atlantic", "Northeast", "Upstate New York MBL"),
    "Rochester": ("Atlantic", "Northeast", "Upstate New York MBL"),
    "Worcester": ("Atlantic", "Northeast", "New England MBL"),
    "Portland ME": ("Atlantic", "Northeast", "New England MBL"),
    "Austin": ("Southwest", "Texas", "Dallas-Fort Worth MBL"),
    "Corpus Christi": ("Southwest", "Texas", "Greater Houston MBL"),
    "Lubbock": ("Southwest", "Texas", "Dallas-Fort Worth MBL"),
    "Amarillo": ("Southwest", "Texas", "Dallas-Fort Worth MBL"),
    "Waco": ("Southwest", "Texas", "Dallas-Fort Worth MBL"),
    "Laredo": ("Southwest", "Texas", "Border Cities MBL"),
    "Monterrey": ("Southwest", "Texas", "Border Cities MBL"),
    "Saltillo": ("Southwest", "Texas", "Border Cities MBL"),
    "Calgary": ("Northwest", "Prairie/Mountain Canada", "Twin Cities MBL"),
    "Edmonton": ("Northwest", "Prairie/Mountain Canada", "Twin Cities MBL"),
    "Saskatoon": ("Northwest", "Prairie/Mountain Canada", "Twin Cities MBL"),
    "Regina": ("Northwest", "Prairie/Mountain Canada", "Twin Cities MBL"),
    "Winnipeg": ("Central", "Prairie/Mountain Canada", "Twin Cities MBL"),
    "Lethbridge": ("Northwest", "Prairie/Mountain Canada", "Mountain West MBL"),
    "Missoula": ("Northwest", "Prairie/Mountain Canada", "Mountain West MBL"),
    "Mexico City": ("Southwest", "Central Mexico", "Border Cities MBL"),
    "Guadalajara": ("Pacific", "Central Mexico", "Border Cities MBL"),
    "Puebla": ("Southwest", "Central Mexico", "Border Cities MBL"),
    "León": ("Southwest", "Central Mexico", "Border Cities MBL"),
    "Querétaro": ("Southwest", "Central Mexico", "Border Cities MBL"),
    "Aguascalientes": ("Southwest", "Central Mexico", "Border Cities MBL"),
    "Toluca": ("Southwest", "Central Mexico", "Border Cities MBL"),
    # Tier 3 markets
    "Glendale": ("Pacific", "California", "Greater Los Angeles MBL"),
    "Pasadena": ("Pacific", "California", "Greater Los Angeles MBL"),
    "Long Beach": ("Pacific", "California", "Greater Los Angeles MBL"),
    "Torrance": ("Pacific", "California", "Greater Los Angeles MBL"),
    "Irvine": ("Pacific", "California", "Greater Los Angeles MBL"),
    "Santa Clarita": ("Pacific", "California", "Greater Los Angeles MBL"),
    "Fremont": ("Pacific", "California", "Bay Area MBL"),
    "Hayward": ("Pacific", "California", "Bay Area MBL"),
    "Richmond CA": ("Pacific", "California", "Bay Area MBL"),
    "Daly City": ("Pacific", "California", "Bay Area MBL"),
    "San Mateo": ("Pacific", "California", "Bay Area MBL"),
    "Concord": ("Pacific", "California", "Bay Area MBL"),
    "San Bernardino": ("Pacific", "California", "Inland Empire MBL"),
    "Moreno Valley": ("Pacific", "California", "Inland Empire MBL"),
    "Fontana": ("Pacific", "California", "Inland Empire MBL"),
    "Corona": ("Pacific", "California", "Inland Empire MBL"),
    "Rancho Cucamonga": ("Pacific", "California", "Inland Empire MBL"),
    "Redlands": ("Pacific", "California", "Inland Empire MBL"),
    "Bakersfield": ("Pacific", "California", "Central Valley MBL"),
    "Modesto": ("Pacific", "California", "Central Valley MBL"),
    "Stockton": ("Pacific", "California", "Central Valley MBL"),
    "Visalia": ("Pacific", "California", "Central Valley MBL"),
    "Merced": ("Pacific", "California", "Central Valley MBL"),
    "Turlock": ("Pacific", "California", "Central Valley MBL"),
    "Aurora": ("Central", "Great Lakes", "Greater Chicago MBL"),
    "Naperville": ("Central", "Great Lakes", "Greater Chicago MBL"),
    "Joliet": ("Central", "Great Lakes", "Greater Chicago MBL"),
    "Rockford": ("Central", "Great Lakes", "Greater Chicago MBL"),
    "Elgin": ("Central", "Great Lakes", "Greater Chicago MBL"),
    "Peoria": ("Central", "Great Lakes", "Greater Chicago MBL"),
    "Sugar Land": ("Southwest", "Texas", "Greater Houston MBL"),
    "The Woodlands": ("Southwest", "Texas", "Greater Houston MBL"),
    "Pearland": ("Southwest", "Texas", "Greater Houston MBL"),
    "League City": ("Southwest", "Texas", "Greater Houston MBL"),
    "Pasadena TX": ("Southwest", "Texas", "Greater Houston MBL"),
    "Beaumont": ("Southwest", "Texas", "Greater Houston MBL"),
    "Arlington": ("Southwest", "Texas", "Dallas-Fort Worth MBL"),
    "Plano": ("Southwest", "Texas", "Dallas-Fort Worth MBL"),
    "Irving": ("Southwest", "Texas", "Dallas-Fort Worth MBL"),
    "Garland": ("Southwest", "Texas", "Dallas-Fort Worth MBL"),
    "Frisco": ("Southwest", "Texas", "Dallas-Fort Worth MBL"),
    "Denton": ("Southwest", "Texas", "Dallas-Fort Worth MBL"),
    "Mesa": ("Pacific", "Southwest", "Phoenix Metro MBL"),
    "Chandler": ("Pacific", "Southwest", "Phoenix Metro MBL"),
    "Scottsdale": ("Pacific", "Southwest", "Phoenix Metro MBL"),
    "Gilbert": ("Pacific", "Southwest", "Phoenix Metro MBL"),
    "Peoria AZ": ("Pacific", "Southwest", "Phoenix Metro MBL"),
    "Flagstaff": ("Pacific", "Southwest", "Phoenix Metro MBL"),
    "Marietta": ("Southeast", "Southeast", "Atlanta Metro MBL"),
    "Roswell": ("Southeast", "Southeast", "Atlanta Metro MBL"),
    "Macon": ("Southeast", "Southeast", "Atlanta Metro MBL"),
    "Columbus GA": ("Southeast", "Southeast", "Atlanta Metro MBL"),
    "Athens": ("Southeast", "Southeast", "Atlanta Metro MBL"),
    "Warner Robins": ("Southeast", "Southeast", "Atlanta Metro MBL"),
    "Warren": ("Central", "Great Lakes", "Greater Detroit MBL"),
    "Ann Arbor": ("Central", "Great Lakes", "Greater Detroit MBL"),
    "Lansing": ("Central", "Great Lakes", "Greater Detroit MBL"),
    "Dearborn": ("Central", "Great Lakes", "Greater Detroit MBL"),
    "Rochester Hills": ("Central", "Great Lakes", "Greater Detroit MBL"),
    "Flint": ("Central", "Great Lakes", "Greater Detroit MBL"),
    "St. Paul": ("Central", "Great Plains", "Twin Cities MBL"),
    "Rochester MN": ("Central", "Great Plains", "Twin Cities MBL"),
    "Duluth": ("Northwest", "Great Plains", "Twin Cities MBL"),
    "St. Cloud": ("Central", "Great Plains", "Twin Cities MBL"),
    "Mankato": ("Central", "Great Plains", "Twin Cities MBL"),
    "Bloomington": ("Central", "Great Plains", "Twin Cities MBL"),
    "Bellevue": ("Northwest", "Pacific Northwest", "Greater Seattle MBL"),
    "Kent": ("Northwest", "Pacific Northwest", "Greater Seattle MBL"),
    "Everett": ("Northwest", "Pacific Northwest", "Greater Seattle MBL"),
    "Bellingham": ("Northwest", "Pacific Northwest", "Greater Seattle MBL"),
    "Yakima": ("Northwest", "Pacific Northwest", "Greater Seattle MBL"),
    "Kennewick": ("Northwest", "Pacific Northwest", "Greater Seattle MBL"),
    "Fort Lauderdale": ("Southeast", "Southeast", "South Florida MBL"),
    "Pembroke Pines": ("Southeast", "Southeast", "South Florida MBL"),
    "Boca Raton": ("Southeast", "Southeast", "South Florida MBL"),
    "West Palm Beach": ("Southeast", "Southeast", "South Florida MBL"),
    "Fort Myers": ("Southeast", "Southeast", "South Florida MBL"),
    "Port St. Lucie": ("Southeast", "Southeast", "South Florida MBL"),
    "Lowell": ("Atlantic", "Northeast", "New England MBL"),
    "Springfield": ("Atlantic", "Northeast", "New England MBL"),
    "Bridgeport": ("Atlantic", "Northeast", "New England MBL"),
    "New Haven": ("Atlantic", "Northeast", "New England MBL"),
    "Amherst": ("Atlantic", "Northeast", "New England MBL"),
    "Burlington": ("Atlantic", "Northeast", "New England MBL"),
    "Reading": ("Atlantic", "Northeast", "Greater Philadelphia MBL"),
    "Allentown": ("Atlantic", "Northeast", "Greater Philadelphia MBL"),
    "Bethlehem": ("Atlantic", "Northeast", "Greater Philadelphia MBL"),
    "Trenton": ("Atlantic", "Northeast", "Greater Philadelphia MBL"),
    "Wilmington": ("Atlantic", "Northeast", "Greater Philadelphia MBL"),
    "Lancaster": ("Atlantic", "Northeast", "Greater Philadelphia MBL"),
    "Wenatchee": ("Northwest", "Pacific Northwest", "Pacific NW Small Cities MBL"),
    "Bend": ("Northwest", "Pacific Northwest", "Pacific NW Small Cities MBL"),
    "Medford": ("Northwest", "Pacific Northwest", "Pacific NW Small Cities MBL"),
    "Idaho Falls": ("Northwest", "Pacific Northwest", "Pacific NW Small Cities MBL"),
    "Pocatello": ("Northwest", "Pacific Northwest", "Pacific NW Small Cities MBL"),
    "Binghamton": ("Atlantic", "Northeast", "Upstate New York MBL"),
    "Utica": ("Atlantic", "Northeast", "Upstate New York MBL"),
    "Ithaca": ("Atlantic", "Northeast", "Upstate New York MBL"),
    "Elmira": ("Atlantic", "Northeast", "Upstate New York MBL"),
    "Glens Falls": ("Atlantic", "Northeast", "Upstate New York MBL"),
    "Plattsburgh": ("Atlantic", "Northeast", "Upstate New York MBL"),
    "Durham": ("Southeast", "Southeast", "North Carolina Triangle MBL"),
    "Fayetteville": ("Southeast", "Southeast", "North Carolina Triangle MBL"),
    "Wilmington NC": ("Southeast", "Southeast", "North Carolina Triangle MBL"),
    "Asheville": ("Southeast", "Southeast", "North Carolina Triangle MBL"),
    "High Point": ("Southeast", "Southeast", "North Carolina Triangle MBL"),
    "Winston-Salem": ("Southeast", "Southeast", "North Carolina Triangle MBL"),
    "Akron": ("Central", "Great Lakes", "Ohio Valley MBL"),
    "Dayton": ("Central", "Great Lakes", "Ohio Valley MBL"),
    "Canton": ("Central", "Great Lakes", "Ohio Valley MBL"),
    "Youngstown": ("Central", "Great Lakes", "Ohio Valley MBL"),
    "Huntington": ("Central", "Great Lakes", "Ohio Valley MBL"),
    "Charleston WV": ("Central", "Great Lakes", "Ohio Valley MBL"),
    "Muncie": ("Central", "Great Lakes", "Midwest College Towns MBL"),
    "South Bend": ("Central", "Great Lakes", "Midwest College Towns MBL"),
    "Champaign": ("Central", "Great Lakes", "Midwest College Towns MBL"),
    "Ames": ("Central", "Great Plains", "Midwest College Towns MBL"),
    "Iowa City": ("Central", "Great Plains", "Midwest College Towns MBL"),
    "Kalamazoo": ("Central", "Great Lakes", "Midwest College Towns MBL"),
    "Provo": ("Northwest", "Southwest", "Mountain West MBL"),
    "Ogden": ("Northwest", "Southwest", "Mountain West MBL"),
    "Fort Collins": ("Northwest", "Southwest", "Mountain West MBL"),
    "Boulder": ("Northwest", "Southwest", "Mountain West MBL"),
    "Billings": ("Northwest", "Prairie/Mountain Canada", "Mountain West MBL"),
    "Casper": ("Northwest", "Southwest", "Mountain West MBL"),
    "Murfreesboro": ("Southwest", "South", "Tennessee Valley MBL"),
    "Huntsville": ("Southeast", "South", "Tennessee Valley MBL"),
    "Tuscaloosa": ("Southeast", "South", "Tennessee Valley MBL"),
    "Auburn": ("Southeast", "South", "Tennessee Valley MBL"),
    "Montgomery": ("Southeast", "South", "Tennessee Valley MBL"),
    "Jackson": ("Southwest", "South", "Tennessee Valley MBL"),
    "Baton Rouge": ("Southwest", "South", "Gulf Coast MBL"),
    "Shreveport": ("Southwest", "South", "Gulf Coast MBL"),
    "Lafayette": ("Southwest", "South", "Gulf Coast MBL"),
    "Lake Charles": ("Southwest", "South", "Gulf Coast MBL"),
    "Pensacola": ("Southeast", "Southeast", "Gulf Coast MBL"),
    "Fayetteville AR": ("Southwest", "South", "Gulf Coast MBL"),
    "McAllen": ("Southwest", "Texas", "Border Cities MBL"),
    "Brownsville": ("Southwest", "Texas", "Border Cities MBL"),
    "Yuma": ("Pacific", "Southwest", "Border Cities MBL"),
    "Nuevo Laredo": ("Southwest", "Texas", "Border Cities MBL"),
    "Reynosa": ("Southwest", "Texas", "Border Cities MBL"),
    "Mexicali": ("Pacific", "California", "Border Cities MBL"),
}

# Returned when neither the location nor the display name matches a table key.
DEFAULT_DIVISION: Dict[int, str] = {
    1: "Atlantic",
    2: "Pacific Northwest",
    3: "Greater Los Angeles MBL",
}

# ---------------------------------------------------------------------------
# Geographic neighbor graphs
# ---------------------------------------------------------------------------

TIER1_NEIGHBORS: Dict[str, List[str]] = {
    "Atlantic": ["Central", "Southeast"],
    "Central": ["Atlantic", "Southeast", "Northwest", "Southwest"],
    "Southeast": ["Atlantic", "Central", "Southwest"],
    "Northwest": ["Central", "Pacific", "Southwest"],
    "Pacific": ["Northwest", "Southwest"],
    "Southwest": ["Central", "Southeast", "Northwest", "Pacific"],
}

TIER2_NEIGHBORS: Dict[str, List[str]] = {
    "Pacific Northwest": ["California", "Prairie/Mountain Canada"],
    "California": ["Pacific Northwest", "Southwest"],
    "Southwest": ["California", "Great Plains", "Texas", "Central Mexico"],
    "Great Plains": ["Southwest", "Great Lakes", "South", "Prairie/Mountain Canada"],
    "Great Lakes": ["Great Plains", "Northeast", "South"],
    "South": ["Great Lakes", "Southeast", "Great Plains", "Texas"],
    "Southeast": ["South", "Northeast"],
    "Northeast": ["Southeast", "Great Lakes"],
    "Texas": ["Southwest", "South", "Central Mexico"],
    "Prairie/Mountain Canada": ["Pacific Northwest", "Great Plains"],
    "Central Mexico": ["Texas", "Southwest"],
}

TIER3_NEIGHBORS: Dict[str, List[str]] = {
    "Greater Los Angeles MBL": ["Inland Empire MBL", "Bay Area MBL"],
    "Bay Area MBL": ["Greater Los Angeles MBL", "Central Valley MBL"],
    "Inland Empire MBL": ["Greater Los Angeles MBL", "Central Valley MBL"],
    "Central Valley MBL": ["Bay Area MBL", "Inland Empire MBL"],
    "Greater Seattle MBL": ["Pacific NW Small Cities MBL"],
    "Pacific NW Small Cities MBL": ["Greater Seattle MBL", "Mountain West MBL"],
    "Phoenix Metro MBL": ["Mountain West MBL", "Border Cities MBL"],
    "Mountain West MBL": ["Phoenix Metro MBL", "Pacific NW Small Cities MBL", "Border Cities MBL", "Twin Cities MBL"],
    "Border Cities MBL": ["Phoenix Metro MBL", "Mountain West MBL", "Dallas-Fort Worth MBL", "Greater Houston MBL"],
    "Dallas-Fort Worth MBL": ["Border Cities MBL", "Greater Houston MBL", "Gulf Coast MBL"],
    "Greater Houston MBL": ["Dallas-Fort Worth MBL", "Border Cities MBL", "Gulf Coast MBL"],
    "Greater Chicago MBL": ["Greater Detroit MBL", "Midwest College Towns MBL", "Twin Cities MBL"],
    "Greater Detroit MBL": ["Greater Chicago MBL", "Ohio Valley MBL", "Midwest College Towns MBL"],
    "Twin Cities MBL": ["Greater Chicago MBL", "Midwest College Towns MBL", "Mountain West MBL"],
    "Midwest College Towns MBL": ["Greater Chicago MBL", "Greater Detroit MBL", "Twin Cities MBL", "Ohio Valley MBL"],
    "Ohio Valley MBL": ["Greater Detroit MBL", "Midwest College Towns MBL", "Tennessee Valley MBL", "Greater Philadelphia MBL"],
    "New England MBL": ["Greater Philadelphia MBL", "Upstate New York MBL"],
    "Greater Philadelphia MBL": ["New England MBL", "Upstate New York MBL", "Ohio Valley MBL", "North Carolina Triangle MBL"],
    "Upstate New York MBL": ["New England MBL", "Greater Philadelphia MBL"],
    "Atlanta Metro MBL": ["North Carolina Triangle MBL", "Tennessee Valley MBL"],
    "North Carolina Triangle MBL": ["Atlanta Metro MBL", "Greater Philadelphia MBL", "South Florida MBL"],
    "South Florida MBL": ["North Carolina Triangle MBL", "Gulf Coast MBL"],
    "Tennessee Valley MBL": ["Atlanta Metro MBL", "Ohio Valley MBL", "Gulf Coast MBL"],
    "Gulf Coast MBL": ["Tennessee Valley MBL", "South Florida MBL", "Dallas-Fort Worth MBL", "Greater Houston MBL"],
}

NEIGHBORS_BY_TIER: Dict[int, Dict[str, List[str]]] = {
    1: TIER1_NEIGHBORS,
    2: TIER2_NEIGHBORS,
    3: TIER3_NEIGHBORS,
}

# Tier 1 only: division -> conference.
CONFERENCE_BY_DIVISION: Dict[str, str] = {
    "Atlantic": "East",
    "Central": "East",
    "Southeast": "East",
    "Northwest": "West",
    "Pacific": "West",
    "Southwest": "West",
}

# ---------------------------------------------------------------------------
# Balancer bounds
# ---------------------------------------------------------------------------

TIER2_NATURAL_SIZES: Dict[str, int] = {
    "Pacific Northwest": 8,
    "California": 8,
    "Southwest": 8,
    "Great Plains": 8,
    "Great Lakes": 8,
    "South": 8,
    "Southeast": 7,
    "Northeast": 9,
    "Texas": 8,
    "Prairie/Mountain Canada": 7,
    "Central Mexico": 7,
}

TIER3_NATURAL_SIZE: int = 6


@dataclass(frozen=True, slots=True)
class TierBalanceConfig:
    """Size bounds for one tier.

    Either `target` (fixed size, no flex) or `natural_sizes` (+/- flex) applies.
    Divisions missing from `natural_sizes` fall back to `default_natural`.
    """

    tier: int
    divisions: Tuple[str, ...]
    neighbors: Mapping[str, List[str]]
    max_iterations: int
    target: Optional[int] = None
    natural_sizes: Optional[Mapping[str, int]] = None
    default_natural: int = 6
    flex: int = 0

    def natural(self, division: str) -> int:
        if self.natural_sizes is None:
            return int(self.target or 0)
        return int(self.natural_sizes.get(division, self.default_natural))

    def max_size(self, division: str) -> int:
        if self.natural_sizes is None:
            return int(self.target or 0)
        return self.natural(division) + int(self.flex)

    def min_size(self, division: str) -> int:
        if self.natural_sizes is None:
            return int(self.target or 0)
        return max(0, self.natural(division) - int(self.flex))


TIER_BALANCE: Dict[int, TierBalanceConfig] = {
    1: TierBalanceConfig(
        tier=1,
        divisions=("Atlantic", "Central", "Southeast", "Northwest", "Pacific", "Southwest"),
        neighbors=TIER1_NEIGHBORS,
        target=5,
        max_iterations=20,
    ),
    2: TierBalanceConfig(
        tier=2,
        divisions=tuple(TIER2_NEIGHBORS.keys()),
        neighbors=TIER2_NEIGHBORS,
        natural_sizes=TIER2_NATURAL_SIZES,
        flex=2,
        max_iterations=30,
    ),
    3: TierBalanceConfig(
        tier=3,
        divisions=tuple(TIER3_NEIGHBORS.keys()),
        neighbors=TIER3_NEIGHBORS,
        natural_sizes={d: TIER3_NATURAL_SIZE for d in TIER3_NEIGHBORS},
        default_natural=TIER3_NATURAL_SIZE,
        flex=2,
        max_iterations=40,
    ),
}

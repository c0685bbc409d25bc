from __future__ import annotations

"""Default league membership (three tiers).

Teams are seeded in their historical divisions with ids offset per tier
(tier 1: 0.., tier 2: 1000.., tier 3: 2000..). Locations resolve to the most
specific LOCATION_TO_DIVISIONS key that prefixes the display name, unless the
name needs an explicit disambiguation (LOCATION_OVERRIDES).
"""

from typing import Dict, List, Optional, Tuple

from config import require_tier

from .config import LOCATION_TO_DIVISIONS
from .types import Team

TIER1_DIVISIONS: Dict[str, List[str]] = {
    "Atlantic": ["Boston Celtics", "Brooklyn Nets", "New York Knicks", "Philadelphia 76ers", "Toronto Raptors"],
    "Central": ["Chicago Bulls", "Cleveland Cavaliers", "Detroit Pistons", "Indiana Pacers", "Milwaukee Bucks"],
    "Southeast": ["Atlanta Hawks", "Charlotte Hornets", "Miami Heat", "Orlando Magic", "Washington Wizards"],
    "Northwest": ["Denver Nuggets", "Minnesota Timberwolves", "Oklahoma City Thunder", "Portland Trail Blazers", "Utah Jazz"],
    "Pacific": ["Golden State Warriors", "LA Clippers", "LA Lakers", "Phoenix Suns", "Sacramento Kings"],
    "Southwest": ["Dallas Mavericks", "Houston Rockets", "Memphis Grizzlies", "New Orleans Pelicans", "San Antonio Spurs"],
}

TIER2_DIVISIONS: Dict[str, List[str]] = {
    "Pacific Northwest": ["Seattle Storm", "Tacoma Thunder", "Spokane Shock", "Salem Soldiers", "Eugene Emeralds", "Vancouver Volcanoes", "Victoria Vanguard", "Boise Hawks"],
    "California": ["San Diego Surf", "Anaheim Aces", "Riverside Renegades", "Ontario Outlaws", "Tijuana Toros", "Oakland Oaks", "San Jose Sabercats", "Fresno Fire"],
    "Southwest": ["Las Vegas Vipers", "Reno Aces", "Albuquerque Atoms", "Las Cruces Cruisers", "Tucson Titans", "Hermosillo Heat", "Ciudad Juárez Jaguars", "Colorado Springs Summit"],
    "Great Plains": ["Omaha Storm", "Lincoln Lightning", "Wichita Wings", "Kansas City Knights", "Des Moines Dragons", "Sioux Falls Skyforce", "Tulsa Tornadoes", "St. Louis Spirit"],
    "Great Lakes": ["Pittsburgh Pioneers", "Columbus Crush", "Cincinnati Cyclones", "Grand Rapids Gold", "Madison Capitals", "Fort Wayne Fury", "Toledo Thunder", "Buffalo Blaze"],
    "South": ["Louisville Lightning", "Nashville Knights", "Birmingham Barons", "Greenville Glory", "Little Rock Rockets", "Chattanooga Cheetahs", "Knoxville Force", "Mobile Mystics"],
    "Southeast": ["Columbia Colonials", "Raleigh Raptors", "Richmond Rebels", "Norfolk Tides", "Greensboro Guardians", "Charleston Thunder", "Savannah Storm"],
    "Northeast": ["Montreal Metros", "Quebec City Caribou", "Ottawa Outlaws", "Hartford Hawks", "Providence Storm", "Albany Empire", "Rochester Royals", "Worcester Warriors", "Portland Pirates"],
    "Texas": ["Austin Thunder", "Corpus Christi Waves", "Lubbock Hawks", "Amarillo Dusters", "Waco Warriors", "Laredo Heat", "Monterrey Montañas", "Saltillo Sabers"],
    "Prairie/Mountain Canada": ["Calgary Flames", "Edmonton Energy", "Saskatoon Storm", "Regina Rebels", "Winnipeg Blizzard", "Lethbridge Lancers", "Missoula Mavericks"],
    "Central Mexico": ["Mexico City Aztecs", "Guadalajara Gallos", "Puebla Panthers", "León Lions", "Querétaro Quetzals", "Aguascalientes Armada", "Toluca Titans"],
}

TIER3_DIVISIONS: Dict[str, List[str]] = {
    "Greater Los Angeles MBL": ["Glendale Guardians", "Pasadena Panthers", "Long Beach Lions", "Torrance Titans", "Irvine Iguanas", "Santa Clarita Storm"],
    "Bay Area MBL": ["Fremont Flyers", "Hayward Hawks", "Richmond Raptors", "Daly City Dragons", "San Mateo Soldiers", "Concord Cyclones"],
    "Inland Empire MBL": ["San Bernardino Spartans", "Moreno Valley Mavericks", "Fontana Fire", "Corona Cobras", "Rancho Cucamonga Rattlers", "Redlands Raiders"],
    "Central Valley MBL": ["Bakersfield Blaze", "Modesto Mustangs", "Stockton Spartans", "Visalia Vipers", "Merced Meteors", "Turlock Thunder"],
    "Greater Chicago MBL": ["Aurora Aces", "Naperville Knights", "Joliet Jaguars", "Rockford Raptors", "Elgin Eagles", "Peoria Pioneers"],
    "Greater Houston MBL": ["Sugar Land Stars", "The Woodlands Warriors", "Pearland Panthers", "League City Lions", "Pasadena Predators", "Beaumont Bobcats"],
    "Dallas-Fort Worth MBL": ["Arlington Armada", "Plano Patriots", "Irving Ironmen", "Garland Giants", "Frisco Flyers", "Denton Dragons"],
    "Phoenix Metro MBL": ["Mesa Monsoon", "Chandler Chiefs", "Scottsdale Scorpions", "Gilbert Gladiators", "Peoria Predators", "Flagstaff Fire"],
    "Atlanta Metro MBL": ["Marietta Mavericks", "Roswell Raptors", "Macon Meteors", "Columbus Cavalry", "Athens Avengers", "Warner Robins Warriors"],
    "Greater Detroit MBL": ["Warren Warriors", "Ann Arbor Aces", "Lansing Lightning", "Dearborn Defenders", "Rochester Hills Raptors", "Flint Fire"],
    "Twin Cities MBL": ["St. Paul Saints", "Rochester Royals", "Duluth Dragons", "St. Cloud Storm", "Mankato Mavericks", "Bloomington Blaze"],
    "Greater Seattle MBL": ["Bellevue Blazers", "Kent Kings", "Everett Eagles", "Bellingham Bulls", "Yakima Yaks", "Kennewick Knights"],
    "South Florida MBL": ["Fort Lauderdale Force", "Pembroke Pines Panthers", "Boca Raton Bulls", "West Palm Beach Warriors", "Fort Myers Fire", "Port St. Lucie Pirates"],
    "New England MBL": ["Lowell Lightning", "Springfield Stars", "Bridgeport Blaze", "New Haven Knights", "Amherst Aces", "Burlington Bears"],
    "Greater Philadelphia MBL": ["Reading Raptors", "Allentown Aces", "Bethlehem Bears", "Trenton Thunder", "Wilmington Warriors", "Lancaster Lions"],
    "Pacific NW Small Cities MBL": ["Vancouver Vipers", "Wenatchee Warriors", "Bend Blazers", "Medford Meteors", "Idaho Falls Ice", "Pocatello Pioneers"],
    "Upstate New York MBL": ["Binghamton Bears", "Utica United", "Ithaca Ice", "Elmira Eagles", "Glens Falls Giants", "Plattsburgh Patriots"],
    "North Carolina Triangle MBL": ["Durham Dragons", "Fayetteville Fire", "Wilmington Waves", "Asheville Altitude", "High Point Hawks", "Winston-Salem Warriors"],
    "Ohio Valley MBL": ["Akron Aces", "Dayton Dragons", "Canton Cavalry", "Youngstown Yaks", "Huntington Hawks", "Charleston Chiefs"],
    "Midwest College Towns MBL": ["Muncie Mustangs", "South Bend Storm", "Champaign Chiefs", "Ames Aces", "Iowa City Icons", "Kalamazoo Kings"],
    "Mountain West MBL": ["Provo Peaks", "Ogden Outlaws", "Fort Collins Flyers", "Boulder Bolts", "Billings Blaze", "Casper Cavalry"],
    "Tennessee Valley MBL": ["Murfreesboro Meteors", "Huntsville Hawks", "Tuscaloosa Tide", "Auburn Eagles", "Montgomery Monarchs", "Jackson Jaguars"],
    "Gulf Coast MBL": ["Baton Rouge Bulls", "Shreveport Storm", "Lafayette Lightning", "Lake Charles Cavaliers", "Pensacola Panthers", "Fayetteville Fire"],
    "Border Cities MBL": ["McAllen Meteors", "Brownsville Blaze", "Yuma Yaks", "Nuevo Laredo Knights", "Reynosa Raptors", "Mexicali Mavericks"],
}

SEED_DIVISIONS: Dict[int, Dict[str, List[str]]] = {
    1: TIER1_DIVISIONS,
    2: TIER2_DIVISIONS,
    3: TIER3_DIVISIONS,
}

TIER_ID_OFFSET: Dict[int, int] = {1: 0, 2: 1000, 3: 2000}

# (tier, division, name) -> canonical location, for names whose city is ambiguous.
LOCATION_OVERRIDES: Dict[Tuple[int, str, str], str] = {
    (2, "Northeast", "Portland Pirates"): "Portland ME",
    (3, "Bay Area MBL", "Richmond Raptors"): "Richmond CA",
    (3, "Greater Houston MBL", "Pasadena Predators"): "Pasadena TX",
    (3, "Phoenix Metro MBL", "Peoria Predators"): "Peoria AZ",
    (3, "Atlanta Metro MBL", "Columbus Cavalry"): "Columbus GA",
    (3, "Twin Cities MBL", "Rochester Royals"): "Rochester MN",
    (3, "North Carolina Triangle MBL", "Wilmington Waves"): "Wilmington NC",
    (3, "Ohio Valley MBL", "Charleston Chiefs"): "Charleston WV",
    (3, "Gulf Coast MBL", "Fayetteville Fire"): "Fayetteville AR",
}


def location_from_name(name: str) -> Optional[str]:
    """Most specific table key that prefixes the display name."""
    best: Optional[str] = None
    for key in LOCATION_TO_DIVISIONS:
        if str(name).startswith(key + " ") and (best is None or len(key) > len(best)):
            best = key
    return best


def build_tier_teams(tier: int) -> List[Team]:
    t = require_tier(tier)
    next_id = TIER_ID_OFFSET[t]
    teams: List[Team] = []
    for division, names in SEED_DIVISIONS[t].items():
        for name in names:
            location = LOCATION_OVERRIDES.get((t, division, name)) or location_from_name(name) or ""
            teams.append(Team(team_id=str(next_id), name=name, tier=t, location=location, division=division))
            next_id += 1
    return teams


def build_default_league() -> Dict[int, List[Team]]:
    return {t: build_tier_teams(t) for t in SEED_DIVISIONS}

"""Per-category rule tables.

Every vocabulary below is plain data: a list of regex fragments (matched
case-insensitively as substrings unless the fragment anchors itself) or a set
of provider type tokens. Each list is compiled once, at import time, into a
single matcher. Adding a brand or an exclusion is a data change here.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence, Tuple


def compile_phrases(phrases: Sequence[str], *, word_bound: bool = False) -> re.Pattern:
    if not phrases:
        raise ValueError("phrase list must not be empty")
    body = "|".join(f"(?:{p})" for p in phrases)
    if word_bound:
        body = rf"\b(?:{body})\b"
    return re.compile(body, re.IGNORECASE)


# ---------------------------------------------------------------------------
# Shared name heuristics
# ---------------------------------------------------------------------------

NON_ASCII = re.compile(r"[^\x00-\x7F]")

CONVENIENCE_WORDS_PHRASES: List[str] = [
    r"7\s?-?\s?eleven",
    r"mini\s?mart",
    r"mart\b",
    "liquor",
    "pharmacy",
    "drugstore",
    "deli",
    "bodega",
    "tobacco",
    "smoke",
    "vape",
    "grill",
    "kitchen",
    "cafe",
    "coffee",
    "restaurant",
    "pizza",
    "gas",
    "fuel",
    r"quick\s?shop",
    r"quick\s?stop",
]
CONVENIENCE_WORDS = compile_phrases(CONVENIENCE_WORDS_PHRASES)

# Cues for ethnic, international and artisan food shops.
SPECIALTY_CUES_PHRASES: List[str] = [
    "international",
    "world",
    "african",
    "asian",
    "indian",
    r"middle\s*eastern",
    "halal",
    "kosher",
    "latin",
    "balkan",
    "bosn",
    "himalay",
    "european",
    "caribbean",
    "polish",
    "russian",
    "ukrain",
    "mexican",
    "italian",
    "spanish",
    "turkish",
    "greek",
    "japanese",
    "korean",
    "thai",
    "vietnam",
    "filipino",
    "persian",
    "arab",
    "ethiop",
    "somali",
    "jamaic",
    "trinidad",
    "pakist",
    "bangla",
    "nepal",
    r"sri\s*lanka",
    "brazil",
    "argentin",
    "peru",
    "colomb",
    "cuban",
    r"puerto\s*ric",
    "cheese",
    "pasta",
    "fish",
    "meat",
    "butcher",
    "seafood",
    "bakery",
    "deli",
    "gourmet",
    "artisan",
    "organic",
    "natural",
    "farmers",
    "produce",
    "olive oil",
    "spice",
    "tea",
    "wine",
    "liquor",
    "beer",
    "sausage",
    "smokehouse",
    "charcuterie",
    "salumeria",
    "fromager",
    "pescader",
    "carnicer",
    "panader",
    "pasteler",
    "formagger",
    "caseific",
    "boucher",
    "poissonner",
    "alimentari",
    "mercado",
    "mercato",
    "delicatessen",
    "provision",
    "fine food",
    "specialty food",
    "speciality food",
    "specialty market",
    "speciality market",
]
SPECIALTY_CUES = compile_phrases(SPECIALTY_CUES_PHRASES)

MARKET_SHOP_STORE = re.compile(r"market|shop|store", re.IGNORECASE)

# Legal-entity suffixes; such listings are usually offices, not storefronts.
ENTITY_SUFFIX = re.compile(r"\b(?:llc|l\.l\.c\.|inc|incorporated)\b\.?", re.IGNORECASE)

CHAIN_DENY_PHRASES: List[str] = [
    r"market\s*basket",
    "walgreens",
    r"\bcvs\b",
    r"rite\s*aid",
    "dunkin",
    "starbucks",
    r"family\s*dollar",
    r"dollar\s*general",
    r"dollar\s*tree",
    "walmart",
    "target",
    "costco",
    r"bj'?s",
    r"sam\s*’s|sam\s*\bclub\b|sam\s*club",
]
CHAIN_DENY = compile_phrases(CHAIN_DENY_PHRASES)

# ---------------------------------------------------------------------------
# Groceries
# ---------------------------------------------------------------------------

GROCERY_TOKENS: FrozenSet[str] = frozenset({"grocery_store", "supermarket"})
GROCERY_PRIMARY_TYPES: FrozenSet[str] = frozenset({"grocery_store", "supermarket"})

# ---------------------------------------------------------------------------
# Specialty markets
# ---------------------------------------------------------------------------

SPECIALTY_MARKET_TOKENS: FrozenSet[str] = frozenset(
    {"asian_grocery_store", "butcher_shop", "food_store", "market"}
)

SPECIALTY_EXCLUDED_PRIMARY_TYPES: FrozenSet[str] = frozenset(
    {
        # restaurants and food service
        "restaurant",
        "fast_food_restaurant",
        "meal_takeaway",
        "meal_delivery",
        "food_court",
        "diner",
        "sandwich_shop",
        "bar_and_grill",
        "steak_house",
        "pizza_restaurant",
        "hamburger_restaurant",
        "buffet_restaurant",
        "fine_dining_restaurant",
        "brunch_restaurant",
        "breakfast_restaurant",
        "catering_service",
        # cafes and drinks
        "cafe",
        "coffee_shop",
        "cafeteria",
        "tea_house",
        "juice_shop",
        "bar",
        "pub",
        "wine_bar",
        "night_club",
        "brewery",
        # dessert
        "ice_cream_shop",
        "dessert_shop",
        "dessert_restaurant",
        "donut_shop",
        "candy_store",
        "chocolate_shop",
        "confectionery",
        "bagel_shop",
        # convenience and unrelated retail
        "convenience_store",
        "gas_station",
        "pet_store",
        "veterinary_care",
        "aquarium",
        "zoo",
    }
)

SPECIALTY_MARKET_QUERIES: List[str] = [
    "african market",
    "asian market",
    "balkan market",
    "himalayan market",
    "international market",
    "latin market",
    "european market",
    "caribbean market",
    "polish market",
    "russian market",
    "mexican market",
    "italian market",
    "spanish market",
    "turkish market",
    "greek market",
    "japanese market",
    "korean market",
    "thai market",
    "vietnamese market",
    "filipino market",
    "persian market",
    "arab market",
    "ethiopian market",
    "jamaican market",
    "indian market",
    "halal market",
    "kosher market",
    "bosna store",
    "himalayas store",
    "el parcero market",
    "pasta & cheese shop",
    "cheese shop",
    "pasta shop",
    "fish market",
    "meat market",
    "butcher shop",
    "seafood market",
    "bakery",
    "deli",
    "gourmet market",
    "italian deli",
    "french bakery",
    "german market",
    "greek deli",
    "spanish deli",
    "middle eastern market",
    "eastern european market",
    "asian grocery",
    "latin grocery",
    "caribbean grocery",
    "halal grocery",
    "kosher grocery",
    "specialty food",
    "specialty grocery",
    "fine foods",
    "artisan market",
    "organic market",
    "natural foods",
    "farmers market",
    "produce market",
    "olive oil shop",
    "spice shop",
    "tea shop",
    "wine shop",
    "sausage shop",
    "smokehouse",
    "charcuterie",
    "salumeria",
    "fromagerie",
    "pescaderia",
    "carniceria",
    "panaderia",
    "pasteleria",
    "formaggeria",
    "caseificio",
    "boucherie",
    "poissonnerie",
    "alimentari",
    "mercado",
    "mercato",
    "delicatessen",
    "provisions",
    "international foods",
    "european foods",
    "asian foods",
    "latin foods",
    "middle eastern foods",
    "african foods",
    "indian foods",
    "balkan foods",
    "russian foods",
    "polish foods",
    "greek foods",
    "turkish foods",
    "japanese foods",
    "korean foods",
    "vietnamese foods",
    "filipino foods",
    "persian foods",
    "ethiopian foods",
    "jamaican foods",
    "mexican foods",
    "italian foods",
    "german foods",
    "caribbean foods",
]

# ---------------------------------------------------------------------------
# Pharmacy
# ---------------------------------------------------------------------------

PHARMACY_TOKENS: FrozenSet[str] = frozenset({"pharmacy", "drugstore"})
PHARMACY_SEARCH_TYPES: List[str] = ["pharmacy", "drugstore"]

PHARMACY_BRANDS: List[str] = [
    "CVS Pharmacy",
    "Walgreens",
    "Rite Aid",
    "Walmart Pharmacy",
    "Costco Pharmacy",
    "Target Pharmacy",
    "Kroger Pharmacy",
    "Duane Reade",
]

PHARMACY_DENY_PHRASES: List[str] = [
    "restaurant",
    "deli",
    "pizza",
    "grill",
    "kitchen",
    "cafe",
    "coffee",
    "liquor",
    "beer",
    "wine",
    "market basket",
    "walmart(?! pharmacy)",
    "target(?! pharmacy)",
    "costco(?! pharmacy)",
    "bj",
    "sam",
    "grocery",
    "supermarket",
    "bank",
    "atm",
    "auto",
    "repair",
    "dealer",
    "parts",
    "oil",
    "change",
    "station",
    "pet",
    "sport",
    "electronics",
    "office",
    "best buy",
    "staples",
    "dollar",
    "family dollar",
    "dollar general",
    "dollar tree",
    r"7\s?-?\s?eleven",
    "convenience",
]
PHARMACY_DENY = compile_phrases(PHARMACY_DENY_PHRASES)

# ---------------------------------------------------------------------------
# Gas & EV
# ---------------------------------------------------------------------------

GAS_EV_TOKENS: FrozenSet[str] = frozenset(
    {"gas_station", "ev_charging_station", "electric_vehicle_charging_station"}
)
GAS_EV_SEARCH_TYPES: List[str] = ["gas_station", "electric_vehicle_charging_station"]

GAS_BRANDS: List[str] = [
    "Shell",
    "Exxon",
    "Mobil",
    "Chevron",
    "BP",
    "Sunoco",
    "Citgo",
    "Marathon",
    "Speedway",
    "Valero",
    "Circle K",
    "Wawa",
    "Sheetz",
    "Tesla Supercharger",
    "ChargePoint",
    "Electrify America",
    "EVgo",
]

GAS_DENY_PHRASES: List[str] = [
    "restaurant",
    "deli",
    "pizza",
    "grill",
    "kitchen",
    "cafe",
    "coffee",
    "liquor",
    "beer",
    "wine",
    "market basket",
    "bank",
    "atm",
    "auto repair",
    "dealer",
    "parts",
    "oil change",
    "stationery",
    "pet",
    "sport",
    "electronics",
    "office",
    "best buy",
    "staples",
    "dollar",
    "family dollar",
    "dollar general",
    "dollar tree",
    "pharmacy",
    "drugstore",
    "grocery",
    "supermarket",
]
GAS_DENY = compile_phrases(GAS_DENY_PHRASES)

# ---------------------------------------------------------------------------
# Bank & ATM
# ---------------------------------------------------------------------------

BANK_ATM_TOKENS: FrozenSet[str] = frozenset({"bank", "atm"})
BANK_ATM_SEARCH_TYPES: List[str] = ["bank", "atm"]

BANK_BRANDS: List[str] = [
    "Chase Bank",
    "Bank of America",
    "Wells Fargo",
    "Citibank",
    "TD Bank",
    "PNC Bank",
    "U.S. Bank",
    "Capital One",
    "Santander Bank",
    "Citizens Bank",
]

BANK_DENY_PHRASES: List[str] = [
    "restaurant",
    "deli",
    "pizza",
    "grill",
    "kitchen",
    "cafe",
    "coffee",
    "liquor",
    "beer",
    "wine",
    "market basket",
    "grocery",
    "supermarket",
    "pharmacy",
    "drugstore",
    "convenience",
    "auto",
    "repair",
    "dealer",
    "parts",
    "oil",
    "change",
    "stationery",
    "pet",
    "sport",
    "electronics",
    "office",
    "best buy",
    "staples",
    "dollar",
    "family dollar",
    "dollar general",
    "dollar tree",
    "gas",
    "ev charging",
    "shell",
    "exxon",
    "chevron",
    "bp",
    "sunoco",
    "marathon",
    "phillips 66",
    "valero",
    "circle k",
    "costco",
    "sam",
    "speedway",
    "quiktrip",
    "wawa",
    "racetrac",
    "loves",
    "pilot",
    "flying j",
    "gulf",
    "arco",
    "76",
    "conoco",
    "sinclair",
    "hess",
    "irving",
    "casey",
    "holiday",
    "sheetz",
    "getgo",
    "kwik trip",
    "kwik fill",
    "maverik",
    "tesla",
    "chargepoint",
    "electrify america",
    "evgo",
    "blink",
    "volta",
    "greenlots",
    "semaconnect",
    "ev connect",
    "evbox",
]
BANK_DENY = compile_phrases(BANK_DENY_PHRASES)

# ---------------------------------------------------------------------------
# Clothing
# ---------------------------------------------------------------------------

CLOTHING_TOKEN = "clothing_store"
CLOTHING_SEARCH_TYPES: List[str] = ["clothing_store"]

CLOTHING_EXCLUDED_PRIMARY_TYPES: FrozenSet[str] = frozenset(
    {"tailor", "clothing_alteration_service", "dry_cleaner", "laundry"}
)

CLOTHING_CHAIN_DENY_PHRASES: List[str] = [
    "walgreens",
    "cvs",
    r"rite\s*aid",
    r"dollar\s*tree",
    r"dollar\s*general",
    r"family\s*dollar",
    "walmart",
    "target",
    "costco",
    r"bj'?s",
    r"sam\s*’s|sam\s*\bclub\b|sam\s*club",
    "pharmacy",
    "drugstore",
    "auto",
    "parts",
    "oil",
    "change",
    "repair",
    "dealer",
    "staples",
    "office",
    "electronics",
    r"best\s*buy",
    "pet",
    "sport",
    "grocery",
    "market",
    "supermarket",
    "liquor",
    "beer",
    "wine",
    "gas",
    "station",
    "convenience",
    r"7\s?-?\s?eleven",
]
CLOTHING_CHAIN_DENY = compile_phrases(CLOTHING_CHAIN_DENY_PHRASES)

# Apparel chains whose listings may legitimately carry an LLC/Inc suffix.
KNOWN_APPAREL_CHAINS_PHRASES: List[str] = [
    "gap",
    r"old\s*navy",
    r"banana\s*republic",
    r"h\s*&\s*m",
    "zara",
    "uniqlo",
    r"forever\s*21",
    r"american\s*eagle",
    "abercrombie",
    "hollister",
    r"j\.?\s*crew",
    "madewell",
    "express",
    r"ann\s*taylor",
    "loft",
    "talbots",
    r"chico'?s",
    r"urban\s*outfitters",
    "anthropologie",
    r"free\s*people",
    "lululemon",
    "athleta",
    "nike",
    "adidas",
    r"levi'?s",
    "guess",
    r"tommy\s*hilfiger",
    r"ralph\s*lauren",
    r"calvin\s*klein",
    r"brooks\s*brothers",
    r"j\.?\s*jill",
    "torrid",
    r"lane\s*bryant",
    "aeropostale",
    "pacsun",
    "buckle",
    "zumiez",
    r"men'?s\s*wearhouse",
]
KNOWN_APPAREL_CHAINS = compile_phrases(KNOWN_APPAREL_CHAINS_PHRASES, word_bound=True)

# ---------------------------------------------------------------------------
# Jewelry
# ---------------------------------------------------------------------------

JEWELRY_TOKENS: FrozenSet[str] = frozenset({"jewelry_store", "jewelry_and_accessories"})
JEWELRY_SEARCH_TYPES: List[str] = ["jewelry_store"]

JEWELRY_EXCLUDED_PRIMARY_TYPES: FrozenSet[str] = frozenset(
    {
        "department_store",
        "discount_store",
        "beauty_salon",
        "beauty_supply_store",
        "grocery_store",
        "supermarket",
        "home_goods_store",
        "clothing_store",
        "pawn_shop",
        "thrift_store",
        "warehouse_store",
        "shopping_mall",
    }
)

JEWELRY_CHAIN_DENY_PHRASES: List[str] = [
    "pawn",
    "department",
    "pharmacy",
    "drugstore",
    "dollar",
    "walmart",
    "target",
    "costco",
    "bj",
    "sam",
    "auto",
    "parts",
    "oil",
    "change",
    "repair",
    "dealer",
    "staples",
    "office",
    "electronics",
    "pet",
    "sport",
    "grocery",
    "market",
    "supermarket",
    "liquor",
    "beer",
    "wine",
    "gas",
    "station",
    "convenience",
    r"7\s?-?\s?eleven",
]
JEWELRY_CHAIN_DENY = compile_phrases(JEWELRY_CHAIN_DENY_PHRASES)

OFF_PRICE_DENY_PHRASES: List[str] = [
    r"t\.?\s*j\.?\s*maxx",
    "marshalls",
    r"ross\s*dress\s*for\s*less",
    r"\bross\b",
    r"burlington",
    r"home\s*goods",
    r"nordstrom\s*rack",
    r"saks\s*off\s*5th",
    r"off\s*5th",
    "consignment",
]
OFF_PRICE_DENY = compile_phrases(OFF_PRICE_DENY_PHRASES)

# ---------------------------------------------------------------------------
# Print & ship
# ---------------------------------------------------------------------------

PRINT_SHIP_TOKEN = "post_office"
PRINT_SHIP_SEARCH_TYPES: List[str] = ["post_office"]

PACK_SHIP_BRANDS: List[str] = [
    "The UPS Store",
    "FedEx Office",
    "Staples",
    "Office Depot",
    "OfficeMax",
]

# Unstaffed drop points rather than counters.
PRINT_SHIP_DENY_PHRASES: List[str] = [
    r"drop\s*-?\s*box",
    r"drop\s*-?\s*off",
    r"access\s*point",
    "locker",
    "kiosk",
    r"self\s*-?\s*service",
    r"collection\s*box",
    r"authorized\s*ship(?:ping)?\s*outlet",
]
PRINT_SHIP_DENY = compile_phrases(PRINT_SHIP_DENY_PHRASES)

# ---------------------------------------------------------------------------
# Bars
# ---------------------------------------------------------------------------

BAR_FAMILY_TYPES: FrozenSet[str] = frozenset(
    {"bar", "pub", "wine_bar", "cocktail_bar", "sports_bar", "lounge_bar", "brewpub", "irish_pub"}
)
BAR_SEARCH_TYPES: List[str] = ["bar", "pub", "wine_bar", "cocktail_bar", "sports_bar"]
BAR_TOKENS: FrozenSet[str] = frozenset(BAR_SEARCH_TYPES)
BAR_TEXT_QUERY = "bars"

VENUE_TYPES: FrozenSet[str] = frozenset(
    {
        "stadium",
        "arena",
        "event_venue",
        "convention_center",
        "sports_complex",
        "amphitheatre",
        "concert_hall",
        "banquet_hall",
        "wedding_venue",
    }
)

# ---------------------------------------------------------------------------
# Liquor
# ---------------------------------------------------------------------------

LIQUOR_TOKEN = "liquor_store"
LIQUOR_SEARCH_TYPES: List[str] = ["liquor_store"]

LIQUOR_BRANDS: List[str] = [
    "Total Wine & More",
    "BevMo",
    "Spec's Wine Spirits & Finer Foods",
    "Binny's Beverage Depot",
    "ABC Fine Wine & Spirits",
    "Liquor Barn",
    "Twin Liquors",
    "Wine & Spirits",
]

LIQUOR_NAME_KEYWORDS = compile_phrases(
    ["liquor", "wine", "spirits", "beverage", r"package\s*store", "bottle"]
)

LIQUOR_PROFESSIONAL_TYPES: FrozenSet[str] = frozenset(
    {
        "consultant",
        "lawyer",
        "accounting",
        "insurance_agency",
        "real_estate_agency",
        "finance",
        "corporate_office",
        "government_office",
        "local_government_office",
        "employment_agency",
    }
)

LIQUOR_CONSULTANCY_DENY = compile_phrases(
    [
        r"consult(?:ant|ants|ing)?",
        r"advis(?:or|ors|ory)",
        r"licen[cs](?:e|es|ing)",
        "permit",
        "attorney",
        r"law\s*(?:office|firm|group)",
        r"compliance",
    ]
)

CONVENIENCE_STORE_NAMES = compile_phrases(
    [
        r"7\s?-?\s?eleven",
        r"circle\s*k",
        "wawa",
        "sheetz",
        "speedway",
        r"cumberland\s*farms",
        r"casey'?s",
        r"quick\s*(?:mart|stop|shop)",
        r"mini\s*-?\s*mart",
        r"food\s*mart",
        r"kwik",
        "convenience",
        "bodega",
        r"stop\s*(?:&|and|n)\s*go",
    ]
)
CONVENIENCE_PRIMARY_TYPES: FrozenSet[str] = frozenset({"convenience_store", "gas_station"})

# Jurisdictions where convenience stores cannot sell spirits.
RESTRICTED_LIQUOR_STATES: FrozenSet[str] = frozenset(
    {
        "AL", "AK", "CT", "DE", "DC", "ID", "KS", "KY", "MD", "MA",
        "MN", "MS", "MT", "NH", "NJ", "NY", "NC", "OK", "OR", "PA",
        "RI", "SC", "TN", "UT", "VT", "VA", "WV", "WY",
    }
)

STATE_ZIP = re.compile(r",\s*([A-Z]{2})\s+\d{5}(?:-\d{4})?\b")


def parse_state_code(address: Optional[str]) -> Optional[str]:
    """Two-letter state from the ``, XX 12345`` tail of a formatted address."""
    if not address:
        return None
    matches = STATE_ZIP.findall(address)
    if not matches:
        return None
    return matches[-1]


# ---------------------------------------------------------------------------
# Warehouse clubs
# ---------------------------------------------------------------------------

WAREHOUSE_TOKENS: FrozenSet[str] = frozenset({"warehouse_store", "wholesale_store"})


@dataclass(frozen=True)
class ClubBrand:
    query: str
    name_pattern: re.Pattern


WAREHOUSE_CLUBS: Tuple[ClubBrand, ...] = (
    ClubBrand("Costco Wholesale", re.compile(r"\bcostco\b", re.IGNORECASE)),
    ClubBrand("Sam's Club", re.compile(r"\bsam'?s\s*club\b", re.IGNORECASE)),
    ClubBrand(
        "BJ's Wholesale Club",
        re.compile(r"\bbj'?s\s*(wholesale)?\s*(club)?\b", re.IGNORECASE),
    ),
)

# In-store departments and fuel centers listed as separate places.
EXCLUDED_DEPARTMENTS = re.compile(
    r"\b(gas|fuel|gasoline|filling\s*station|floral|florist|bakery|tire|battery|optical|pharmacy|photo|hearing)\b",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Attractions
# ---------------------------------------------------------------------------

ATTRACTION_TOKENS: FrozenSet[str] = frozenset(
    {"tourist_attraction", "museum", "historical_place", "historical_landmark"}
)
ATTRACTION_SEARCH_TYPES: List[str] = ["tourist_attraction", "museum", "historical_place"]

ATTRACTION_ALLOWED_TYPES: FrozenSet[str] = frozenset(
    {
        "tourist_attraction",
        "museum",
        "historical_place",
        "historical_landmark",
        "monument",
        "aquarium",
        "zoo",
    }
)

ATTRACTION_DENY_TYPES: FrozenSet[str] = frozenset(
    {
        "park",
        "playground",
        "dog_park",
        "athletic_field",
        "sports_complex",
        "sports_club",
        "stadium",
        "golf_course",
        "amusement_center",
        "amusement_park",
        "escape_room_center",
        "bowling_alley",
        "video_arcade",
        "water_park",
        "swimming_pool",
    }
)

ATTRACTION_NAME_DENY = compile_phrases(
    [
        "softball",
        "baseball",
        r"little\s*league",
        r"ball\s*field",
        r"ball\s*park",
        r"soccer\s*field",
        r"athletic\s*field",
        r"football\s*field",
        r"tennis\s*court",
        r"basketball\s*court",
        "playground",
    ]
)

ATTRACTION_QUERIES: List[str] = [
    "museum",
    "tourist attraction",
    "historical landmark",
    "historic site",
    "monument",
    "aquarium",
    "zoo",
]

ATTRACTION_RANK = {"tourist_attraction": 0, "museum": 1}

# ---------------------------------------------------------------------------
# Arts & culture
# ---------------------------------------------------------------------------

ARTS_TOKENS: FrozenSet[str] = frozenset(
    {"art_gallery", "performing_arts_theater", "concert_hall", "cultural_center"}
)
ARTS_SEARCH_TYPES: List[str] = [
    "art_gallery",
    "performing_arts_theater",
    "concert_hall",
    "cultural_center",
]

ARTS_GALLERY_TYPES: FrozenSet[str] = frozenset({"art_gallery", "museum"})
ARTS_THEATER_TYPES: FrozenSet[str] = frozenset(
    {"performing_arts_theater", "theater", "opera_house", "amphitheatre", "dinner_theater"}
)
ARTS_ALLOWED_TYPES: FrozenSet[str] = (
    ARTS_GALLERY_TYPES
    | ARTS_THEATER_TYPES
    | frozenset({"concert_hall", "philharmonic_hall", "cultural_center", "community_center"})
)

ARTS_CULTURE_QUERIES: List[str] = [
    "art gallery",
    "theater",
    "performing arts",
    "concert hall",
    "cultural center",
]

# ---------------------------------------------------------------------------
# Sports
# ---------------------------------------------------------------------------

SPORTS_TOKENS: FrozenSet[str] = frozenset({"sports_complex", "stadium", "golf_course"})
SPORTS_SEARCH_TYPES: List[str] = [
    "gym",
    "fitness_center",
    "golf_course",
    "stadium",
    "sports_complex",
]

SPORTS_QUERIES: List[str] = [
    "gym",
    "fitness center",
    "sports complex",
    "golf course",
    "ice skating rink",
    "swimming pool",
]

SPORTS_ALLOWED_TYPES: FrozenSet[str] = frozenset(
    {
        "gym",
        "fitness_center",
        "sports_complex",
        "sports_club",
        "sports_activity_location",
        "stadium",
        "arena",
        "golf_course",
        "athletic_field",
        "swimming_pool",
        "ice_skating_rink",
        "tennis_court",
        "ski_resort",
        "yoga_studio",
    }
)

SPORTS_DENY_TYPES: FrozenSet[str] = frozenset(
    {"restaurant", "bar", "pub", "sports_bar", "bar_and_grill", "night_club", "meal_takeaway"}
)

SPORTS_NAME_DENY = compile_phrases(
    [
        r"dave\s*(?:&|and|n)\s*buster'?s",
        r"main\s*event",
        r"round\s*(?:1|one)\b",
        r"top\s*golf",
        r"chuck\s*e\.?\s*cheese",
        r"punch\s*bowl\s*social",
        "pinstripes",
        r"lucky\s*strike",
        r"sports?\s*(?:bar|grill|pub)",
    ]
)

# ---------------------------------------------------------------------------
# Discount & thrift
# ---------------------------------------------------------------------------

DISCOUNT_THRIFT_TOKENS: FrozenSet[str] = frozenset({"discount_store", "thrift_store"})
DISCOUNT_SEARCH_TYPES: List[str] = ["discount_store"]

DISCOUNT_THRIFT_QUERIES: List[str] = [
    "Dollar General",
    "Dollar Tree",
    "Family Dollar",
    "Five Below",
    "Goodwill",
    "Savers",
    "Salvation Army thrift",
    "Value Village",
    "thrift store",
    "consignment shop",
]


def is_restaurant_type(type_token: str) -> bool:
    return type_token == "restaurant" or type_token.endswith("_restaurant")

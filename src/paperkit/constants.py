"""
Unit and scale lookup tables.

All lengths are expressed in the canonical internal unit, the meter.
"""

# =============================================================================
# BASE LENGTHS (in meters)
# =============================================================================

METER = 1.0

INCH = 0.0254
FOOT = 12 * INCH
YARD = 3 * FOOT
POINT = INCH / 72
PICA = INCH / 6
BARLEYCORN = INCH / 3
CHAIN = 22 * YARD
FURLONG = 10 * CHAIN
ROD = 0.25 * CHAIN
LINK = 0.01 * CHAIN
CUBIT = 18 * INCH
FATHOM = 6 * FOOT
MILE = 5280 * FOOT
LEAGUE = 3 * MILE

ANGSTROM = 1e-10
ASTRONOMICAL_UNIT = 149_597_870_700.0
LIGHT_YEAR = 9_460_730_472_580_800.0
PARSEC = 3.085_677_581_491_367e16


# =============================================================================
# IRREGULAR UNIT NAMES
# =============================================================================

# Checked before the metric prefix rules. Keys are lower case.
IRREGULAR_UNITS = {
    "pt": POINT,
    "point": POINT,
    "points": POINT,
    "pica": PICA,
    "picas": PICA,
    '"': INCH,
    "in": INCH,
    "inch": INCH,
    "inches": INCH,
    "'": FOOT,
    "ft": FOOT,
    "foot": FOOT,
    "feet": FOOT,
    "yd": YARD,
    "yard": YARD,
    "yards": YARD,
    "mi": MILE,
    "mile": MILE,
    "miles": MILE,
    "barleycorn": BARLEYCORN,
    "barleycorns": BARLEYCORN,
    "chain": CHAIN,
    "chains": CHAIN,
    "furlong": FURLONG,
    "furlongs": FURLONG,
    "rod": ROD,
    "rods": ROD,
    "link": LINK,
    "links": LINK,
    "cubit": CUBIT,
    "cubits": CUBIT,
    "fathom": FATHOM,
    "fathoms": FATHOM,
    "league": LEAGUE,
    "leagues": LEAGUE,
    "å": ANGSTROM,
    "angstrom": ANGSTROM,
    "angstroms": ANGSTROM,
    "au": ASTRONOMICAL_UNIT,
    "ly": LIGHT_YEAR,
    "lightyear": LIGHT_YEAR,
    "lightyears": LIGHT_YEAR,
    "pc": PARSEC,
    "parsec": PARSEC,
    "parsecs": PARSEC,
}


# =============================================================================
# SI PREFIXES
# =============================================================================

# Short symbols are case sensitive ("Mm" is a megameter, "mm" a millimeter).
SI_PREFIX_SYMBOLS = {
    "": 0,
    "Q": 30,
    "R": 27,
    "Y": 24,
    "Z": 21,
    "E": 18,
    "P": 15,
    "T": 12,
    "G": 9,
    "M": 6,
    "k": 3,
    "h": 2,
    "da": 1,
    "d": -1,
    "c": -2,
    "m": -3,
    "µ": -6,
    "u": -6,
    "n": -9,
    "p": -12,
    "f": -15,
    "a": -18,
    "z": -21,
    "y": -24,
    "r": -27,
    "q": -30,
}

# Long names are matched case-insensitively.
SI_PREFIX_NAMES = {
    "": 0,
    "quetta": 30,
    "ronna": 27,
    "yotta": 24,
    "zetta": 21,
    "exa": 18,
    "peta": 15,
    "tera": 12,
    "giga": 9,
    "mega": 6,
    "kilo": 3,
    "hecto": 2,
    "deka": 1,
    "deca": 1,
    "deci": -1,
    "centi": -2,
    "milli": -3,
    "micro": -6,
    "nano": -9,
    "pico": -12,
    "femto": -15,
    "atto": -18,
    "zepto": -21,
    "yocto": -24,
    "ronto": -27,
    "quecto": -30,
}


# =============================================================================
# MODEL SCALES
# =============================================================================

# In a model railroad context these are scales, not track gauges, so there
# are no entries like On3. Where one designation covers several ratios the
# most common (US-leaning) one is used. Anything else can be given as "1:N".
MODEL_SCALES = {
    "1:1": (1.0, "full size"),
    "F": (20.3, "F scale"),
    "G": (22.5, "German LGB scale"),
    "#3": (22.5, "#3 Gauge"),
    "#2": (29.0, "#2 Gauge"),
    "#1": (32.0, "#1 Gauge"),
    "O": (48.0, "O scale"),
    "S": (64.0, "S scale"),
    "OO": (76.2, "OO scale"),
    "HO": (87.1, "HO scale"),
    "TT": (120.0, "TT scale"),
    "N": (160.0, "N scale"),
    "Z": (220.0, "Z scale"),
    "T": (450.0, "T scale"),
}

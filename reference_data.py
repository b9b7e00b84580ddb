"""
reference_data.py — static lookup tables consumed by the resolvers.

Everything in here is plain data. The resolvers receive these tables as
arguments (bundled in ReferenceData) so tests can swap in small tables of
their own.

Table order matters:
  • TYPE_RULES     — specific garments before generic catch-alls; equal
                     priorities are won by the earlier rule
  • PATTERN_RULES  — first pattern with any keyword hit wins
  • COLOR_KEYWORDS — order in which label colours are added
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class TypeRule:
    keywords: tuple[str, ...]
    type: str
    priority: int


@dataclass(frozen=True)
class PatternRule:
    pattern: str
    keywords: tuple[str, ...]


@dataclass(frozen=True)
class ColorKeyword:
    keyword: str
    color: str


# ── Clothing types ────────────────────────────────────────────────────────────

TYPE_RULES: tuple[TypeRule, ...] = (
    # Specific tops & layers (10–8)
    TypeRule(("hoodie", "hooded sweatshirt", "hooded sweater"),            "Hoodie",   10),
    TypeRule(("sweater", "pullover", "jumper", "cardigan"),                "Sweater",   9),
    TypeRule(("polo shirt", "polo"),                                       "Polo",      9),
    TypeRule(("t-shirt", "tshirt", "t shirt", "tee", "tank top"),          "T-shirt",   8),
    TypeRule(("sweatshirt", "crewneck"),                                   "Sweatshirt", 8),
    TypeRule(("sneaker", "sneakers", "athletic shoe", "running shoe",
              "walking shoe", "plimsoll"),                                 "Sneakers",  8),
    # Outerwear (7)
    TypeRule(("jacket", "blazer", "sport coat", "windbreaker", "parka",
              "bomber"),                                                   "Jacket",    7),
    TypeRule(("coat", "overcoat", "trench coat"),                          "Coat",      7),
    TypeRule(("vest", "gilet", "waistcoat"),                               "Vest",      7),
    # Footwear & bottoms (7)
    TypeRule(("boot", "boots", "hiking boot", "work boot"),                "Boots",     7),
    TypeRule(("sandal", "sandals", "flip-flop", "slipper"),                "Sandals",   7),
    TypeRule(("jeans", "denim"),                                           "Jeans",     7),
    TypeRule(("legging", "leggings", "tights"),                            "Leggings",  7),
    # Generic garments (6)
    TypeRule(("shirt", "dress shirt", "button-down", "blouse"),            "Shirt",     6),
    TypeRule(("shoe", "shoes", "footwear", "loafer", "heel"),              "Shoes",     6),
    TypeRule(("pants", "trousers", "slacks", "chino", "jogger"),           "Pants",     6),
    TypeRule(("shorts", "short pants"),                                    "Shorts",    6),
    TypeRule(("skirt", "skirts"),                                          "Skirt",     6),
    TypeRule(("dress", "dresses", "gown"),                                 "Dress",     6),
    TypeRule(("hat", "cap", "baseball cap", "beanie", "beanie hat",
              "winter hat", "fedora", "bucket hat"),                       "Hat",       6),
    TypeRule(("underwear", "undergarment", "underclothes", "underpants",
              "boxers", "briefs", "panties"),                              "Underwear", 6),
    TypeRule(("sock", "socks", "hosiery"),                                 "Socks",     6),
    # Accessories (5)
    TypeRule(("scarf", "scarves", "shawl"),                                "Scarf",     5),
    TypeRule(("belt",),                                                    "Belt",      5),
    TypeRule(("bag", "handbag", "backpack", "purse", "tote"),              "Bag",       5),
    TypeRule(("glove", "gloves", "mitten"),                                "Gloves",    5),
    TypeRule(("accessory", "accessories"),                                 "Accessories", 5),
)

DEFAULT_CATEGORY = "Other"

CATEGORY_BY_TYPE: Mapping[str, str] = MappingProxyType({
    "Hoodie":      "Tops",
    "Sweater":     "Tops",
    "Polo":        "Tops",
    "T-shirt":     "Tops",
    "Sweatshirt":  "Tops",
    "Shirt":       "Tops",
    "Jacket":      "Outerwear",
    "Coat":        "Outerwear",
    "Vest":        "Outerwear",
    "Jeans":       "Bottoms",
    "Pants":       "Bottoms",
    "Shorts":      "Bottoms",
    "Skirt":       "Bottoms",
    "Leggings":    "Bottoms",
    "Dress":       "Dresses",
    "Sneakers":    "Footwear",
    "Boots":       "Footwear",
    "Sandals":     "Footwear",
    "Shoes":       "Footwear",
    "Hat":         "Headwear",
    "Underwear":   "Underwear",
    "Socks":       "Underwear",
    "Scarf":       "Accessories",
    "Belt":        "Accessories",
    "Bag":         "Accessories",
    "Gloves":      "Accessories",
    "Accessories": "Accessories",
})


# ── Patterns ──────────────────────────────────────────────────────────────────

DEFAULT_PATTERN = "Solid"

PATTERN_RULES: tuple[PatternRule, ...] = (
    PatternRule("Stripes",    ("stripe", "striped", "pinstripe", "stripes")),
    PatternRule("Checks",     ("check", "checked", "checkered", "gingham", "houndstooth")),
    PatternRule("Plaid",      ("plaid", "tartan")),
    PatternRule("Polka Dots", ("polka dot", "polka", "dotted", "spotted")),
    PatternRule("Floral",     ("floral", "flower", "botanical")),
    PatternRule("Geometric",  ("geometric", "chevron", "argyle", "zigzag", "triangle")),
    PatternRule("Corduroy",   ("corduroy",)),
    PatternRule("Abstract",   ("abstract", "tie-dye", "tie dye", "psychedelic")),
    PatternRule("Other",      ("camouflage", "camo", "leopard", "animal print",
                               "paisley", "zebra")),
)


# ── Colours ───────────────────────────────────────────────────────────────────

COLOR_KEYWORDS: tuple[ColorKeyword, ...] = (
    ColorKeyword("black",    "Black"),
    ColorKeyword("white",    "White"),
    ColorKeyword("ivory",    "White"),
    ColorKeyword("gray",     "Gray"),
    ColorKeyword("grey",     "Gray"),
    ColorKeyword("charcoal", "Gray"),
    ColorKeyword("navy",     "Navy"),
    ColorKeyword("blue",     "Blue"),
    ColorKeyword("red",      "Red"),
    ColorKeyword("maroon",   "Red"),
    ColorKeyword("burgundy", "Red"),
    ColorKeyword("green",    "Green"),
    ColorKeyword("olive",    "Green"),
    ColorKeyword("yellow",   "Yellow"),
    ColorKeyword("orange",   "Orange"),
    ColorKeyword("pink",     "Pink"),
    ColorKeyword("purple",   "Purple"),
    ColorKeyword("violet",   "Purple"),
    ColorKeyword("brown",    "Brown"),
    ColorKeyword("beige",    "Beige"),
    ColorKeyword("khaki",    "Beige"),
    ColorKeyword("cream",    "Beige"),
)


# ── Brands ────────────────────────────────────────────────────────────────────

BRAND_LIST: tuple[str, ...] = (
    # Sportswear
    "Nike", "Adidas", "Puma", "Reebok", "New Balance", "Under Armour", "Asics",
    "Converse", "Vans", "Fila", "Champion", "Umbro", "Kappa", "Le Coq Sportif",
    "Saucony", "Brooks", "Hoka", "On Running", "Salomon", "Lululemon", "Gymshark",
    # Outdoor
    "The North Face", "Patagonia", "Columbia", "Arc'teryx", "Jack Wolfskin",
    "Mammut", "Helly Hansen", "Timberland", "Merrell", "Canada Goose", "Moncler",
    # High street
    "Zara", "H&M", "Uniqlo", "Gap", "Mango", "Bershka", "Pull&Bear",
    "Stradivarius", "Massimo Dutti", "Primark", "Topshop", "Esprit",
    "Old Navy", "Banana Republic", "American Eagle", "Abercrombie & Fitch",
    "Hollister", "Forever 21", "Urban Outfitters", "Marks & Spencer", "COS",
    "Weekday", "Monki", "New Look", "River Island", "ASOS",
    # Denim
    "Levi's", "Wrangler", "Lee", "Diesel", "G-Star Raw", "Pepe Jeans",
    "Calvin Klein", "Replay", "Guess",
    # Premium & designer
    "Tommy Hilfiger", "Ralph Lauren", "Lacoste", "Hugo Boss", "Armani",
    "Emporio Armani", "Gucci", "Prada", "Louis Vuitton", "Chanel", "Dior",
    "Versace", "Burberry", "Balenciaga", "Givenchy", "Valentino", "Fendi",
    "Hermes", "Saint Laurent", "Alexander McQueen", "Stone Island", "Off-White",
    "Supreme", "Stussy", "Carhartt", "Dickies", "Fred Perry", "Ben Sherman",
    "Barbour", "Superdry", "Jack & Jones", "Vero Moda",
    "Scotch & Soda", "Ted Baker", "Paul Smith", "Michael Kors", "Kenzo",
    # Footwear
    "Dr. Martens", "Birkenstock", "Crocs", "Clarks", "Ecco", "Skechers",
    "UGG", "Steve Madden", "Nine West",
)


# ── Stop words for the brand-name extraction heuristic ───────────────────────
# Lowercase. Anything here can never be proposed as a potential brand string.

_FUNCTION_WORDS = {
    "the", "and", "for", "with", "from", "this", "that", "not", "are", "was",
    "you", "your", "our", "all", "any", "but", "can", "has", "have", "its",
    "into", "only", "per", "off", "out", "use", "one", "two", "new", "more",
    "less", "most", "very", "also", "each", "other", "made", "make", "by",
    "of", "in", "on", "at", "to", "or", "an", "a", "is", "it", "as", "be",
    "do", "if", "no", "so", "up", "we", "www", "com", "http", "https",
    "inc", "ltd", "llc", "gmbh", "co", "company", "brand", "original",
    "authentic", "quality", "style", "design", "designed", "collection",
    "since", "official", "product", "item", "model", "art", "ref", "code",
}

_GARMENT_WORDS = {
    "shirt", "shirts", "t-shirt", "tshirt", "tee", "top", "tops", "pants",
    "trousers", "jeans", "denim", "shorts", "skirt", "dress", "jacket", "coat",
    "hoodie", "sweater", "sweatshirt", "cardigan", "vest", "shoe", "shoes",
    "sneaker", "sneakers", "boot", "boots", "sandal", "sandals", "sock",
    "socks", "hat", "cap", "scarf", "belt", "bag", "glove", "gloves", "wear",
    "clothing", "apparel", "garment", "fashion", "sport", "sports", "active",
    "outdoor", "kids", "men", "mens", "women", "womens", "ladies", "unisex",
    "boys", "girls", "baby", "junior", "slim", "fit", "regular", "relaxed",
    "classic", "collar", "sleeve", "pocket", "zip", "zipper", "button",
}

_MATERIAL_WORDS = {
    "cotton", "polyester", "nylon", "wool", "silk", "linen", "leather",
    "elastane", "spandex", "lycra", "viscose", "rayon", "acrylic", "cashmere",
    "fleece", "organic", "recycled", "fabric", "fibre", "fiber", "lining",
    "shell", "body", "trim", "filling", "down", "feather", "synthetic",
    "polyamide", "modal", "lyocell", "tencel", "suede", "canvas", "rubber", "pima",
    "mesh", "material", "materials", "composition",
}

_CARE_WORDS = {
    "wash", "washing", "machine", "hand", "cold", "warm", "hot", "water",
    "iron", "tumble", "dry", "dryer", "bleach", "clean", "cleaning", "gentle",
    "cycle", "inside", "similar", "colours", "colors", "colour", "color",
    "separately", "temperature", "low", "medium", "high", "max", "care",
    "instructions", "professional", "line", "flat", "shade", "remove",
    "promptly", "reshape", "damp", "steam", "soak", "wring", "only",
}

_COUNTRY_WORDS = {
    "china", "india", "bangladesh", "vietnam", "cambodia", "indonesia",
    "turkey", "portugal", "italy", "spain", "france", "germany", "usa",
    "america", "mexico", "morocco", "tunisia", "pakistan", "sri", "lanka",
    "thailand", "malaysia", "philippines", "myanmar", "egypt", "romania",
    "bulgaria", "poland", "honduras", "guatemala", "japan", "korea", "taiwan",
    "uk", "england", "canada", "country", "origin", "imported", "prc",
}

_SIZE_WORDS = {
    "xxs", "xs", "s", "m", "l", "xl", "xxl", "xxxl", "2xl", "3xl", "4xl",
    "size", "sizes", "small", "large", "extra", "petite", "tall", "eur",
    "eu", "us", "gb", "fr", "it", "cm", "mm", "inch", "waist", "length",
    "chest", "height", "age", "years", "yrs", "months", "rn", "ca",
}

STOP_WORDS: frozenset[str] = frozenset(
    _FUNCTION_WORDS | _GARMENT_WORDS | _MATERIAL_WORDS
    | _CARE_WORDS | _COUNTRY_WORDS | _SIZE_WORDS
)


# ── Bundle ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ReferenceData:
    """All static tables the engine reads, replaceable as one unit."""
    brand_list: tuple[str, ...] = BRAND_LIST
    type_rules: tuple[TypeRule, ...] = TYPE_RULES
    category_by_type: Mapping[str, str] = field(default_factory=lambda: CATEGORY_BY_TYPE)
    pattern_rules: tuple[PatternRule, ...] = PATTERN_RULES
    color_keywords: tuple[ColorKeyword, ...] = COLOR_KEYWORDS
    stop_words: frozenset[str] = STOP_WORDS

    def __post_init__(self) -> None:
        # Callers may pass a plain dict; keep a read-only copy of it
        if not isinstance(self.category_by_type, MappingProxyType):
            object.__setattr__(
                self, "category_by_type", MappingProxyType(dict(self.category_by_type)),
            )


DEFAULT_REFERENCE = ReferenceData()

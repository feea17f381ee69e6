"""Static nutrient reference tables.

Daily values follow the FDA Nutrition Facts / Supplement Facts label values
for adults. All tables are read-only and shared across requests.
"""

from types import MappingProxyType

from supplement_tracker.domain.insights import InteractionKind, InteractionRule
from supplement_tracker.domain.nutrients import RdiEntry

NUTRIENT_RDI = MappingProxyType(
    {
        # Vitamins
        "Vitamin A": RdiEntry(900, "mcg", upper_limit=3000),
        "Vitamin C": RdiEntry(90, "mg", upper_limit=2000),
        "Vitamin D": RdiEntry(20, "mcg", upper_limit=100),
        "Vitamin E": RdiEntry(15, "mg", upper_limit=1000),
        "Vitamin K": RdiEntry(120, "mcg"),
        "Vitamin B1": RdiEntry(1.2, "mg"),
        "Thiamin": RdiEntry(1.2, "mg"),
        "Vitamin B2": RdiEntry(1.3, "mg"),
        "Riboflavin": RdiEntry(1.3, "mg"),
        "Vitamin B3": RdiEntry(16, "mg", upper_limit=35),
        "Niacin": RdiEntry(16, "mg", upper_limit=35),
        "Vitamin B5": RdiEntry(5, "mg"),
        "Pantothenic Acid": RdiEntry(5, "mg"),
        "Vitamin B6": RdiEntry(1.7, "mg", upper_limit=100),
        "Vitamin B7": RdiEntry(30, "mcg"),
        "Biotin": RdiEntry(30, "mcg"),
        "Vitamin B9": RdiEntry(400, "mcg", upper_limit=1000),
        "Folate": RdiEntry(400, "mcg", upper_limit=1000),
        "Folic Acid": RdiEntry(400, "mcg", upper_limit=1000),
        "Vitamin B12": RdiEntry(2.4, "mcg"),
        "Cobalamin": RdiEntry(2.4, "mcg"),
        "Choline": RdiEntry(550, "mg", upper_limit=3500),
        # Minerals
        "Calcium": RdiEntry(1000, "mg", upper_limit=2500),
        "Iron": RdiEntry(18, "mg", upper_limit=45),
        # Supplemental magnesium only; dietary magnesium has no upper limit.
        "Magnesium": RdiEntry(420, "mg", upper_limit=350),
        "Phosphorus": RdiEntry(1000, "mg", upper_limit=4000),
        "Potassium": RdiEntry(4700, "mg"),
        "Sodium": RdiEntry(2300, "mg", upper_limit=2300),
        "Zinc": RdiEntry(11, "mg", upper_limit=40),
        "Copper": RdiEntry(0.9, "mg", upper_limit=10),
        "Manganese": RdiEntry(2.3, "mg", upper_limit=11),
        "Selenium": RdiEntry(55, "mcg", upper_limit=400),
        "Chromium": RdiEntry(35, "mcg"),
        "Molybdenum": RdiEntry(45, "mcg", upper_limit=2000),
        "Iodine": RdiEntry(150, "mcg", upper_limit=1100),
        # Other
        "Omega-3": RdiEntry(1600, "mg"),
        "Fiber": RdiEntry(28, "g"),
    }
)

# Keys are lowercase with whitespace collapsed to a hyphen.
NUTRIENT_ALIASES = MappingProxyType(
    {
        "vitamin-a": "Vitamin A",
        "vitamin-c": "Vitamin C",
        "vitamin-d": "Vitamin D",
        "vitamin-e": "Vitamin E",
        "vitamin-k": "Vitamin K",
        "vitamin-b1": "Vitamin B1",
        "vitamin-b2": "Vitamin B2",
        "vitamin-b3": "Vitamin B3",
        "vitamin-b5": "Vitamin B5",
        "vitamin-b6": "Vitamin B6",
        "vitamin-b7": "Vitamin B7",
        "vitamin-b9": "Vitamin B9",
        "vitamin-b12": "Vitamin B12",
        "thiamine": "Thiamin",
        "riboflavine": "Riboflavin",
        "niacine": "Niacin",
        "pantothenic-acid": "Pantothenic Acid",
        "biotine": "Biotin",
        "folates": "Folate",
        "folic-acid": "Folic Acid",
        "cobalamine": "Cobalamin",
        "calcium": "Calcium",
        "iron": "Iron",
        "magnesium": "Magnesium",
        "phosphorus": "Phosphorus",
        "potassium": "Potassium",
        "sodium": "Sodium",
        "zinc": "Zinc",
        "copper": "Copper",
        "manganese": "Manganese",
        "selenium": "Selenium",
        "chromium": "Chromium",
        "molybdenum": "Molybdenum",
        "iodine": "Iodine",
        "fiber": "Fiber",
        "omega-3-fat": "Omega-3",
    }
)

# MASS_CONVERSIONS[to_unit][from_unit] is the multiplier from from_unit.
MASS_CONVERSIONS = MappingProxyType(
    {
        "mcg": MappingProxyType({"mcg": 1, "mg": 1000, "g": 1_000_000}),
        "mg": MappingProxyType({"mg": 1, "g": 1000, "mcg": 0.001}),
        "g": MappingProxyType({"g": 1, "mg": 0.001, "mcg": 0.000001}),
    }
)

# International units per canonical vitamin: (factor, target unit).
IU_CONVERSIONS = MappingProxyType(
    {
        "Vitamin A": (0.3, "mcg"),  # retinol
        "Vitamin D": (0.025, "mcg"),
        "Vitamin E": (0.67, "mg"),  # d-alpha-tocopherol
    }
)

NUTRIENT_INTERACTIONS: tuple[InteractionRule, ...] = (
    InteractionRule(
        nutrients=("Calcium", "Iron"),
        kind=InteractionKind.INHIBITS,
        description=(
            "Calcium can reduce iron absorption. Consider taking them at least "
            "2 hours apart."
        ),
    ),
    InteractionRule(
        nutrients=("Zinc", "Copper"),
        kind=InteractionKind.INHIBITS,
        description=(
            "High-dose zinc can interfere with copper absorption over time."
        ),
    ),
    InteractionRule(
        nutrients=("Calcium", "Zinc"),
        kind=InteractionKind.INHIBITS,
        description="Large doses of calcium may reduce zinc absorption.",
    ),
    InteractionRule(
        nutrients=("Iron", "Zinc"),
        kind=InteractionKind.INHIBITS,
        description=(
            "Iron and zinc compete for absorption when taken together on an "
            "empty stomach."
        ),
    ),
    InteractionRule(
        nutrients=("Calcium", "Magnesium"),
        kind=InteractionKind.CAUTION,
        description=(
            "Calcium and magnesium compete for absorption at high doses. "
            "Splitting them across meals can help."
        ),
    ),
    InteractionRule(
        nutrients=("Vitamin E", "Vitamin K"),
        kind=InteractionKind.CAUTION,
        description=(
            "High-dose vitamin E may counteract vitamin K's role in blood "
            "clotting."
        ),
    ),
    InteractionRule(
        nutrients=("Vitamin C", "Iron"),
        kind=InteractionKind.ENHANCES,
        description="Vitamin C improves absorption of non-heme iron.",
    ),
    InteractionRule(
        nutrients=("Vitamin D", "Calcium"),
        kind=InteractionKind.ENHANCES,
        description="Vitamin D increases intestinal calcium absorption.",
    ),
)

DEFICIENCY_WATCHLIST: tuple[str, ...] = (
    "Vitamin D",
    "Vitamin B12",
    "Iron",
    "Calcium",
    "Magnesium",
    "Omega-3",
)

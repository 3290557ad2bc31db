"""
Per-category synonym tables.

Each table maps a canonical funnel selection (``"dental"``, ``"mexican"``,
``"plumbing"``) to the keyword variants a listing's tags might use for it.
Tables are built once at import time, are read-only afterwards, and are
looked up by ``(category, field)`` through ``get_table``.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class SynonymTable:
    name: str
    entries: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def from_groups(
        cls,
        name: str,
        groups: Iterable[tuple[Iterable[str], Iterable[str]]],
    ) -> SynonymTable:
        """Build a table where every alias in a group shares one synonym list."""
        entries: dict[str, tuple[str, ...]] = {}
        for aliases, synonyms in groups:
            # dict.fromkeys keeps first-seen order while dropping duplicates
            expanded = tuple(dict.fromkeys(s.lower() for s in synonyms))
            for alias in aliases:
                entries[alias.lower()] = expanded
        return cls(name=name, entries=MappingProxyType(entries))

    def expand(self, value: str) -> tuple[str, ...]:
        """Synonyms for *value*; an unknown value expands to itself."""
        key = value.strip().lower()
        return self.entries.get(key, (key,))

    def canonical_values(self) -> list[str]:
        return sorted(self.entries)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and value.strip().lower() in self.entries

    def __len__(self) -> int:
        return len(self.entries)


# ---------------------------------------------------------------------------
# Health & wellness
# ---------------------------------------------------------------------------

HEALTH_WELLNESS = SynonymTable.from_groups("health-wellness", [
    (("dental", "dentist"), [
        "dental", "dentist", "dentistry", "oral", "orthodontist", "periodontist",
        "endodontist", "oral surgery", "dental care", "dental center",
        "dental group", "dental office", "dds", "dmd",
    ]),
    (("gym", "fitness"), [
        "gym", "fitness", "24 hour", "24-hour", "24hr", "fitness center",
        "workout", "training", "personal training", "crossfit", "yoga",
        "pilates", "martial arts", "boxing", "swimming", "tennis",
    ]),
    (("salon", "beauty"), [
        "salon", "hair", "beauty", "hair salon", "beauty salon", "haircut",
        "styling", "color", "highlights", "perm", "extensions", "barber",
        "barbershop", "nail", "nail salon", "manicure", "pedicure",
    ]),
    (("spa", "medspa"), [
        "spa", "medspa", "medical spa", "massage", "facial", "skincare",
        "aesthetic", "cosmetic", "botox", "fillers", "laser", "rejuvenation",
        "wellness spa", "day spa",
    ]),
    (("chiro", "chiropractor"), [
        "chiropractor", "chiro", "spinal", "adjustment", "back pain",
        "neck pain", "wellness",
    ]),
    (("medical",), [
        "medical", "doctor", "physician", "clinic", "healthcare", "primary care",
        "family medicine", "internal medicine", "pediatrics", "urgent care",
    ]),
    (("therapy",), [
        "therapy", "therapist", "physical therapy", "pt", "occupational therapy",
        "ot", "speech therapy", "rehabilitation", "rehab", "counseling",
        "mental health", "psychology", "psychiatry",
    ]),
    (("naturopathic",), [
        "naturopath", "naturopathic", "nd", "natural medicine", "holistic",
        "alternative medicine", "functional medicine", "integrative medicine",
    ]),
    (("vision",), [
        "optometry", "optometrist", "vision", "eye care", "eyewear", "glasses",
        "contacts", "ophthalmology", "ophthalmologist",
    ]),
    (("mental",), [
        "mental health", "psychology", "psychiatrist", "psychologist",
        "counseling", "therapist", "therapy", "depression", "anxiety",
        "counselor",
    ]),
    (("physical",), [
        "physical therapy", "pt", "physiotherapy", "rehabilitation", "rehab",
        "sports medicine", "injury recovery",
    ]),
    (("podiatry",), [
        "podiatrist", "foot care", "foot doctor", "ankle", "foot surgery",
    ]),
    (("dermatology",), [
        "dermatologist", "skin care", "dermatology", "skin doctor", "acne",
        "moles", "skin cancer",
    ]),
    (("acupuncture",), [
        "acupuncture", "acupuncturist", "traditional chinese medicine", "tcm",
    ]),
])

# ---------------------------------------------------------------------------
# Home services
# ---------------------------------------------------------------------------

HOME_SERVICES = SynonymTable.from_groups("home-services", [
    (("landscaping", "landscape"), [
        "landscaping", "landscape", "landscape design", "garden", "gardening",
        "lawn care", "lawn", "yard", "outdoor", "plants", "trees", "shrubs",
        "irrigation", "sprinkler", "maintenance", "tree service",
        "tree trimming", "tree removal",
    ]),
    (("cleaning", "house cleaning"), [
        "cleaning", "house cleaning", "residential cleaning",
        "commercial cleaning", "deep clean", "maid service", "janitorial",
        "carpet cleaning", "upholstery cleaning", "window cleaning",
        "move-in cleaning", "move-out cleaning", "post construction cleaning",
    ]),
    (("solar", "solar installation"), [
        "solar", "solar panels", "solar installation", "solar energy",
        "renewable energy", "photovoltaic", "pv", "solar system", "solar power",
        "green energy", "clean energy", "solar contractor", "solar company",
    ]),
    (("remodeling", "renovation"), [
        "remodeling", "renovation", "home improvement", "construction",
        "general contractor", "gc", "kitchen remodel", "bathroom remodel",
        "addition", "home addition", "basement finishing", "room addition",
        "custom home",
    ]),
    (("plumbing", "plumber"), [
        "plumbing", "plumber", "pipe", "pipes", "drain", "drain cleaning",
        "water heater", "toilet", "faucet", "leak repair", "pipe repair",
        "sewer", "septic", "bathroom plumbing", "kitchen plumbing",
    ]),
    (("electrical", "electrician"), [
        "electrical", "electrician", "electrical work", "electrical installation",
        "electrical repair", "outlet", "outlets", "switch", "switches",
        "lighting", "electrical panel", "circuit breaker", "wiring",
        "electrical contractor",
    ]),
    (("hvac", "heating", "cooling"), [
        "hvac", "heating", "cooling", "air conditioning", "ac",
        "heating and cooling", "furnace", "air conditioner", "heat pump",
        "ductwork", "duct cleaning", "thermostat", "hvac contractor",
        "hvac technician",
    ]),
    (("roofing", "roofer"), [
        "roofing", "roofer", "roof", "roof repair", "roof replacement",
        "roofing contractor", "shingles", "tile", "metal roofing", "flat roof",
        "roofing company",
    ]),
    (("flooring", "floor"), [
        "flooring", "floor", "floors", "hardwood", "carpet", "tile", "laminate",
        "vinyl", "flooring installation", "flooring contractor",
        "floor refinishing", "floor sanding",
    ]),
    (("painting", "painter"), [
        "painting", "painter", "paint", "interior painting", "exterior painting",
        "house painting", "paint contractor", "color consultation", "paint job",
        "painting company",
    ]),
    (("handyman", "handy man"), [
        "handyman", "handy man", "general repair", "home repair", "maintenance",
        "fix", "repair", "small jobs", "odd jobs", "home maintenance",
        "handyman services",
    ]),
    (("pool", "pool service"), [
        "pool", "pool service", "pool maintenance", "pool cleaning",
        "pool repair", "pool contractor", "swimming pool", "pool equipment",
        "pool installation",
    ]),
    (("pest control", "exterminator"), [
        "pest control", "pest management", "exterminator", "extermination",
        "termite", "rodent", "ant", "spider", "pest removal", "pest prevention",
    ]),
    (("security", "alarm"), [
        "security", "security system", "alarm", "alarm system",
        "security camera", "surveillance", "home security",
        "security installation", "security company",
    ]),
    (("windows",), [
        "windows", "window", "window replacement", "window installation",
        "window repair", "window contractor", "glass", "glass repair",
        "window company",
    ]),
    (("doors",), [
        "doors", "door", "door replacement", "door installation", "door repair",
        "door contractor", "garage door", "garage door repair", "door company",
    ]),
    (("insulation",), [
        "insulation", "insulate", "insulation installation",
        "insulation contractor", "attic insulation", "wall insulation",
        "energy efficiency",
    ]),
    (("concrete",), [
        "concrete", "concrete work", "concrete contractor", "concrete repair",
        "concrete installation", "driveway", "patio", "sidewalk", "foundation",
    ]),
    (("masonry",), [
        "masonry", "mason", "stone work", "brick", "brick work", "stone",
        "fireplace", "chimney", "masonry contractor",
    ]),
])

# ---------------------------------------------------------------------------
# Restaurants & cafes
# ---------------------------------------------------------------------------

CUISINE = SynonymTable.from_groups("cuisine", [
    (("mexican",), [
        "mexican", "mexican restaurant", "tacos", "taco", "burrito", "burritos",
        "mexican food", "tex-mex", "texmex",
    ]),
    (("asian",), [
        "asian", "asian restaurant", "chinese", "japanese", "thai", "vietnamese",
        "korean", "indian", "asian food", "sushi", "ramen", "pho",
    ]),
    (("american",), [
        "american", "american restaurant", "burger", "burgers", "bbq",
        "barbecue", "steak", "steakhouse", "american food",
    ]),
    (("cafes",), [
        "cafes", "cafe", "coffee", "coffee shop", "coffeeshop", "coffeehouse",
        "espresso", "latte", "cappuccino", "breakfast", "brunch",
    ]),
    (("italian",), [
        "italian", "italian restaurant", "pizza", "pasta", "italian food",
        "trattoria", "ristorante",
    ]),
    (("mediterranean",), [
        "mediterranean", "greek", "middle eastern", "mediterranean food",
        "falafel", "hummus", "gyro",
    ]),
    (("seafood",), [
        "seafood", "fish", "lobster", "crab", "shrimp", "oyster",
        "seafood restaurant",
    ]),
    (("vegetarian",), [
        "vegetarian", "vegan", "plant-based", "vegetarian restaurant",
        "vegan restaurant",
    ]),
    (("fast food",), ["fast food", "quick service", "drive-thru", "fast casual"]),
    (("fine dining",), [
        "fine dining", "upscale", "gourmet", "fine restaurant", "elegant dining",
    ]),
])

DIETARY = SynonymTable.from_groups("dietary", [
    (("vegetarian",), [
        "vegetarian", "veggie", "vegetarian options", "vegetarian-friendly",
    ]),
    (("vegan",), ["vegan", "plant-based", "vegan options", "vegan-friendly"]),
    (("gluten-free",), [
        "gluten-free", "gluten free", "gf", "celiac", "gluten-free options",
    ]),
    (("keto",), ["keto", "low-carb", "ketogenic", "keto-friendly", "keto options"]),
    (("halal",), ["halal", "halal meat", "halal certified"]),
    (("kosher",), ["kosher", "kosher certified"]),
])


_TABLES: Mapping[tuple[str, str], SynonymTable] = MappingProxyType({
    ("health-wellness", "type"): HEALTH_WELLNESS,
    ("health-wellness", "goal"): HEALTH_WELLNESS,
    ("home-services", "type"): HOME_SERVICES,
    ("home-services", "goal"): HOME_SERVICES,
    ("restaurants-cafes", "cuisine"): CUISINE,
    ("restaurants-cafes", "dietary"): DIETARY,
})

_EMPTY = SynonymTable(name="empty", entries=MappingProxyType({}))


def get_table(category: str, field_name: str) -> SynonymTable:
    """Return the table for *category*/*field_name*; an empty one if none is defined."""
    return _TABLES.get((category, field_name), _EMPTY)


def registered_tables() -> Mapping[tuple[str, str], SynonymTable]:
    return _TABLES

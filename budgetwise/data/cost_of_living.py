"""Cost-of-living tables — per-city multipliers, tier base costs, and tags."""

# Cost of living relative to an average city (1.0)
CITY_COST_MULTIPLIERS: dict[str, float] = {
    "LON-UK": 1.8,  # London
    "PAR-FR": 1.6,  # Paris
    "NYC-US": 2.0,  # New York
    "TOK-JP": 1.7,  # Tokyo
    "SYD-AU": 1.5,  # Sydney
    "DEL-IN": 0.4,  # Delhi
    "DXB-AE": 1.4,  # Dubai
    "SIN-SG": 1.5,  # Singapore
    "IST-TR": 0.6,  # Istanbul
    "BCN-ES": 1.1,  # Barcelona
    "BER-DE": 1.2,  # Berlin
    "ROM-IT": 1.3,  # Rome
    "AMS-NL": 1.4,  # Amsterdam
    "HKG-HK": 1.6,  # Hong Kong
    "BKK-TH": 0.5,  # Bangkok
}

DEFAULT_COST_MULTIPLIER = 1.0

# Base daily costs in USD per tier
BASE_DAILY_COSTS: dict[str, dict[str, float]] = {
    "BUDGET": {"accommodation": 50, "food": 30, "activities": 20},
    "MODERATE": {"accommodation": 150, "food": 60, "activities": 40},
    "LUXURY": {"accommodation": 300, "food": 120, "activities": 100},
}

# Fixed descriptive tags by city name
CITY_NAME_TAGS: dict[str, tuple[str, ...]] = {
    "cultural": ("Bangkok", "Delhi", "Istanbul"),
    "beach": ("Sydney", "Barcelona", "Dubai"),
    "modern": ("Tokyo", "Singapore", "Hong Kong"),
    "historic": ("Paris", "Rome", "Amsterdam"),
}

BUDGET_FRIENDLY_BELOW = 0.8
LUXURY_ABOVE = 1.4


def get_cost_multiplier(city_id: str) -> float:
    return CITY_COST_MULTIPLIERS.get(city_id, DEFAULT_COST_MULTIPLIER)


# Daily cost-of-living profiles for the quick destination estimate
CITY_COST_PROFILES: dict[str, dict] = {
    "New York": {
        "city_tier": "luxury",
        "daily_costs": {"accommodation": 200, "food": 80, "transport": 30, "activities": 100},
        "best_time_to_visit": ["April", "May", "September", "October"],
        "tags": ["Urban", "Culture", "Shopping", "Food"],
    },
    "Bangkok": {
        "city_tier": "budget",
        "daily_costs": {"accommodation": 40, "food": 15, "transport": 5, "activities": 20},
        "best_time_to_visit": ["November", "December", "January", "February"],
        "tags": ["Culture", "Food", "Temples", "Nightlife"],
    },
    "Paris": {
        "city_tier": "luxury",
        "daily_costs": {"accommodation": 150, "food": 60, "transport": 20, "activities": 80},
        "best_time_to_visit": ["April", "May", "September", "October"],
        "tags": ["Romance", "Culture", "Art", "Food"],
    },
}

DEFAULT_COST_PROFILE: dict = {
    "city_tier": "moderate",
    "daily_costs": {"accommodation": 100, "food": 40, "transport": 15, "activities": 50},
    "best_time_to_visit": ["Spring", "Fall"],
    "tags": ["Travel", "Explore"],
}


def get_cost_profile(city_name: str) -> dict:
    return CITY_COST_PROFILES.get(city_name, DEFAULT_COST_PROFILE)

"""Attraction suggestions for a destination — placeholder data until a real provider exists."""

from budgetwise.models.travel import Attraction, City

_ATTRACTION_TEMPLATES = [
    (
        "{city} Historical Museum",
        "Explore the rich history and cultural heritage of the city through fascinating exhibits and artifacts.",
        "museum", "Culture", 4.5, "2-3 hours", "$15",
    ),
    (
        "{city} Central Park",
        "A beautiful urban park perfect for relaxation, picnics, and outdoor activities.",
        "park", "Nature", 4.8, "1-4 hours", "Free",
    ),
    (
        "{city} Cathedral",
        "An architectural masterpiece showcasing stunning religious art and design.",
        "cathedral", "Architecture", 4.6, "1-2 hours", "$10",
    ),
    (
        "{city} Market Square",
        "Vibrant local market with traditional food, crafts, and cultural experiences.",
        "market", "Shopping & Food", 4.7, "2-3 hours", "Free entry",
    ),
]

SUGGESTED_ITINERARY = [
    {
        "day": 1,
        "activities": [
            {"time": "09:00", "activity": "Arrival and Hotel Check-in"},
            {"time": "11:00", "activity": "Visit Historical Museum"},
            {"time": "14:00", "activity": "Lunch at Local Restaurant"},
            {"time": "16:00", "activity": "Explore Central Park"},
            {"time": "19:00", "activity": "Welcome Dinner"},
        ],
    },
    {
        "day": 2,
        "activities": [
            {"time": "09:00", "activity": "Cathedral Visit"},
            {"time": "11:30", "activity": "Walking Tour"},
            {"time": "13:30", "activity": "Lunch at Market Square"},
            {"time": "15:00", "activity": "Shopping and Local Experiences"},
            {"time": "19:00", "activity": "Dinner and Cultural Show"},
        ],
    },
]


def get_attractions(city: City) -> list[Attraction]:
    return [
        Attraction(
            name=name.format(city=city.city),
            description=description,
            image_url=f"https://source.unsplash.com/800x600/?{city.city},{keyword}",
            category=category,
            rating=rating,
            estimated_time=estimated_time,
            price=price,
        )
        for name, description, keyword, category, rating, estimated_time, price in _ATTRACTION_TEMPLATES
    ]


def suggested_itinerary() -> list[dict]:
    return [
        {"day": d["day"], "activities": [dict(a) for a in d["activities"]]}
        for d in SUGGESTED_ITINERARY
    ]

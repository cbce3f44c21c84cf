"""Static city catalog — every destination the planner knows about."""

from budgetwise.models.travel import City

CITIES: tuple[City, ...] = (
    City("LON-UK", "London", "United Kingdom", "GB", "England", 51.5074, -0.1278, 8982000),
    City("PAR-FR", "Paris", "France", "FR", "Île-de-France", 48.8566, 2.3522, 2148271),
    City("NYC-US", "New York", "United States", "US", "New York", 40.7128, -74.0060, 8419000),
    City("TOK-JP", "Tokyo", "Japan", "JP", "Kantō", 35.6762, 139.6503, 37400068),
    City("SYD-AU", "Sydney", "Australia", "AU", "New South Wales", -33.8688, 151.2093, 5367206),
    City("DEL-IN", "Delhi", "India", "IN", "Delhi", 28.6139, 77.2090, 16787941),
    City("DXB-AE", "Dubai", "United Arab Emirates", "AE", "Dubai", 25.2048, 55.2708, 3331420),
    City("SIN-SG", "Singapore", "Singapore", "SG", "Central Region", 1.3521, 103.8198, 5850342),
    City("IST-TR", "Istanbul", "Turkey", "TR", "Marmara", 41.0082, 28.9784, 15460000),
    City("BCN-ES", "Barcelona", "Spain", "ES", "Catalonia", 41.3851, 2.1734, 1620343),
    City("BER-DE", "Berlin", "Germany", "DE", "Berlin", 52.5200, 13.4050, 3669495),
    City("ROM-IT", "Rome", "Italy", "IT", "Lazio", 41.9028, 12.4964, 4342212),
    City("AMS-NL", "Amsterdam", "Netherlands", "NL", "North Holland", 52.3676, 4.9041, 821752),
    City("HKG-HK", "Hong Kong", "Hong Kong", "HK", "Hong Kong Island", 22.3193, 114.1694, 7482500),
    City("BKK-TH", "Bangkok", "Thailand", "TH", "Bangkok", 13.7563, 100.5018, 8280925),
    City("PRG-CZ", "Prague", "Czech Republic", "CZ", "Prague", 50.0755, 14.4378, 1324277),
)

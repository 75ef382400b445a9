# Category name -> Craigslist search path. Housing only: the feature schema
# (Ask, Bedrooms, ...) doesn't fit jobs or for-sale searches.
TYPES = {
    "apartments": "apa",
    "rooms": "roo",
    "sublets": "sub",
    "housing": "hhh",
    "vacation": "vac",
    "parking": "prk",
    "office": "off",
    "realestate": "rea",
}

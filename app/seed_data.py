# app/seed_data.py
import logging

from db import count_properties, init_db, insert_property

logger = logging.getLogger(__name__)

FEATURED_LISTINGS = [
    ("Penthouse Apartment", "Westlands, Nairobi", "KES 58M"),
    ("Luxury Villa", "Runda", "KES 120M"),
    ("Executive Bungalow", "Karen", "KES 75M"),
]

def seed():
    init_db()
    # only on an empty table
    if count_properties():
        return
    for title, location, price in FEATURED_LISTINGS:
        insert_property(title, location, price)
    logger.info("Seeded %d featured listings", len(FEATURED_LISTINGS))

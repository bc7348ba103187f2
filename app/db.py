# app/db.py
import logging
import os
import sqlite3
from datetime import datetime

import config

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS properties (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    location TEXT NOT NULL,
    price TEXT NOT NULL, -- display string, e.g. 'KES 58M'
    created_at TEXT
);

CREATE TABLE IF NOT EXISTS contact_messages (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT NOT NULL,
    message TEXT NOT NULL,
    created_at TEXT
);

-- full card number and CVV are never stored
CREATE TABLE IF NOT EXISTS payments (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name_on_card TEXT NOT NULL,
    card_last4 TEXT NOT NULL,
    card_brand TEXT,
    expiry TEXT NOT NULL, -- MM/YY
    created_at TEXT
);
"""

def get_conn():
    conn = sqlite3.connect(config.DB_PATH, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn

def init_db():
    folder = os.path.dirname(config.DB_PATH)
    if folder:
        os.makedirs(folder, exist_ok=True)
    conn = get_conn()
    cur = conn.cursor()
    cur.executescript(SCHEMA)
    conn.commit()
    conn.close()
    logger.debug("Database ready at %s", config.DB_PATH)

def row_to_dict(row):
    if row is None:
        return None
    return dict(row)

def _now():
    return datetime.now().isoformat(timespec="seconds")

def _insert(sql, params):
    conn = get_conn()
    try:
        cur = conn.cursor()
        cur.execute(sql, params)
        conn.commit()
        return cur.lastrowid
    finally:
        conn.close()

def _select(sql, params=()):
    conn = get_conn()
    try:
        cur = conn.cursor()
        cur.execute(sql, params)
        return [row_to_dict(r) for r in cur.fetchall()]
    finally:
        conn.close()

# Properties
def insert_property(title, location, price):
    new_id = _insert("INSERT INTO properties (title, location, price, created_at) VALUES (?,?,?,?)",
                     (title, location, price, _now()))
    logger.info("Saved property %s (%s)", new_id, title)
    return new_id

def list_properties():
    return _select("SELECT * FROM properties ORDER BY id")

def count_properties():
    conn = get_conn()
    try:
        return conn.execute("SELECT COUNT(*) FROM properties").fetchone()[0]
    finally:
        conn.close()

# Contact messages
def insert_contact_message(name, email, message):
    new_id = _insert("INSERT INTO contact_messages (name, email, message, created_at) VALUES (?,?,?,?)",
                     (name, email, message, _now()))
    logger.info("Saved contact message %s from %s", new_id, email)
    return new_id

def list_contact_messages(limit=None):
    q = "SELECT * FROM contact_messages ORDER BY id DESC"
    if limit is not None:
        return _select(q + " LIMIT ?", (int(limit),))
    return _select(q)

# Payments
def insert_payment(name_on_card, card_last4, card_brand, expiry):
    new_id = _insert("""
        INSERT INTO payments (name_on_card, card_last4, card_brand, expiry, created_at)
        VALUES (?,?,?,?,?)
    """, (name_on_card, card_last4, card_brand, expiry, _now()))
    logger.info("Saved payment %s (%s ending %s)", new_id, card_brand, card_last4)
    return new_id

def list_payments():
    return _select("SELECT * FROM payments ORDER BY id")

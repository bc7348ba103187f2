# app/forms.py
import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
EXPIRY_RE = re.compile(r"^(\d{2})/(\d{2})$")


class FormError(ValueError):
    """User input that cannot be saved. The message is shown as is."""


@dataclass
class ContactInput:
    name: str
    email: str
    message: str


@dataclass
class CardDetails:
    name_on_card: str
    last4: str
    brand: str
    expiry: str


def validate_contact(name: str, email: str, message: str) -> ContactInput:
    name, email, message = name.strip(), email.strip(), message.strip()
    if not name or not email or not message:
        raise FormError("Please fill in your name, email and message.")
    if not EMAIL_RE.match(email):
        raise FormError(f"'{email}' is not a valid email address.")
    return ContactInput(name, email, message)


def validate_listing(title: str, location: str, price: str):
    title, location, price = title.strip(), location.strip(), price.strip()
    if not title or not location or not price:
        raise FormError("Title, location and price are all required.")
    return title, location, price


def luhn_ok(number: str) -> bool:
    """Luhn checksum over a string of digits."""
    total = 0
    for i, ch in enumerate(reversed(number)):
        d = int(ch)
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total % 10 == 0


def card_brand(number: str) -> str:
    if number.startswith("4"):
        return "Visa"
    if number[:2] in ("34", "37"):
        return "Amex"
    if number[:2] in ("51", "52", "53", "54", "55") or "2221" <= number[:4] <= "2720":
        return "Mastercard"
    return "Other"


def parse_expiry(expiry: str, today: Optional[date] = None) -> str:
    """Validate an MM/YY expiry and return it normalised."""
    m = EXPIRY_RE.match(expiry.strip())
    if not m:
        raise FormError("Expiry must be in MM/YY format.")
    month, year = int(m.group(1)), 2000 + int(m.group(2))
    if not 1 <= month <= 12:
        raise FormError("Expiry month must be between 01 and 12.")
    today = today or date.today()
    # a card is valid through the last day of its expiry month
    if (year, month) < (today.year, today.month):
        raise FormError("This card has expired.")
    return f"{month:02d}/{year % 100:02d}"


def validate_card(name_on_card: str, card_number: str, expiry: str, cvv: str,
                  today: Optional[date] = None) -> CardDetails:
    """Check the payment form and reduce it to what may be stored.

    The full number and the CVV are dropped here; only the last four
    digits and the brand survive.
    """
    name_on_card = name_on_card.strip()
    if not name_on_card:
        raise FormError("Name on card is required.")
    digits = re.sub(r"[\s-]", "", card_number)
    if not re.fullmatch(r"[0-9]{12,19}", digits):
        raise FormError("Card number must be 12 to 19 digits.")
    if not luhn_ok(digits):
        raise FormError("Card number is not valid.")
    normalised_expiry = parse_expiry(expiry, today)
    cvv = cvv.strip()
    if not re.fullmatch(r"[0-9]{3,4}", cvv):
        raise FormError("CVV must be 3 or 4 digits.")
    return CardDetails(name_on_card, digits[-4:], card_brand(digits), normalised_expiry)


def mask_card(last4: str) -> str:
    return "•••• •••• •••• " + last4

from datetime import date

import pytest

from forms import (FormError, card_brand, luhn_ok, mask_card, parse_expiry, validate_card,
                   validate_contact, validate_listing)

TODAY = date(2024, 6, 15)


def test_valid_contact_is_trimmed():
    msg = validate_contact(" Amina ", "amina@example.com ", " Hello ")
    assert (msg.name, msg.email, msg.message) == ("Amina", "amina@example.com", "Hello")


@pytest.mark.parametrize("name,email,message", [
    ("", "a@b.co", "hi"),
    ("Amina", "", "hi"),
    ("Amina", "a@b.co", "   "),
    ("Amina", "not-an-email", "hi"),
    ("Amina", "a@b", "hi"),
])
def test_bad_contact(name, email, message):
    with pytest.raises(FormError):
        validate_contact(name, email, message)


def test_listing_requires_all_fields():
    assert validate_listing(" Villa ", "Runda", "KES 1M") == ("Villa", "Runda", "KES 1M")
    with pytest.raises(FormError):
        validate_listing("Villa", "", "KES 1M")


def test_luhn():
    assert luhn_ok("4111111111111111")
    assert luhn_ok("378282246310005")
    assert not luhn_ok("4111111111111112")


def test_card_brand():
    assert card_brand("4111111111111111") == "Visa"
    assert card_brand("5555555555554444") == "Mastercard"
    assert card_brand("2223003122003222") == "Mastercard"
    assert card_brand("378282246310005") == "Amex"
    assert card_brand("6011111111111117") == "Other"


def test_valid_card_keeps_only_last4():
    card = validate_card("Jane Doe", "4111 1111-1111 1111", "07/26", "123", today=TODAY)
    assert card.name_on_card == "Jane Doe"
    assert card.last4 == "1111"
    assert card.brand == "Visa"
    assert card.expiry == "07/26"
    assert not hasattr(card, "cvv")
    assert mask_card(card.last4).endswith("1111")


def test_card_valid_through_expiry_month():
    assert parse_expiry("06/24", today=TODAY) == "06/24"


@pytest.mark.parametrize("kwargs", [
    {"name_on_card": " "},
    {"card_number": "4111111111111112"},
    {"card_number": "41111"},
    {"card_number": "4111abcd11111111"},
    {"expiry": "05/24"},
    {"expiry": "13/30"},
    {"expiry": "0730"},
    {"cvv": "12"},
    {"cvv": "12a"},
    {"cvv": "12³"},
    {"card_number": "411111111111111²"},
])
def test_bad_card(kwargs):
    fields = {"name_on_card": "Jane Doe", "card_number": "4111111111111111",
              "expiry": "07/26", "cvv": "123"}
    fields.update(kwargs)
    with pytest.raises(FormError):
        validate_card(today=TODAY, **fields)

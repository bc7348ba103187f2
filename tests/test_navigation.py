import pytest

from navigation import NAV_ITEMS, ROUT_SPLASH, ROUTES, set_route


def test_unknown_route_rejected():
    with pytest.raises(ValueError):
        set_route("login")


def test_nav_items_are_known_routes():
    assert all(route in ROUTES for _, route in NAV_ITEMS)
    assert ROUT_SPLASH not in [route for _, route in NAV_ITEMS]

"""Request Schemas — camelCase aliases, blank-string handling and zone cleaning.

Tests:
    - Blank strings become None so services report them as missing
    - Passwords are taken verbatim (no trimming)
    - Both camelCase and snake_case keys are accepted
    - Partial updates remember which fields were sent
    - Offer dates come out timezone-aware in UTC
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

from sh_pizza.schemas.auth import Credentials
from sh_pizza.schemas.branch import BranchCreate
from sh_pizza.schemas.common import Pagination
from sh_pizza.schemas.menu import MenuItemWrite
from sh_pizza.schemas.offer import OfferCreate, OfferUpdate


def test_blank_strings_become_none():
    creds = Credentials(email="   ", password="secret!!")
    assert creds.email is None


def test_strings_are_trimmed():
    assert Credentials(email="  a@b.c ").email == "a@b.c"


def test_password_kept_verbatim():
    assert Credentials(password="  spaced  ").password == "  spaced  "


def test_camel_and_snake_keys():
    pid = uuid4()
    camel = MenuItemWrite.model_validate({"type": "pizza", "basePrice": "9.5", "branchId": str(pid)})
    snake = MenuItemWrite.model_validate({"type": "pizza", "base_price": "9.5", "branch_id": str(pid)})
    assert camel.base_price == snake.base_price == Decimal("9.5")
    assert camel.branch_id == snake.branch_id == pid


def test_delivery_zones_cleaned():
    branch = BranchCreate.model_validate({"deliveryZones": [" A ", "", "  ", "B"]})
    assert branch.delivery_zones == ["A", "B"]


def test_partial_update_tracks_sent_fields():
    update = OfferUpdate.model_validate({"id": str(uuid4()), "description": None})
    assert "description" in update.model_fields_set
    assert "name" not in update.model_fields_set


def test_pagination_serializes_camel_case():
    dumped = Pagination(page=1, limit=10, total=0, total_pages=0).model_dump(by_alias=True)
    assert dumped == {"page": 1, "limit": 10, "total": 0, "totalPages": 0}


def test_offer_dates_normalized_to_utc():
    offer = OfferCreate.model_validate({
        "validFrom": "2030-01-01T10:00:00-05:00",
        "validUntil": "2030-01-02T00:00:00",
    })
    assert offer.valid_from == datetime(2030, 1, 1, 15, tzinfo=timezone.utc)
    assert offer.valid_from.utcoffset() == timedelta(0)
    assert offer.valid_until == datetime(2030, 1, 2, tzinfo=timezone.utc)

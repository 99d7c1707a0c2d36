"""Unit tests for DecimalJSONResponse."""

import json
from decimal import Decimal

from apps.api.responses import DecimalJSONResponse


def test_decimal_rendered_as_exact_number():
    response = DecimalJSONResponse(
        content=[{"id": 1, "total": Decimal("1234567890123456.78")}]
    )

    assert response.body == b'[{"id":1,"total":1234567890123456.78}]'


def test_integral_decimal_has_no_fraction():
    response = DecimalJSONResponse(content={"total": Decimal("123")})

    assert response.body == b'{"total":123}'


def test_body_parses_back_to_same_decimal():
    total = Decimal("98765432109876.54")
    response = DecimalJSONResponse(content={"total": total})

    assert json.loads(response.body, parse_float=Decimal)["total"] == total


def test_media_type_and_unicode():
    response = DecimalJSONResponse(content={"shippingAddress": "Straße 5"})

    assert response.media_type == "application/json"
    assert json.loads(response.body) == {"shippingAddress": "Straße 5"}

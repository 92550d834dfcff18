import json

import pytest

from src.api.pipeline import Fault, RequestContext
from src.api.validation import decode_body, expand_form, validate_campground
from src.models.campground import CampgroundIn


def test_expand_form_nests_bracketed_keys():
    pairs = [("camp[title]", "Pine Ridge"), ("camp[price]", "25"), ("other", "x")]
    assert expand_form(pairs) == {
        "camp": {"title": "Pine Ridge", "price": "25"},
        "other": "x",
    }


def test_expand_form_handles_deeper_nesting():
    assert expand_form([("a[b][c]", "1")]) == {"a": {"b": {"c": "1"}}}


def test_decode_body_reads_urlencoded_forms_with_blank_values():
    ctx = RequestContext(
        content_type="application/x-www-form-urlencoded",
        body=b"camp%5Btitle%5D=&camp%5Bprice%5D=10",
    )
    out = decode_body(ctx)
    assert out.payload == {"camp": {"title": "", "price": "10"}}


def test_decode_body_reads_json():
    body = json.dumps({"camp": {"title": "Pine Ridge"}}).encode()
    out = decode_body(RequestContext(content_type="application/json; charset=utf-8", body=body))
    assert out.payload == {"camp": {"title": "Pine Ridge"}}


def test_decode_body_rejects_malformed_json():
    out = decode_body(RequestContext(content_type="application/json", body=b"{not json"))
    assert isinstance(out, Fault)
    assert out.status_code == 400


def test_validate_campground_passes_valid_payload_through():
    payload = {"camp": {"title": "Pine Ridge", "price": "25", "description": "quiet", "location": "CO"}}
    ctx = RequestContext(payload=payload)
    out = validate_campground(ctx)
    assert isinstance(out, RequestContext)
    assert out.data == CampgroundIn(title="Pine Ridge", price=25, description="quiet", location="CO")
    # the incoming context is left untouched
    assert ctx.data is None


def test_validate_campground_reports_every_violation():
    out = validate_campground(RequestContext(payload={"camp": {"title": "", "price": -5}}))
    assert isinstance(out, Fault)
    assert out.status_code == 400
    violations = out.message.split(",")
    assert len(violations) == 4
    for field in ("camp.title", "camp.price", "camp.description", "camp.location"):
        assert any(f'"{field}"' in v for v in violations)


def test_validate_campground_requires_camp_object():
    out = validate_campground(RequestContext(payload={}))
    assert isinstance(out, Fault)
    assert out.message == '"camp" Field required'


def test_validate_campground_rejects_blank_text():
    payload = {"camp": {"title": "   ", "price": 1, "description": "d", "location": "l"}}
    out = validate_campground(RequestContext(payload=payload))
    assert isinstance(out, Fault)
    assert '"camp.title"' in out.message


def test_validate_campground_rejects_non_numeric_price():
    payload = {"camp": {"title": "t", "price": "cheap", "description": "d", "location": "l"}}
    out = validate_campground(RequestContext(payload=payload))
    assert isinstance(out, Fault)
    assert out.message.startswith('"camp.price"')


@pytest.mark.parametrize("price", ["inf", "-inf", "1e400", "nan"])
def test_validate_campground_rejects_non_finite_price(price):
    payload = {"camp": {"title": "t", "price": price, "description": "d", "location": "l"}}
    out = validate_campground(RequestContext(payload=payload))
    assert isinstance(out, Fault)
    assert out.status_code == 400
    assert out.message.startswith('"camp.price"')

# tests/test_validation.py
import pytest
from app.rules.validation import validate_receipt, parse_purchase_date, parse_purchase_time
from app.schemas import IncomingReceipt

VALID = {
    "retailer": "M&M Corner_Market-2",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Klarbrunn 12-PK_12 FL OZ", "price": "12.00"},
    ],
    "total": "14.25",
}

def _with(**overrides):
    data = dict(VALID)
    data.update(overrides)
    return IncomingReceipt.model_validate(data)

def _with_item(**overrides):
    item = {"shortDescription": "Gatorade", "price": "2.25"}
    item.update(overrides)
    return _with(items=[item])

def test_valid_receipt():
    assert validate_receipt(_with()) is True

@pytest.mark.parametrize("retailer", ["", "Walmart!", "Target.com", "Café", "A+B"])
def test_bad_retailer(retailer):
    assert validate_receipt(_with(retailer=retailer)) is False

@pytest.mark.parametrize("d", ["2022-3-20", "2022-03-2", "22-03-20", "2022/03/20", "2022-02-30", "2022-13-01", "", " 2022-03-20"])
def test_bad_purchase_date(d):
    assert validate_receipt(_with(purchaseDate=d)) is False

@pytest.mark.parametrize("t", ["2:33", "14:3", "24:00", "14:60", "2:33 PM", "1433", "", "14:33:00"])
def test_bad_purchase_time(t):
    assert validate_receipt(_with(purchaseTime=t)) is False

def test_empty_items():
    assert validate_receipt(_with(items=[])) is False

@pytest.mark.parametrize("desc", ["", "M&M Peanuts", "Soda!", "Coke (2L)"])
def test_bad_description(desc):
    assert validate_receipt(_with_item(shortDescription=desc)) is False

def test_blank_description_is_accepted():
    assert validate_receipt(_with_item(shortDescription="   ")) is True

@pytest.mark.parametrize("amount", ["2", "2.5", "2.250", "-2.25", "1,000.00", " 2.25", "2.25 ", ".25", "2.25\n"])
def test_bad_price(amount):
    assert validate_receipt(_with_item(price=amount)) is False

@pytest.mark.parametrize("amount", ["14", "14.2", "-14.25", "$14.25", "14.25 "])
def test_bad_total(amount):
    assert validate_receipt(_with(total=amount)) is False

def test_one_bad_item_rejects_whole_receipt():
    items = VALID["items"] + [{"shortDescription": "Ok", "price": "oops"}]
    assert validate_receipt(_with(items=items)) is False

def test_parse_helpers():
    assert parse_purchase_date("2022-01-31").day == 31
    assert parse_purchase_time("15:04") == (15, 4)
    with pytest.raises(ValueError):
        parse_purchase_date("2022-1-31")
    with pytest.raises(ValueError):
        parse_purchase_time("23:60")

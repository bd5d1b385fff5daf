import pytest

from citygrid.entities import Product, School


def test_product_valid():
    product = Product("PRD001", "Laptop", "Electronics", 1500.0, "M01")
    assert product.is_valid() is True


@pytest.mark.parametrize(
    "product",
    [
        Product("", "Laptop", "Electronics", 10.0, "M01"),
        Product("PRD001", "", "Electronics", 10.0, "M01"),
        Product("PRD001", "Laptop", "Electronics", -1.0, "M01"),
        Product(),
    ],
)
def test_product_invalid(product):
    assert product.is_valid() is False


def test_product_zero_price_is_valid():
    assert Product("PRD002", "Shirt", price=0.0).is_valid() is True


def test_product_describe():
    text = Product("PRD001", "Laptop", "Electronics", 12.5, "M01").describe()
    lines = text.splitlines()
    assert lines[0] == "Product ID: PRD001"
    assert "Price: 12.5" in lines
    assert lines[-1] == "Mall ID: M01"


def test_product_describe_default_price():
    assert "Price: 0" in Product("P", "N").describe().splitlines()


def test_school_subjects():
    school = School("S01", "City School", "G-10", 4.5)
    assert school.offers_subject("Math") is False
    school.add_subject("Math")
    school.add_subject("English")
    assert school.subjects == ["Math", "English"]
    assert school.offers_subject("Math") is True
    assert school.offers_subject("math") is False


def test_school_subjects_not_shared_between_instances():
    first = School("S01")
    second = School("S02")
    first.add_subject("Physics")
    assert second.subjects == []


def test_school_describe_without_subjects():
    lines = School("S01", "City School", "G-10", 4.5).describe().splitlines()
    assert lines[0] == "School ID: S01"
    assert "Rating: 4.5" in lines
    assert lines[-1] == "Subjects: None"


def test_school_describe_with_subjects():
    school = School("S01", "City School", "G-10", 4.5, ["Math", "English"])
    assert school.describe().splitlines()[-1] == "Subjects: Math, English"
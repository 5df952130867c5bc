import pytest
from pydantic import ValidationError

from buste_paga.pydantic_models.data import PaySlipFilter


def test_valid_filter(csv_source, make_row):
    source = csv_source([make_row()])

    filter_obj = PaySlipFilter(month=3, year=2024, source_file=source)

    assert filter_obj.month == "03"
    assert filter_obj.year == "2024"
    assert filter_obj.period_key == "03-2024"
    assert "presenze.csv" in str(filter_obj)


@pytest.mark.parametrize("month", ["0", "13", "marzo", ""])
def test_invalid_month(csv_source, make_row, month):
    with pytest.raises(ValidationError):
        PaySlipFilter(month=month, year="2024", source_file=csv_source([make_row()]))


@pytest.mark.parametrize("year", ["24", "20245", "anno"])
def test_invalid_year(csv_source, make_row, year):
    with pytest.raises(ValidationError):
        PaySlipFilter(month="03", year=year, source_file=csv_source([make_row()]))


def test_missing_source_file(tmp_path):
    with pytest.raises(ValidationError) as exc_info:
        PaySlipFilter(month="13", year="2024", source_file=tmp_path / "manca.csv")

    assert len(exc_info.value.errors()) == 2


def test_month_with_extra_leading_zero(csv_source, make_row):
    filter_obj = PaySlipFilter(month="003", year="2024", source_file=csv_source([make_row()]))

    assert filter_obj.month == "03"
    assert filter_obj.period_key == "03-2024"

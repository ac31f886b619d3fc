import pandas as pd
import pytest

from analysis.streets import extract_street, extract_streets


@pytest.mark.parametrize(
    "hundred_block, street",
    [
        ("4XX W 15TH AVE", "W 15TH AVE"),
        ("10XX BURRARD ST", "BURRARD ST"),
        ("100 BLOCK MAIN ST", "MAIN ST"),
        ("1XX BLOCK MAIN ST", "MAIN ST"),
        ("X NK_LOC ST", "NK_LOC ST"),
        ("1ST AVE", "1ST AVE"),
        ("12TH AVE", "12TH AVE"),
        ("W 15TH AVE", "W 15TH AVE"),
        ("", ""),
    ],
)
def test_extract_street(hundred_block, street):
    assert extract_street(hundred_block) == street


def test_only_the_leading_block_is_stripped():
    assert extract_street("4XX 4XX AVE") == "4XX AVE"


def test_non_strings_pass_through():
    assert extract_street(None) is None
    assert pd.isna(extract_street(float("nan")))


def test_extract_streets_on_series():
    blocks = pd.Series(["4XX W 15TH AVE", None, "1ST AVE"], index=[3, 5, 9])

    streets = extract_streets(blocks)

    assert list(streets.index) == [3, 5, 9]
    assert streets[3] == "W 15TH AVE"
    assert pd.isna(streets[5])
    assert streets[9] == "1ST AVE"

import re

import pandas as pd

# "4XX W 15TH AVE" -> "W 15TH AVE", "100 BLOCK MAIN ST" -> "MAIN ST"
HUNDRED_BLOCK_PREFIX = re.compile(r"^\d*X*\s(?:BLOCK\s)?")


def extract_street(hundred_block):
    if not isinstance(hundred_block, str):
        return hundred_block
    return HUNDRED_BLOCK_PREFIX.sub("", hundred_block, count=1)


def extract_streets(hundred_blocks: pd.Series) -> pd.Series:
    return hundred_blocks.map(extract_street)

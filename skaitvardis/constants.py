"""Shared constants for skaitvardis."""

from typing import Final

# Signed 64-bit domain accepted by the converter
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

MINUS = "minus"

# Cardinal words indexed by value
ZERO_TO_NINETEEN: Final[tuple[str, ...]] = (
    "nulis",
    "vienas",
    "du",
    "trys",
    "keturi",
    "penki",
    "šeši",
    "septyni",
    "aštuoni",
    "devyni",
    "dešimt",
    "vienuolika",
    "dvylika",
    "trylika",
    "keturiolika",
    "penkiolika",
    "šešiolika",
    "septyniolika",
    "aštuoniolika",
    "devyniolika",
)

# Multiples of ten from 0 to 90, indexed by tens digit
TENS: Final[tuple[str, ...]] = (
    ZERO_TO_NINETEEN[0],
    ZERO_TO_NINETEEN[10],
    "dvidešimt",
    "trisdešimt",
    "keturiasdešimt",
    "penkiasdešimt",
    "šešiasdešimt",
    "septyniasdešimt",
    "aštuoniasdešimt",
    "devyniasdešimt",
)

import pytest

from skaitvardis.config import ConverterConfig
from skaitvardis.converter import NumberConverter


@pytest.fixture
def converter():
    return NumberConverter()


@pytest.fixture
def eliding_converter():
    return NumberConverter(ConverterConfig(elide_count_of_one=True))

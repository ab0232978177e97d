"""Tests for scales and count agreement."""

import pytest

from skaitvardis.exceptions import InvalidArgumentError
from skaitvardis.scale import HUNDRED, SCALES, THOUSAND, Scale


class TestFormForCount:
    """Tests for Scale.form_for_count."""

    @pytest.mark.parametrize("count", [-(2**31), -1])
    def test_negative_count_raises(self, count: int) -> None:
        with pytest.raises(InvalidArgumentError):
            HUNDRED.form_for_count(count)

    @pytest.mark.parametrize(
        ("count", "expected"),
        [
            (0, HUNDRED.plural_form_b),
            (1, HUNDRED.singular_form),
            (2, HUNDRED.plural_form_a),
            (9, HUNDRED.plural_form_a),
            (10, HUNDRED.plural_form_b),
            (11, HUNDRED.plural_form_b),
            (12, HUNDRED.plural_form_b),
            (19, HUNDRED.plural_form_b),
            (20, HUNDRED.plural_form_b),
            (21, HUNDRED.singular_form),
            (22, HUNDRED.plural_form_a),
            (30, HUNDRED.plural_form_b),
            (90, HUNDRED.plural_form_b),
            (100, HUNDRED.plural_form_b),
            (101, HUNDRED.singular_form),
            (909, HUNDRED.plural_form_a),
            (910, HUNDRED.plural_form_b),
            (911, HUNDRED.plural_form_b),
            (912, HUNDRED.plural_form_b),
            (919, HUNDRED.plural_form_b),
            (999, HUNDRED.plural_form_a),
            (2**31 - 1, HUNDRED.plural_form_a),
        ],
    )
    def test_hundred(self, count: int, expected: str) -> None:
        assert HUNDRED.form_for_count(count) == expected

    def test_thousand_words(self) -> None:
        assert THOUSAND.form_for_count(1) == "tūkstantis"
        assert THOUSAND.form_for_count(3) == "tūkstančiai"
        assert THOUSAND.form_for_count(15) == "tūkstančių"
        assert THOUSAND.form_for_count(111) == "tūkstančių"
        assert THOUSAND.form_for_count(121) == "tūkstantis"


class TestScaleTable:
    """Tests for the scale table."""

    def test_strictly_decreasing(self) -> None:
        magnitudes = [scale.magnitude for scale in SCALES]
        assert magnitudes == sorted(magnitudes, reverse=True)
        assert len(set(magnitudes)) == len(magnitudes)

    def test_powers_of_ten(self) -> None:
        assert [scale.magnitude for scale in SCALES] == [
            10**18,
            10**15,
            10**12,
            10**9,
            10**6,
            10**3,
            10**2,
        ]

    def test_forms_distinct(self) -> None:
        for scale in SCALES:
            forms = {scale.singular_form, scale.plural_form_a, scale.plural_form_b}
            assert len(forms) == 3
            assert all(forms)

    def test_only_hundred_skips_count_of_one(self) -> None:
        assert not HUNDRED.speak_count_when_one
        assert all(scale.speak_count_when_one for scale in SCALES if scale is not HUNDRED)

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            HUNDRED.magnitude = 1000  # type: ignore[misc]

    def test_custom_scale(self) -> None:
        scale = Scale(10, "a", "b", "c")
        assert scale.speak_count_when_one
        assert scale.form_for_count(41) == "a"

import pytest

from floodconsequences.crops.cases import CropDamageCase

VALUES_AND_LABELS = [
    (0, "Unassigned"),
    (1, "Impacted"),
    (2, "Not Impacted During Season"),
    (4, "Planting Delayed"),
    (8, "Not Planted"),
    (16, "Substitute Crop"),
]


@pytest.mark.parametrize(
    "case, label",
    [
        (CropDamageCase.UNASSIGNED, "Unassigned"),
        (CropDamageCase.IMPACTED, "Impacted"),
        (CropDamageCase.NOT_IMPACTED_DURING_SEASON, "Not Impacted During Season"),
        (CropDamageCase.PLANTING_DELAYED, "Planting Delayed"),
        (CropDamageCase.NOT_PLANTED, "Not Planted"),
        (CropDamageCase.SUBSTITUTE_CROP, "Substitute Crop"),
    ],
)
def test_string_form(case, label):
    assert str(case) == label
    assert case.label == label
    assert f"{case}" == label


@pytest.mark.parametrize("value, label", VALUES_AND_LABELS)
def test_values_are_fixed_bit_values(value, label):
    case = CropDamageCase(value)
    assert case.label == label
    assert int(case) == value


def test_round_trip_through_int():
    for case in CropDamageCase:
        assert CropDamageCase(int(case)) is case


def test_labels_are_unique():
    labels = [str(CropDamageCase(value)) for value, _ in VALUES_AND_LABELS]
    assert len(set(labels)) == len(VALUES_AND_LABELS)


def test_unknown_value_is_rejected():
    with pytest.raises(ValueError):
        CropDamageCase(3)
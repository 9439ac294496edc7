import json

import pytest

from bytebloom.pests import Pest, PestType


def test_to_dict_uses_variant_names():
    pest = Pest(PestType.SPIDER_MITES, 0.1)
    assert pest.to_dict() == {"pest_type": "SpiderMites", "infestation_level": 0.1}


@pytest.mark.parametrize("pest_type", list(PestType))
def test_round_trip_through_json(pest_type):
    pest = Pest(pest_type, 0.35)
    restored = Pest.from_dict(json.loads(json.dumps(pest.to_dict())))
    assert restored == pest


def test_unknown_pest_type_rejected():
    with pytest.raises(ValueError):
        Pest.from_dict({"pest_type": "Locusts", "infestation_level": 0.1})


def test_missing_field_rejected():
    with pytest.raises(KeyError):
        Pest.from_dict({"pest_type": "Aphids"})


def test_pest_is_mutable():
    pest = Pest(PestType.APHIDS, 0.1)
    pest.infestation_level += 0.05
    assert pest.infestation_level == pytest.approx(0.15)
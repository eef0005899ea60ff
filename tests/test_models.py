"""
Tests for the immutable result records and trait presets.
"""

import dataclasses

import pytest

from punnett_engine import EYE_COLOR, HAIR_TYPE, GeneResult, JointOffspring, InvalidGenotype, PARENT_INPUTS


class TestTrait:
    def test_presets(self):
        assert EYE_COLOR.alleles == ("B", "b")
        assert EYE_COLOR.dominant_trait == "Brown Eyes"
        assert HAIR_TYPE.alleles == ("C", "c")
        assert HAIR_TYPE.recessive_trait == "Straight Hair"

    def test_parent_inputs(self):
        assert PARENT_INPUTS == {
            'eye1': EYE_COLOR, 'eye2': EYE_COLOR,
            'hair1': HAIR_TYPE, 'hair2': HAIR_TYPE,
        }

    def test_to_dict(self):
        data = HAIR_TYPE.to_dict()
        assert data["symbol"] == "C"
        assert data["dominant_allele"] == "C"
        assert data["recessive_allele"] == "c"


class TestGeneResult:
    def test_frozen(self):
        r = GeneResult("Bb", 0.5, "Brown Eyes", 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.probability = 1.0

    def test_flags(self):
        assert GeneResult("Bb", 0.5, "Brown Eyes").is_dominant
        assert not GeneResult("bb", 0.25, "Blue Eyes").is_dominant
        assert GeneResult("bb", 0.25, "Blue Eyes").is_homozygous
        assert not GeneResult("Bb", 0.5, "Brown Eyes").is_homozygous

    def test_to_dict(self):
        assert GeneResult("BB", 0.25, "Brown Eyes", 1).to_dict() == {
            'genotype': "BB",
            'probability': 0.25,
            'phenotype': "Brown Eyes",
            'count': 1,
        }


class TestJointOffspring:
    def test_probability_is_product(self):
        j = JointOffspring(GeneResult("BB", 0.25, "Brown Eyes"), GeneResult("Cc", 0.5, "Curly Hair"))
        assert j.probability == pytest.approx(0.125)
        assert j.to_dict()["genotypes"] == ["BB", "Cc"]


class TestInvalidGenotype:
    def test_is_value_error(self):
        err = InvalidGenotype("Bbb", "too long")
        assert isinstance(err, ValueError)
        assert err.value == "Bbb"
        assert err.reason == "too long"

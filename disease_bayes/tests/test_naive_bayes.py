"""
Training tests: priors, smoothed likelihoods and input validation.
"""

import pytest
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from disease_bayes.exceptions import EmptyTrainingSetError, MalformedRowError
from disease_bayes.ml_models.naive_bayes import NaiveBayesModel, fit


TRAINING_ROWS = [
    ["Flu", "Cough", "Fever", "Headache"],
    ["Cold", "Cough", "Sneezing"],
    ["Cold", "Cough", "Sneezing", "Sore throat"],
    ["Flu", "Fever", "Chills"],
    ["Migraine", "Headache", "Nausea", ""],
    ["Migraine", " Headache ", "Headache"],
]


@pytest.fixture
def model():
    return fit(TRAINING_ROWS)


class TestModelInvariants:

    def test_priors_sum_to_one(self, model):
        assert sum(model.priors.values()) == pytest.approx(1.0, abs=1e-9)

    def test_likelihoods_in_unit_interval(self, model):
        for disease in model.diseases:
            for symptom in model.vocabulary:
                beta = model.likelihood(disease, symptom)
                assert 0 < beta <= 1, f"beta({disease}, {symptom}) = {beta}"

    def test_every_pair_has_a_likelihood(self, model):
        for disease in model.diseases:
            assert set(model.likelihoods[disease]) == set(model.vocabulary)

    def test_unseen_pair_is_smoothed(self, model):
        # Migraine rows: {Headache, Nausea}, {Headache} -> 3 occurrences, 7 symptoms
        assert model.likelihood("Migraine", "Sneezing") == pytest.approx(1 / (3 + 7))

    def test_vocabulary_is_union_of_rows(self, model):
        assert set(model.vocabulary) == {
            "Cough", "Fever", "Headache", "Sneezing", "Sore throat", "Chills", "Nausea"
        }
        assert len(model.vocabulary) == 7

    def test_diseases_in_first_seen_order(self, model):
        assert model.diseases == ("Flu", "Cold", "Migraine")
        assert len(model) == 3
        assert model.n_rows == 6

    def test_mappings_are_read_only(self, model):
        with pytest.raises(TypeError):
            model.priors["Flu"] = 0.5
        with pytest.raises(TypeError):
            model.likelihoods["Flu"]["Cough"] = 0.5


class TestFormula:
    """Exact values for the three-row example."""

    @pytest.fixture
    def small_model(self):
        return fit([["Flu", "Cough", "Fever"], ["Cold", "Cough"], ["Cold", "Cough"]])

    def test_priors(self, small_model):
        assert small_model.prior("Flu") == pytest.approx(1 / 3)
        assert small_model.prior("Cold") == pytest.approx(2 / 3)

    def test_likelihoods(self, small_model):
        # Flu: 2 occurrences + 2 symptoms; Cold: 2 occurrences + 2 symptoms
        assert small_model.likelihood("Flu", "Cough") == 0.5
        assert small_model.likelihood("Flu", "Fever") == 0.5
        assert small_model.likelihood("Cold", "Cough") == 0.75
        assert small_model.likelihood("Cold", "Fever") == 0.25

    def test_denominator_counts_occurrences_not_rows(self):
        model = fit([["Flu", "a", "b", "c"], ["Cold", "a"]])
        # Flu: 3 occurrences in 1 row, vocabulary 3
        assert model.likelihood("Flu", "a") == pytest.approx(2 / 6)
        assert model.likelihood("Cold", "b") == pytest.approx(1 / 4)


class TestEdgeCases:

    def test_single_disease_prior_is_one(self):
        model = fit([["Flu", "Cough", "Fever"]])
        assert dict(model.priors) == {"Flu": 1.0}

    def test_row_without_symptoms_counts_for_prior(self):
        model = fit([["Flu", "Cough"], ["Cold"], ["Cold", "", " "]])
        assert model.prior("Cold") == pytest.approx(2 / 3)
        # Cold has 0 occurrences, vocabulary 1
        assert model.likelihood("Cold", "Cough") == 1.0

    def test_only_empty_rows(self):
        model = fit([["Flu"], ["Cold"]])
        assert len(model.vocabulary) == 0
        assert dict(model.likelihoods["Flu"]) == {}

    def test_duplicate_symptoms_in_row_count_once(self):
        deduped = fit([["Flu", "Cough", "Fever"]])
        repeated = fit([["Flu", "Cough", "Cough", " Fever", "Fever "]])
        assert dict(deduped.likelihoods["Flu"]) == dict(repeated.likelihoods["Flu"])

    def test_empty_training_set(self):
        with pytest.raises(EmptyTrainingSetError):
            fit([])

    def test_empty_training_set_names_source(self):
        with pytest.raises(EmptyTrainingSetError, match="train.csv"):
            fit([], source="train.csv")

    def test_missing_label(self):
        with pytest.raises(MalformedRowError) as exc_info:
            fit([["Flu", "Cough"], ["", "Fever"]])
        assert exc_info.value.row_number == 2

    def test_row_without_cells(self):
        with pytest.raises(MalformedRowError, match="row 1"):
            fit([[]])

    def test_accepts_generators(self):
        model = fit(row for row in [["Flu", "Cough"], ["Cold", "Sneezing"]])
        assert isinstance(model, NaiveBayesModel)
        assert model.diseases == ("Flu", "Cold")

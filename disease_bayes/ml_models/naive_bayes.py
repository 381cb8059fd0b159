"""
Naive Bayes Training Module
Estimates disease priors and Laplace-smoothed symptom likelihoods from
labelled (disease, symptoms) rows.
"""

from collections import Counter
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence, Tuple

from disease_bayes.exceptions import EmptyTrainingSetError, MalformedRowError
from disease_bayes.utils.logger import get_logger, log_training
from disease_bayes.utils.symptom_manager import Vocabulary, split_row

logger = get_logger(__name__)


class NaiveBayesModel:
    """
    A fitted model. Read-only once built.

    priors[d]          = rows labelled d / all rows
    likelihoods[d][s]  = (rows of d containing s + 1) / (symptom occurrences in d's rows + |vocabulary|)

    Diseases keep the order in which they first appear in the training data.
    """

    def __init__(self, priors: Mapping[str, float], likelihoods: Mapping[str, Mapping[str, float]],
                 vocabulary: Vocabulary, n_rows: int):
        self._priors = MappingProxyType(dict(priors))
        self._likelihoods = MappingProxyType(
            {disease: MappingProxyType(dict(betas)) for disease, betas in likelihoods.items()}
        )
        self._vocabulary = vocabulary
        self._n_rows = n_rows

    @property
    def diseases(self) -> Tuple[str, ...]:
        return tuple(self._priors)

    @property
    def priors(self) -> Mapping[str, float]:
        return self._priors

    @property
    def likelihoods(self) -> Mapping[str, Mapping[str, float]]:
        return self._likelihoods

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    @property
    def n_rows(self) -> int:
        return self._n_rows

    def prior(self, disease: str) -> float:
        return self._priors[disease]

    def likelihood(self, disease: str, symptom: str) -> float:
        return self._likelihoods[disease][symptom]

    def __len__(self):
        return len(self._priors)

    def __repr__(self):
        return (f"NaiveBayesModel(diseases={len(self)}, symptoms={len(self._vocabulary)}, "
                f"rows={self._n_rows})")


def group_training_rows(rows: Iterable[Sequence]):
    """
    Validates labelled rows and groups their symptom sets by disease.

    Returns:
        (dict disease -> list of symptom tuples, Vocabulary, number of rows)
    """
    groups = {}
    seen_symptoms = {}
    n_rows = 0

    for row_number, row in enumerate(rows, start=1):
        label, symptoms = split_row(row)
        if label is None or not label.strip():
            raise MalformedRowError(row_number, "missing disease label")

        groups.setdefault(label, []).append(symptoms)
        for symptom in symptoms:
            seen_symptoms.setdefault(symptom, None)
        n_rows += 1

    return groups, Vocabulary(seen_symptoms), n_rows


def fit(rows: Iterable[Sequence], source=None) -> NaiveBayesModel:
    """
    Trains the classifier.

    Args:
        rows: ordered rows of cells; cell 0 is the disease, the rest are symptoms
        source: optional description of where the rows came from (for errors)

    Returns:
        NaiveBayesModel
    """
    groups, vocabulary, n_rows = group_training_rows(rows)
    if n_rows == 0:
        raise EmptyTrainingSetError(source)

    n_symptoms = len(vocabulary)
    priors = {}
    likelihoods = {}

    for disease, instances in groups.items():
        # total symptom occurrences, not row count
        occurrences = sum(len(symptoms) for symptoms in instances)
        denominator = occurrences + n_symptoms

        present = Counter()
        for symptoms in instances:
            present.update(symptoms)

        likelihoods[disease] = {
            symptom: (present[symptom] + 1) / denominator for symptom in vocabulary
        }
        priors[disease] = len(instances) / n_rows

    model = NaiveBayesModel(priors, likelihoods, vocabulary, n_rows)
    log_training(logger, n_rows, len(model), n_symptoms)
    return model

"""
Positional-count model, kept for comparison only.

Symptoms become a boolean vector over the alphabetically sorted vocabulary.
For each disease, P(s | d) is the fraction of that disease's rows in which s is
present, with no smoothing, so a single unseen symptom zeroes the score.
Unknown query symptoms are dropped. Production predictions always come from
NaiveBayesModel; this model only feeds the `compare` command.
"""

from typing import Dict, Iterable, List, Sequence

import numpy as np

from disease_bayes.exceptions import EmptyModelError, EmptyTrainingSetError
from disease_bayes.ml_models.naive_bayes import group_training_rows
from disease_bayes.utils.symptom_manager import normalize_symptoms


class PositionalCountModel:

    def __init__(self):
        self.symptom_order = ()
        self.diseases = []
        self.disease_probs = np.zeros(0)
        self._instances = {}

    def _vector(self, symptoms) -> np.ndarray:
        present = set(symptoms)
        return np.array([s in present for s in self.symptom_order], dtype=bool)

    def fit(self, rows: Iterable[Sequence], source=None) -> "PositionalCountModel":
        groups, vocabulary, n_rows = group_training_rows(rows)
        if n_rows == 0:
            raise EmptyTrainingSetError(source)

        self.symptom_order = vocabulary.sorted()
        self.diseases = list(groups)
        self._instances = {
            disease: np.array([self._vector(s) for s in instances], dtype=bool).reshape(
                len(instances), len(self.symptom_order))
            for disease, instances in groups.items()
        }
        counts = np.array([len(groups[d]) for d in self.diseases], dtype=float)
        self.disease_probs = counts / counts.sum()
        return self

    def scores(self, symptoms: Iterable) -> Dict[str, float]:
        query = self._vector(normalize_symptoms(symptoms))
        results = {}
        for disease, prior in zip(self.diseases, self.disease_probs):
            instances = self._instances[disease]
            # rows of d that have each queried symptom
            counts = instances[:, query].sum(axis=0)
            results[disease] = float(np.prod(counts / len(instances)) * prior)
        return results

    def predict_one(self, symptoms: Iterable) -> str:
        if not self.diseases:
            raise EmptyModelError()

        best_disease, best_score = None, -1.0
        for disease, score in self.scores(symptoms).items():
            if score > best_score:
                best_disease, best_score = disease, score
        return best_disease

    def predict_batch(self, rows: Iterable[Sequence]) -> List[str]:
        return [self.predict_one(row[1:]) for row in rows]

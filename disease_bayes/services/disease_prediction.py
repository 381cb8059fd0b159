from typing import Dict, Iterable, List, Sequence

from disease_bayes.config import UNKNOWN_SYMPTOM_POLICIES, RunConfig
from disease_bayes.exceptions import EmptyModelError, UnknownSymptomError
from disease_bayes.ml_models import naive_bayes
from disease_bayes.ml_models.naive_bayes import NaiveBayesModel
from disease_bayes.utils.dataset import read_rows, write_predictions
from disease_bayes.utils.logger import get_logger, log_prediction_batch
from disease_bayes.utils.symptom_manager import normalize_symptoms

logger = get_logger(__name__)


class DiseasePredictor:
    """
    Maximum-a-posteriori disease picker over a fitted NaiveBayesModel.

    unknown_symptoms:
        "raise"  - a query symptom outside the vocabulary is an error
        "ignore" - such symptoms are dropped (treated as zero evidence)
    """

    def __init__(self, model: NaiveBayesModel, unknown_symptoms: str = "raise"):
        if unknown_symptoms not in UNKNOWN_SYMPTOM_POLICIES:
            raise ValueError(f"unknown_symptoms must be one of {UNKNOWN_SYMPTOM_POLICIES}, got {unknown_symptoms!r}")
        self.model = model
        self.unknown_symptoms = unknown_symptoms

    def prepare(self, cells: Iterable, row_number=None) -> tuple:
        """Normalizes query symptoms and applies the unknown-symptom policy."""
        symptoms = normalize_symptoms(cells)
        unknown = self.model.vocabulary.unknown(symptoms)
        if not unknown:
            return symptoms

        if self.unknown_symptoms == "raise":
            raise UnknownSymptomError(unknown, row_number)

        where = f" in row {row_number}" if row_number is not None else ""
        logger.warning(f"Ignoring unknown symptom(s){where}: {', '.join(unknown)}")
        return tuple(s for s in symptoms if s not in unknown)

    def scores(self, symptoms: Iterable) -> Dict[str, float]:
        """
        Unnormalized posterior for every disease:
        prior(d) * product of likelihood(d, s) over the query symptoms.
        """
        symptoms = self.prepare(symptoms)
        return self._scores(symptoms)

    def _scores(self, symptoms: tuple) -> Dict[str, float]:
        results = {}
        for disease, betas in self.model.likelihoods.items():
            product = 1.0
            for symptom in symptoms:
                product *= betas[symptom]
            results[disease] = self.model.prior(disease) * product
        return results

    def _best(self, symptoms: tuple) -> str:
        if len(self.model) == 0:
            raise EmptyModelError()

        # -1.0 so the first disease wins even if every score underflows to 0.0
        best_disease, best_score = None, -1.0
        for disease, score in self._scores(symptoms).items():
            if score > best_score:
                best_disease, best_score = disease, score
        return best_disease

    def predict_one(self, symptoms: Iterable) -> str:
        """
        Most likely disease for one set of symptoms.
        Ties keep the disease that appeared first in the training data.
        """
        return self._best(self.prepare(symptoms))

    def predict_batch(self, rows: Iterable[Sequence]) -> List[str]:
        """
        Predicts every query row. Cell 0 is a label slot and is not read.

        Every row is validated before any prediction is made, so an unknown
        symptom aborts the whole batch.
        """
        if len(self.model) == 0:
            raise EmptyModelError()

        prepared = [self.prepare(row[1:], row_number) for row_number, row in enumerate(rows, start=1)]
        return [self._best(symptoms) for symptoms in prepared]


class DiseasePredictionOrchestrator:
    """
    Runs the batch job: train file -> model -> test file -> predictions -> output file.
    The model lives only as long as the orchestrator.
    """

    def __init__(self, config: RunConfig = None):
        self.config = config or RunConfig()
        self.model = None
        self.predictor = None

    def load_resources(self) -> NaiveBayesModel:
        """Fits the model from the training file."""
        train_path = self.config.train_path
        logger.info(f"Training from {train_path}")

        rows = read_rows(train_path, has_header=self.config.has_header)
        self.model = naive_bayes.fit(rows, source=str(train_path))
        self.predictor = DiseasePredictor(self.model, unknown_symptoms=self.config.unknown_symptoms)
        return self.model

    def predict_file(self, path=None) -> List[str]:
        """Predicts every row of a query file (defaults to the configured test file)."""
        if self.predictor is None:
            self.load_resources()

        path = path or self.config.test_path
        rows = read_rows(path, has_header=self.config.has_header)
        return self.predictor.predict_batch(rows)

    def run(self) -> List[str]:
        """Full pipeline. Returns the predicted labels in query order."""
        self.load_resources()
        labels = self.predict_file()

        written = write_predictions(self.config.output_path, labels)
        log_prediction_batch(logger, written, str(self.config.output_path))
        return labels

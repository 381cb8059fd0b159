"""
Evaluation Module
Scores predictions against the label column of a labelled query file, and
measures how often the positional-count model disagrees with the main model.
"""

from sklearn.metrics import accuracy_score, classification_report

from disease_bayes.exceptions import MalformedRowError
from disease_bayes.ml_models.ablation import PositionalCountModel
from disease_bayes.services.disease_prediction import DiseasePredictionOrchestrator
from disease_bayes.utils.dataset import read_rows
from disease_bayes.utils.logger import get_logger, log_evaluation
from disease_bayes.utils.symptom_manager import split_row

logger = get_logger(__name__)


def _true_labels(rows):
    labels = []
    for row_number, row in enumerate(rows, start=1):
        label, _ = split_row(row)
        if label is None or not label.strip():
            raise MalformedRowError(row_number, "missing disease label")
        labels.append(label)
    return labels


def evaluate(orchestrator: DiseasePredictionOrchestrator, path=None):
    """
    Compares predictions with the labels already present in a query file.

    Returns:
        dict with accuracy, sample count and the per-disease text report
    """
    if orchestrator.predictor is None:
        orchestrator.load_resources()

    path = path or orchestrator.config.test_path
    rows = read_rows(path, has_header=orchestrator.config.has_header)
    y_true = _true_labels(rows)
    y_pred = orchestrator.predictor.predict_batch(rows)

    if not y_true:
        logger.warning(f"No labelled rows in {path}")
        return {"accuracy": 0.0, "n_samples": 0, "report": ""}

    accuracy = accuracy_score(y_true, y_pred)
    report = classification_report(y_true, y_pred, zero_division=0)
    log_evaluation(logger, accuracy, len(y_true), len(orchestrator.model))

    return {"accuracy": accuracy, "n_samples": len(y_true), "report": report}


def compare_with_positional(orchestrator: DiseasePredictionOrchestrator, path=None):
    """
    Runs the smoothed model and the positional-count model on the same query
    file and lists the rows where they pick different diseases.

    Returns:
        dict with n_samples, n_disagreements and a list of
        (row id, smoothed label, positional label) tuples
    """
    config = orchestrator.config
    if orchestrator.predictor is None:
        orchestrator.load_resources()

    train_rows = read_rows(config.train_path, has_header=config.has_header)
    positional = PositionalCountModel().fit(train_rows, source=str(config.train_path))

    path = path or config.test_path
    rows = read_rows(path, has_header=config.has_header)
    smoothed_labels = orchestrator.predictor.predict_batch(rows)
    positional_labels = positional.predict_batch(rows)

    disagreements = [
        (row_id, a, b)
        for row_id, (a, b) in enumerate(zip(smoothed_labels, positional_labels), start=1)
        if a != b
    ]
    logger.info(f"COMPARE | Rows: {len(rows)} | Disagreements: {len(disagreements)}")

    return {"n_samples": len(rows), "n_disagreements": len(disagreements), "disagreements": disagreements}

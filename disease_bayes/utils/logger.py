"""
Centralized Logging Module
Provides consistent logging configuration across the classifier.

Records always go to stdout. Setting LOG_DIR also writes them to a daily
file in that directory.
"""

import logging
import sys
import os
from datetime import datetime

# Log directory; file logging is off unless LOG_DIR is set
LOG_DIR = os.getenv('LOG_DIR')

# Log format
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Log level from environment (default: INFO)
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()


def get_logger(name: str, level: str = None) -> logging.Logger:
    """
    Creates and returns a configured logger.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Configured Logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    logger.setLevel(log_level)

    # Console Handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(console_handler)

    if not LOG_DIR:
        return logger

    # File Handler (one file per day)
    try:
        os.makedirs(LOG_DIR, exist_ok=True)
        log_file = os.path.join(LOG_DIR, f"disease_bayes_{datetime.now().strftime('%Y%m%d')}.log")
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(file_handler)
    except OSError as e:
        # File logging optional - don't fail if we can't write
        logger.warning(f"Could not set up file logging: {e}")

    return logger


def log_training(logger: logging.Logger, n_rows: int, n_diseases: int, n_symptoms: int):
    """
    Structured logging for a model fit.

    Args:
        logger: Logger instance
        n_rows: Number of training rows
        n_diseases: Number of distinct diseases
        n_symptoms: Vocabulary size
    """
    logger.info(
        f"TRAIN | "
        f"Rows: {n_rows} | "
        f"Diseases: {n_diseases} | "
        f"Symptoms: {n_symptoms}"
    )


def log_prediction_batch(logger: logging.Logger, n_rows: int, output_path: str):
    """
    Structured logging for a batch of predictions written to disk.

    Args:
        logger: Logger instance
        n_rows: Number of query rows predicted
        output_path: Where the predictions were written
    """
    logger.info(
        f"PREDICTION | "
        f"Rows: {n_rows} | "
        f"Output: {output_path}"
    )


def log_evaluation(logger: logging.Logger, accuracy: float, n_samples: int, n_diseases: int):
    """
    Structured logging for an evaluation against a labelled file.

    Args:
        logger: Logger instance
        accuracy: Fraction of rows predicted correctly
        n_samples: Number of evaluated rows
        n_diseases: Number of diseases known to the model
    """
    logger.info(
        f"EVALUATE | "
        f"Accuracy: {accuracy:.4f} | "
        f"Samples: {n_samples} | "
        f"Diseases: {n_diseases}"
    )

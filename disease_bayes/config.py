import os
from pathlib import Path
from typing import Literal, get_args

from pydantic import BaseModel

# Paths
BASE_DIR = os.path.dirname(os.path.abspath(__file__))  # disease_bayes/
PROJECT_ROOT = os.path.dirname(BASE_DIR)
DATA_DIR = os.path.join(PROJECT_ROOT, "data")

TRAIN_PATH = os.path.join(DATA_DIR, "train.csv")
TEST_PATH = os.path.join(DATA_DIR, "test.csv")
OUTPUT_PATH = os.path.join(DATA_DIR, "result.csv")

OUTPUT_HEADER = ("ID", "Disease")

# What to do with a query symptom that never appeared in training
UnknownSymptomPolicy = Literal["raise", "ignore"]
UNKNOWN_SYMPTOM_POLICIES = get_args(UnknownSymptomPolicy)


class RunConfig(BaseModel):
    """Everything one batch run needs: the three file paths and the input policies."""

    train_path: Path = Path(TRAIN_PATH)
    test_path: Path = Path(TEST_PATH)
    output_path: Path = Path(OUTPUT_PATH)
    has_header: bool = True
    unknown_symptoms: UnknownSymptomPolicy = "raise"

"""
Error kinds raised by the classifier.
Every one of them is terminal for the run it occurs in.
"""


class DiseaseBayesError(Exception):
    """Base class for all classifier errors."""


class MalformedRowError(DiseaseBayesError, ValueError):
    """A row is missing a required cell or cannot be parsed."""

    def __init__(self, row_number, reason):
        self.row_number = row_number
        self.reason = reason
        where = f" {row_number}" if row_number is not None else ""
        super().__init__(f"Malformed row{where}: {reason}")


class EmptyTrainingSetError(DiseaseBayesError, ValueError):
    """No training rows were supplied, so no priors can be computed."""

    def __init__(self, source=None):
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"No training rows found{where}")


class UnknownSymptomError(DiseaseBayesError, KeyError):
    """A query symptom has no entry in the trained vocabulary."""

    def __init__(self, symptoms, row_number=None):
        self.symptoms = tuple(symptoms)
        self.row_number = row_number
        where = f" in query row {row_number}" if row_number is not None else ""
        super().__init__(f"Unknown symptom(s){where}: {', '.join(self.symptoms)}")

    def __str__(self):
        # KeyError would repr() the message
        return self.args[0]


class EmptyModelError(DiseaseBayesError, RuntimeError):
    """Prediction was requested from a model that knows no diseases."""

    def __init__(self):
        super().__init__("Model has no diseases; nothing to predict")


class DatasetIOError(DiseaseBayesError, OSError):
    """A data file could not be opened, read or written."""

    def __init__(self, path, cause):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Could not access {self.path}: {cause}")

    def __str__(self):
        # OSError formats multi-arg messages as "[Errno ...]"
        return self.args[0]

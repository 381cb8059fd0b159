import argparse
import sys
from pathlib import Path

from disease_bayes.config import OUTPUT_PATH, TEST_PATH, TRAIN_PATH, UNKNOWN_SYMPTOM_POLICIES, RunConfig
from disease_bayes.exceptions import DiseaseBayesError
from disease_bayes.services.disease_prediction import DiseasePredictionOrchestrator
from disease_bayes.services.evaluation import compare_with_positional, evaluate
from disease_bayes.utils.logger import get_logger

logger = get_logger("disease_bayes.main")

COMMANDS = ("predict", "evaluate", "compare")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="disease-bayes",
        description="Naive Bayes disease classifier: train on a symptom table, predict another.",
    )
    parser.add_argument("command", nargs="?", default="predict", choices=COMMANDS,
                        help="predict (default), evaluate against the test labels, or compare with the positional-count model")
    parser.add_argument("--train", type=Path, default=Path(TRAIN_PATH), help="labelled training CSV")
    parser.add_argument("--test", type=Path, default=Path(TEST_PATH), help="query CSV")
    parser.add_argument("--output", type=Path, default=Path(OUTPUT_PATH), help="where to write ID,Disease")
    parser.add_argument("--no-header", dest="has_header", action="store_false",
                        help="input files have no header line")
    parser.add_argument("--unknown-symptoms", choices=UNKNOWN_SYMPTOM_POLICIES, default="raise",
                        help="what to do with query symptoms never seen in training")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = RunConfig(
        train_path=args.train,
        test_path=args.test,
        output_path=args.output,
        has_header=args.has_header,
        unknown_symptoms=args.unknown_symptoms,
    )
    orchestrator = DiseasePredictionOrchestrator(config)

    try:
        if args.command == "predict":
            labels = orchestrator.run()
            print(f"Done. {len(labels)} predictions written to {config.output_path}")

        elif args.command == "evaluate":
            results = evaluate(orchestrator)
            print(f"\nResults on {config.test_path}:")
            print(f"accuracy: {results['accuracy']:.4f}")
            print(f"n_samples: {results['n_samples']}")
            print(results["report"])

        else:
            results = compare_with_positional(orchestrator)
            print(f"\nSmoothed vs positional-count on {config.test_path}:")
            print(f"n_samples: {results['n_samples']}")
            print(f"n_disagreements: {results['n_disagreements']}")
            for row_id, smoothed, positional in results["disagreements"]:
                print(f"  {row_id}: {smoothed} != {positional}")

    except DiseaseBayesError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

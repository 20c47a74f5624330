from skate.evaluation.evaluator import evaluate, parse_and_evaluate

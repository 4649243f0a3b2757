"""
Command-line interface for scoring a recorded drawing
"""

import argparse
import json
import logging
import random
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from contour_sketch.config import load_config
from contour_sketch.exceptions import InvalidSequenceError
from contour_sketch.patterns.pattern_library import generate_patterns, get_pattern, select_reference
from contour_sketch.preprocessing.trace_preprocessor import TracePreprocessor, normalize_array
from contour_sketch.scoring.score_calculator import ScoreCalculator
from contour_sketch.utils.performance_tracker import PerformanceTracker


def setup_logging(verbose: bool = False):
    """Configure logging for CLI output"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(levelname)s:%(name)s:%(message)s'
    )


def load_trace(trace_file: str) -> Tuple[List[float], Optional[float]]:
    """Read raw samples from a JSON file

    The file holds either a plain list of samples or an object with a
    "samples" list and an optional "axis_extent".

    Returns:
        Tuple of (samples, axis_extent or None)
    """
    with open(trace_file, 'r') as f:
        data = json.load(f)

    if isinstance(data, list):
        return data, None
    if isinstance(data, dict) and isinstance(data.get("samples"), list):
        return data["samples"], data.get("axis_extent")
    raise InvalidSequenceError(f"{trace_file} must contain a list of samples or a 'samples' list")


def score_trace(samples: List[float], *, pattern_name: Optional[str] = None,
                seed: Optional[int] = None, config: Optional[Dict[str, Any]] = None,
                plot_file: Optional[str] = None) -> dict:
    """Score raw samples against a reference pattern

    Args:
        samples: Raw vertical samples of one gesture
        pattern_name: Reference pattern to use (random when None)
        seed: Seed for the random selection
        config: Configuration dict, merged over the defaults
        plot_file: Optional path for a DTW alignment plot

    Returns:
        Dictionary containing the pattern name, scores and verdict
    """
    config = load_config(overrides=config)
    perf_tracker = PerformanceTracker(name="cli")
    catalog = generate_patterns()

    if pattern_name:
        pattern = get_pattern(catalog, pattern_name)
    else:
        pattern = select_reference(catalog, random.Random(seed))
    logging.info(f"Reference pattern: {pattern.name}")

    preprocessor = TracePreprocessor(config["preprocessing"])
    calculator = ScoreCalculator(
        threshold=config["scoring"]["threshold"],
        epsilon=config["scoring"]["epsilon"]
    )

    with perf_tracker.track_stage("Preprocess Trace"):
        candidate = preprocessor.process(samples, target_length=len(pattern))

    with perf_tracker.track_stage("Score Drawing"):
        result, alignment = calculator.calculate_with_alignment(pattern.contour, candidate)

    if plot_file:
        from contour_sketch.visualization.alignment_plot import plot_alignment

        with perf_tracker.track_stage("Plot Alignment"):
            plot_alignment(normalize_array(pattern.contour), candidate, alignment, plot_file)

    perf_tracker.log_summary()

    return {
        'pattern': pattern.name,
        'scores': result.to_dict(),
        'verdict': result.verdict_text()
    }


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Score a drawn contour against a reference melody')
    parser.add_argument('--trace', help='JSON file with the raw trace samples')
    parser.add_argument('--pattern', help='Reference pattern name (random if omitted)')
    parser.add_argument('--seed', type=int, help='Seed for random pattern selection')
    parser.add_argument('--config', help='YAML configuration overrides')
    parser.add_argument('--output', help='Output file for JSON results')
    parser.add_argument('--plot', help='Save a DTW alignment plot to this file')
    parser.add_argument('--list-patterns', action='store_true', help='List reference patterns and exit')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)
    if not args.list_patterns and not args.trace:
        parser.error('--trace is required unless --list-patterns is given')
    return args


def main(argv=None):
    args = parse_args(argv)

    setup_logging(args.verbose)

    if args.list_patterns:
        for name, pattern in generate_patterns().items():
            print(f"{name}: {', '.join(f'{v:g}' for v in pattern.contour)}")
        return 0

    logging.info("Starting CLI scoring")
    logging.info(f"Trace file: {args.trace}")

    try:
        trace_path = Path(args.trace)
        if not trace_path.exists():
            raise FileNotFoundError(f"Trace file not found: {args.trace}")

        config = load_config(args.config)
        if args.plot:
            import matplotlib
            matplotlib.use("Agg")

        samples, axis_extent = load_trace(trace_path)
        if axis_extent is not None:
            config["preprocessing"]["axis_extent"] = axis_extent

        results = score_trace(
            samples,
            pattern_name=args.pattern,
            seed=args.seed,
            config=config,
            plot_file=args.plot
        )

        if args.output:
            with open(args.output, 'w') as f:
                json.dump(results, f, indent=2)
        else:
            print(json.dumps(results, indent=2, ensure_ascii=False))

        logging.info("Scoring complete")
        return 0

    except Exception as e:
        logging.error(f"Error: {e}")
        logging.exception("Full traceback:")
        raise SystemExit(1)


if __name__ == '__main__':
    main()

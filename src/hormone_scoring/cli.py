"""Command-line interface for scoring hormone timepoints."""

from __future__ import annotations
import argparse
from pathlib import Path

from .io.config_reader import load_config, parse_weight_override
from .io.measurement_reader import read_timepoints
from .core.history import TimepointHistory, trend_direction
from .report.output_writer import build_report_rows, write_results_csv, write_results_excel
from .utils import setup_logging, get_logger


def build_history(timepoints_file: Path, config_dir: Path | None, overrides: list[str]) -> TimepointHistory:
    """Load configuration and measurements into a history ready for scoring."""
    config = load_config(config_dir)
    history = TimepointHistory(config.reference_ranges, config.weights)

    for override in overrides:
        sub_score, key, weight = parse_weight_override(override)
        history.set_weight(sub_score, key, weight)

    for snapshot in read_timepoints(timepoints_file):
        history.append_snapshot(snapshot)

    return history


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Score hormone measurements into menstrual and adrenal composites across timepoints.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        'timepoints_file',
        type=str,
        help='Path to timepoint measurements (.yaml or .xlsx)'
    )
    parser.add_argument(
        '-c', '--config-dir',
        type=str,
        default=None,
        help='Directory with weights.yaml and reference_ranges.yaml (default: packaged configs)'
    )
    parser.add_argument(
        '-o', '--output',
        type=str,
        default='output/hormone_scores.csv',
        help='Output file path (.csv or .xlsx)'
    )
    parser.add_argument(
        '-w', '--weight',
        action='append',
        default=[],
        metavar='SUB_SCORE.INPUT=WEIGHT',
        help='Override one sub-score input weight (repeatable)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show engine debug logs (per-snapshot composites, weight changes)'
    )

    args = parser.parse_args(argv)

    setup_logging({'level': 'INFO'}, verbose=args.verbose)
    log = get_logger(__name__)

    timepoints_file = Path(args.timepoints_file)
    config_dir = Path(args.config_dir) if args.config_dir else None
    output_path = Path(args.output)

    try:
        history = build_history(timepoints_file, config_dir, args.weight)

        series = history.recompute_series()
        for label, menstrual, adrenal in zip(series.labels, series.menstrual, series.adrenal):
            log.info("%s: menstrual=%d adrenal=%d", label, menstrual, adrenal)

        delta = history.delta()
        if delta is not None:
            log.info(
                "Change vs %s: menstrual %+.1f (%s), adrenal %+.1f (%s)",
                history.previous.label,
                delta.menstrual, trend_direction(delta.menstrual),
                delta.adrenal, trend_direction(delta.adrenal),
            )

        results = build_report_rows(history.snapshots, history.weights, history.reference_ranges)
        if output_path.suffix == '.xlsx':
            write_results_excel(results, output_path)
        else:
            write_results_csv(results, output_path)
    except Exception as e:
        log.exception("Scoring failed: %s", e)
        return 1

    return 0


if __name__ == '__main__':
    raise SystemExit(main())

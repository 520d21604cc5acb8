"""
Command-line runner for the career simulator.

Usage:
    python -m careersim.run --session session.yaml
    python -m careersim.run --sessions-csv sessions.csv --output summary.csv

Single-session mode prints (or writes) the simulation result as JSON.
Batch mode writes one summary row per session and logs a batch report.

Steps:
1. Load and validate configuration
2. Load session(s)
3. Simulate (preference vector -> projected profile -> predictions)
4. Write results
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Any, Optional

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "configs/config.yaml"


def setup_logging(log_level: str) -> None:
    """Configure logging level from config."""
    level = getattr(logging, str(log_level).upper(), logging.INFO)
    logging.getLogger().setLevel(level)


def _load_run_config(config_path: Optional[str]) -> Dict[str, Any]:
    from .configs import load_config, validate_config

    if config_path is None:
        return {}
    if config_path == DEFAULT_CONFIG_PATH and not Path(config_path).exists():
        logger.info(f"No configuration at {config_path}; using built-in defaults")
        return {}

    config = load_config(config_path)
    for issue in validate_config(config):
        logger.warning(f"Config issue: {issue}")
    return config


def run_simulation(
    config_path: Optional[str] = DEFAULT_CONFIG_PATH,
    session_path: Optional[str] = None,
    sessions_csv: Optional[str] = None,
    output_path: Optional[str] = None,
    log_level: Optional[str] = None
) -> Dict[str, Any]:
    """
    Run the simulator for one session file or a CSV batch.

    Args:
        config_path: Path to the configuration YAML file
        session_path: Path to a single session (YAML/JSON)
        sessions_csv: Path to a CSV batch of sessions
        output_path: Where to write the result (JSON for a session,
            CSV for a batch); printed to stdout when omitted
        log_level: Overrides global.log_level from the config

    Returns:
        Dictionary with "success" and the produced result(s)
    """
    from .configs import get_config_value
    from .data_loading import load_session, load_sessions_csv
    from .evaluation import create_batch_report, summarize_results
    from .inference import CareerSimulator

    if (session_path is None) == (sessions_csv is None):
        raise ValueError("Provide exactly one of session_path or sessions_csv")

    config = _load_run_config(config_path)
    setup_logging(log_level or get_config_value(config, "global.log_level", "INFO"))

    simulator = CareerSimulator.from_config(config)

    if session_path is not None:
        state = load_session(session_path)
        result = simulator.simulate(state)
        if result is None:
            logger.error("Industry and company size must both be selected before simulating")
            return {"success": False, "result": None}

        payload = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
        if output_path:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(payload)
            logger.info(f"Saved result to {output_path}")
        else:
            print(payload)

        logger.info(
            f"Predicted salary {result.predicted_salary}万円 (goal {result.goals.salary_goal}), "
            f"overtime {result.predicted_overtime}h/month (goal {result.goals.overtime_goal})"
        )
        return {"success": True, "result": result}

    states = load_sessions_csv(sessions_csv)
    results = simulator.simulate_batch(states)
    summary = summarize_results(results)
    report = create_batch_report(results)

    if output_path:
        summary.to_csv(output_path, index=False)
        logger.info(f"Saved {len(summary)} rows to {output_path}")
    else:
        print(summary.to_csv(index=False))

    for line in report.summary().splitlines():
        logger.info(line)

    return {"success": report.n_scored > 0, "results": results, "report": report}


def main(argv=None):
    """Main entry point for the simulator."""
    parser = argparse.ArgumentParser(
        description="Simulate a third-year career profile from questionnaire answers"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--session",
        type=str,
        help="Path to a session file (YAML or JSON)"
    )
    source.add_argument(
        "--sessions-csv",
        type=str,
        help="Path to a CSV file with one session per row"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file (JSON for --session, CSV for --sessions-csv)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (overrides config)"
    )

    args = parser.parse_args(argv)

    try:
        result = run_simulation(
            config_path=args.config,
            session_path=args.session,
            sessions_csv=args.sessions_csv,
            output_path=args.output,
            log_level=args.log_level
        )
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Simulation failed: {e}")
        return 1

    return 0 if result["success"] else 1


if __name__ == "__main__":
    sys.exit(main())

"""Simple entrypoint to run the coverage evaluation scenarios locally."""

import json

from coverage_app.config import CoverageConfig
from coverage_app.logging_config import configure_logging
from evaluation.harness import run_scenario, run_smoke_checks
from evaluation.scenarios import SCENARIOS


def main() -> None:
    config = CoverageConfig.from_env()
    configure_logging(config.log_level)
    for line in run_smoke_checks():
        print(line)
    report = run_scenario(SCENARIOS[-1], config=config)["report"]
    print(json.dumps(report.to_dict()["summary"], indent=2))


if __name__ == "__main__":
    main()

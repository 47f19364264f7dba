"""Entry point for running the translator as a GitHub Actions step."""

import json
import logging
import os
import sys
from pathlib import Path

from issue_translator.config import log_level_from_env
from issue_translator.handler import dispatch_event, route_event
from issue_translator.infrastructure import DependenciesContainer

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging to stdout, where the runner collects it."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def load_payload(event_path: str) -> dict:
    """Read the webhook payload the runner wrote to GITHUB_EVENT_PATH."""
    if not event_path:
        return {}
    with open(Path(event_path), encoding="utf-8") as f:
        return json.load(f)


def escape_command_data(message: str) -> str:
    """Escape a message for a workflow command so it keeps every line."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def report_failure(error: Exception) -> None:
    """Log the error and mark the step as failed in the Actions UI."""
    logger.exception("Translation failed: %s", error)
    print(f"::error::{escape_command_data(str(error))}", flush=True)


def run(
    event_name: str,
    payload: dict,
    container: DependenciesContainer | None = None,
) -> int:
    """Translate one event. Returns the process exit code."""
    logger.debug("Event payload: %s", json.dumps(payload, indent=2))

    try:
        # Reject unknown events before any client is created
        route_event(event_name, payload)

        container = container or DependenciesContainer()
        result = dispatch_event(
            event_name,
            payload,
            translator=container.text_translator(),
            formatter=container.annotation_formatter(),
            github_client=container.github_client(),
        )
    except Exception as e:
        report_failure(e)
        return 1

    logger.info("Done: %s", result.model_dump())
    return 0


def main() -> None:
    """Main entry point."""
    setup_logging(log_level_from_env())

    event_name = os.getenv("GITHUB_EVENT_NAME", "")
    try:
        payload = load_payload(os.getenv("GITHUB_EVENT_PATH", ""))
    except (OSError, ValueError) as e:
        report_failure(e)
        sys.exit(1)

    sys.exit(run(event_name, payload))


if __name__ == "__main__":
    main()

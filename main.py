import argparse
import logging

from bmvsbot.config import load_settings, with_overrides
from bmvsbot.worker import run_check_once


def _setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="BMVS earliest appointment finder")
    parser.add_argument("--suburb", help="Suburb or postcode to search (overrides SUB)")
    parser.add_argument("--state", help="State code, e.g. NSW (overrides STATE)")
    parser.add_argument("--show-browser", action="store_true", help="Run Chrome with a visible window")
    args = parser.parse_args()

    _setup_logging()
    logger = logging.getLogger(__name__)

    try:
        settings = with_overrides(
            load_settings(),
            suburb=args.suburb,
            state=args.state,
            show_browser=args.show_browser,
        )
        run_check_once(settings)
        return 0

    except Exception as e:
        logger.error("BMVS check did not complete (%s: %s)", type(e).__name__, e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

# dayplanner/__main__.py

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config import DEBUG_LOG_FILE, Settings
from .context import PlannerContext
from .persistence import JsonFileProvider
from .planner_app import PlannerApp


def setup_logging(release: bool, log_dir: Path) -> None:
    """Debug log goes to a file; overwritten each run unless --release."""
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_dir / DEBUG_LOG_FILE),
        filemode='a' if release else 'w',
        level=logging.INFO if release else logging.DEBUG,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def parse_args(argv: Optional[List[str]] = None) -> Settings:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(prog="dayplanner", description="Terminal day planner")
    parser.add_argument("--data-dir", type=Path, default=settings.data_dir,
                        help="Directory holding the saved schedule, inbox and logs")
    parser.add_argument("--release", action="store_true", default=settings.release,
                        help="Append to the debug log instead of overwriting it")
    args = parser.parse_args(argv)
    return Settings(data_dir=args.data_dir, release=args.release)


def main(argv: Optional[List[str]] = None) -> None:
    settings = parse_args(argv)
    setup_logging(settings.release, settings.data_dir)
    logging.getLogger(__name__).debug(f"Starting with data dir {settings.data_dir}")

    context = PlannerContext(JsonFileProvider(settings.data_dir))
    PlannerApp(context).run()


if __name__ == "__main__":
    main()

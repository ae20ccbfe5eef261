#!/usr/bin/env python3
"""Load job postings from a YAML file into the database.

Postings are created outside the listing itself; this script is the
development stand-in for that external process.

Usage:
    python scripts/seed_jobs.py
    python scripts/seed_jobs.py --file scripts/sample_jobs.yaml --database sqlite:///./data/dev.db
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from jobboard.config.environment import load_environment_config
from jobboard.domain.models import JobPosting
from jobboard.logging import get_logger
from jobboard.logging.config import configure_logging
from jobboard.logging.context import log_context
from jobboard.persistence import DataIntegrityError, JobRepository, close_database, get_session, init_database
from jobboard.utils.timestamps import parse_iso_datetime, utc_now

logger = get_logger(__name__, component="seed")


def load_postings(path: Path) -> List[JobPosting]:
    """Parse the YAML fixture file into domain models."""
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    postings = []
    for entry in data.get("jobs", []):
        created_at = entry.get("created_at")
        if isinstance(created_at, str):
            entry["created_at"] = parse_iso_datetime(created_at)
        entry.setdefault("created_at", utc_now())
        postings.append(JobPosting.model_validate(entry))
    return postings


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Seed the job board database")
    parser.add_argument(
        "--file",
        type=Path,
        default=Path(__file__).parent / "sample_jobs.yaml",
        help="YAML file with a top-level 'jobs' list",
    )
    parser.add_argument("--database", default=None, help="Database URL (overrides DATABASE_URL)")
    args = parser.parse_args(argv)

    env_config = load_environment_config()
    configure_logging(level=env_config.log_level or "INFO", environment=env_config.environment)

    try:
        postings = load_postings(args.file)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        print(f"✗ Could not load {args.file}: {e}", file=sys.stderr)
        return 1

    init_database(args.database or env_config.database_url)

    added = skipped = 0
    try:
        with log_context(operation="seed", source_file=str(args.file)):
            for posting in postings:
                try:
                    with get_session() as session:
                        JobRepository(session).add(posting)
                    added += 1
                except DataIntegrityError:
                    skipped += 1
                    logger.info(
                        f"Posting {posting.id} already present",
                        extra={"event": "seed.posting_skipped", "job_id": posting.id},
                    )

            logger.info(
                f"Seeded {added} postings",
                extra={"event": "seed.completed", "added": added, "skipped": skipped},
            )
    finally:
        close_database()

    print(f"✓ Seeded {added} postings ({skipped} already present)")
    return 0


if __name__ == "__main__":
    sys.exit(main())

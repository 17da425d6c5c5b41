#!/usr/bin/env python3
"""
Delete abandoned workout sessions.

A session that was started but never completed stays in the key-value
store until it is older than SESSION_TTL_HOURS (default 24). The API
already deletes a user's expired sessions when they next start a workout;
this script sweeps everyone, e.g. from a daily cron job.

Usage:
    python scripts/expire_abandoned_sessions.py [--dry-run] [--ttl-hours N]

Options:
    --dry-run       Preview deletions without touching the store
    --ttl-hours N   Override SESSION_TTL_HOURS for this run
"""
import os
import sys
import argparse
from datetime import timedelta

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from supabase import create_client

from application.exceptions import StorageError
from application.use_cases import ExpireAbandonedSessionsUseCase
from backend.settings import get_settings
from infrastructure import KVWorkoutSessionRepository, SupabaseKeyValueStore


def get_session_repository():
    """Create the session repository over the configured Supabase project."""
    settings = get_settings()

    if not settings.supabase_url or not settings.supabase_service_role_key:
        print("ERROR: SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        sys.exit(1)

    client = create_client(settings.supabase_url, settings.supabase_service_role_key)
    return KVWorkoutSessionRepository(SupabaseKeyValueStore(client, table=settings.kv_table))


def expire_sessions(dry_run: bool = False, ttl_hours: float = None):
    """
    Delete every session older than the TTL.

    Args:
        dry_run: If True, list expired sessions without deleting
        ttl_hours: TTL in hours; defaults to SESSION_TTL_HOURS
    """
    settings = get_settings()
    ttl = timedelta(hours=ttl_hours) if ttl_hours else settings.session_ttl

    use_case = ExpireAbandonedSessionsUseCase(get_session_repository(), ttl)
    try:
        result = use_case.execute(dry_run=dry_run)
    except StorageError as e:
        print(f"ERROR: sweep failed: {e}")
        sys.exit(1)

    for session_id in result.expired_session_ids:
        prefix = "[DRY RUN] Would delete" if dry_run else "Deleted"
        print(f"  {prefix} {session_id}")

    print()
    print("=" * 50)
    print("Sweep complete:")
    print(f"  Sessions scanned: {result.scanned}")
    if dry_run:
        print(f"  Would expire: {len(result.expired_session_ids)}")
    else:
        print(f"  Expired: {len(result.expired_session_ids)}")


def main():
    parser = argparse.ArgumentParser(
        description="Delete workout sessions older than the session TTL"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview deletions without updating the store"
    )
    parser.add_argument(
        "--ttl-hours",
        type=float,
        help="Override SESSION_TTL_HOURS"
    )

    args = parser.parse_args()

    print("Expire abandoned workout sessions")
    print("=" * 50)

    if args.dry_run:
        print("DRY RUN MODE - No changes will be made")

    expire_sessions(dry_run=args.dry_run, ttl_hours=args.ttl_hours)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Backfill body-metrics history for profiles saved before history existed.

Older accounts only have the cached latest profile (``user_info_{userId}``)
and no ``user_info_history:{userId}:*`` rows. The API migrates such a
profile lazily on first read; this script does it for every user in one
pass so the migration can be verified and the lazy path eventually retired.

Usage:
    python scripts/backfill_user_info_history.py [--dry-run] [--limit N]

Options:
    --dry-run    Preview changes without updating the store
    --limit N    Process only N profiles (for testing)
"""
import os
import sys
import argparse

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from supabase import create_client

from application.use_cases import ensure_user_info_history
from backend.settings import get_settings
from domain.converters import legacy_profile_to_history_entry
from domain.timestamps import to_iso, utc_now
from infrastructure import KVUserInfoRepository, SupabaseKeyValueStore

LATEST_PREFIX = "user_info_"
HISTORY_MARKER = "user_info_history:"


def get_supabase_client():
    """Create Supabase client with service role key."""
    settings = get_settings()

    if not settings.supabase_url or not settings.supabase_service_role_key:
        print("ERROR: SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        sys.exit(1)

    return create_client(settings.supabase_url, settings.supabase_service_role_key)


def list_latest_profile_keys(supabase, table: str, limit: int = None):
    """Keys of all cached latest profiles (history rows excluded)."""
    query = supabase.table(table) \
        .select("key") \
        .like("key", f"{LATEST_PREFIX}%")

    result = query.execute()
    keys = [
        row["key"]
        for row in result.data or []
        if row["key"].startswith(LATEST_PREFIX) and not row["key"].startswith(HISTORY_MARKER)
    ]
    return keys[:limit] if limit else keys


def backfill_user_info_history(dry_run: bool = False, limit: int = None):
    """
    Create a first history entry for every profile without history.

    Args:
        dry_run: If True, preview changes without updating
        limit: Maximum number of profiles to process
    """
    settings = get_settings()
    supabase = get_supabase_client()
    repo = KVUserInfoRepository(SupabaseKeyValueStore(supabase, table=settings.kv_table))

    keys = list_latest_profile_keys(supabase, settings.kv_table, limit)
    if not keys:
        print("No profiles found")
        return

    print(f"Found {len(keys)} profiles to check")

    migrated_count = 0
    skipped_count = 0
    error_count = 0

    for key in keys:
        user_id = key[len(LATEST_PREFIX):]

        try:
            if repo.list_history(user_id):
                skipped_count += 1
                continue

            now = utc_now()
            if dry_run:
                entry = legacy_profile_to_history_entry(
                    repo.get_latest(user_id), "legacy_preview", to_iso(now)
                )
                if entry is None:
                    print(f"  Skipped {user_id}: profile does not pass validation")
                    skipped_count += 1
                else:
                    print(f"  [DRY RUN] Would migrate {user_id} (recorded {entry.recorded_at})")
                    migrated_count += 1
                continue

            history = ensure_user_info_history(repo, user_id, now)
            if history:
                print(f"  Migrated {user_id} -> {history[0].entry_id}")
                migrated_count += 1
            else:
                print(f"  Skipped {user_id}: profile does not pass validation")
                skipped_count += 1

        except Exception as e:
            error_count += 1
            print(f"  ERROR processing {user_id}: {e}")

    print()
    print("=" * 50)
    print("Backfill complete:")
    print(f"  Total processed: {len(keys)}")
    if dry_run:
        print(f"  Would migrate: {migrated_count}")
    else:
        print(f"  Migrated: {migrated_count}")
    print(f"  Skipped: {skipped_count}")
    print(f"  Errors: {error_count}")


def main():
    parser = argparse.ArgumentParser(
        description="Backfill body-metrics history from legacy profiles"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview changes without updating the store"
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Process only N profiles"
    )

    args = parser.parse_args()

    print("Backfill user info history from legacy profiles")
    print("=" * 50)

    if args.dry_run:
        print("DRY RUN MODE - No changes will be made")

    backfill_user_info_history(dry_run=args.dry_run, limit=args.limit)


if __name__ == "__main__":
    main()

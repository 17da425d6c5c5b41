"""
Domain converters between stored key-value records and domain models.

All converters are pure functions with no side effects; legacy (unversioned)
records are upgraded to the current schema on read.

Examples:
    >>> from domain.converters import session_from_record
    >>> session = session_from_record(raw_record, session_id="user-1_1700000000000")
"""

from domain.converters.record_converters import (
    history_entry_from_record,
    legacy_profile_to_history_entry,
    plan_from_record,
    session_from_record,
    user_info_entry_from_record,
    weight_history_from_record,
)

__all__ = [
    "history_entry_from_record",
    "legacy_profile_to_history_entry",
    "plan_from_record",
    "session_from_record",
    "user_info_entry_from_record",
    "weight_history_from_record",
]

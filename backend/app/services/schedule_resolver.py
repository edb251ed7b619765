"""
Schedule resolver — which program is on air for a station right now.

All schedule math happens in Peru civil time (fixed UTC-5, no DST), whatever
the server locale is. Programs are matched by weekday name and an
[start, end) minutes-since-midnight window that may wrap past midnight.
"""
import logging
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from app.models.program import WEEKDAYS, Program, Weekday, to_minutes

logger = logging.getLogger(__name__)

CIVIL_TZ = timezone(timedelta(hours=-5), "PET")

MINUTES_PER_DAY = 24 * 60
# Late-night programs from yesterday are only considered before this time.
EARLY_MORNING_CUTOFF = 6 * 60


def to_civil_time(now: datetime) -> datetime:
    """Convert an instant to UTC-5. Naive datetimes are taken as UTC."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(CIVIL_TZ)


def weekday_name(moment: datetime) -> Weekday:
    # datetime.weekday() is Monday=0; the enumeration starts on Sunday
    return WEEKDAYS[(moment.weekday() + 1) % 7]


def is_airing(program: Program, minute_of_day: int) -> bool:
    """Whether *program*'s time window contains *minute_of_day* (ignores days)."""
    start = to_minutes(program.start_time)
    end = to_minutes(program.end_time)

    # "HH:00 - 00:00" starting in the afternoon means "until midnight"
    if end == 0 and start >= 12 * 60:
        end = MINUTES_PER_DAY

    if start < end:
        return start <= minute_of_day < end
    if start > end:
        return minute_of_day >= start or minute_of_day < end
    return True  # start == end: 24-hour program


def _spills_into(program: Program, minute_of_day: int) -> bool:
    """Whether a program that started last night is still running this morning."""
    start_hour = to_minutes(program.start_time) // 60
    end = to_minutes(program.end_time)
    return start_hour >= 20 and end // 60 < 12 and minute_of_day < end


def resolve_current_program(
    programs: Sequence[Program], station_id: str, now: datetime
) -> Program | None:
    """
    Find the program on air for *station_id* at *now*.
    The first match in stored order wins; overlapping programs are not ranked.
    Returns None if nothing is scheduled.
    """
    local = to_civil_time(now)
    minute_of_day = local.hour * 60 + local.minute
    today = weekday_name(local)

    station_programs = [p for p in programs if p.station_id == station_id]

    for program in station_programs:
        if today in program.days and is_airing(program, minute_of_day):
            return program

    if minute_of_day < EARLY_MORNING_CUTOFF:
        yesterday = weekday_name(local - timedelta(days=1))
        for program in station_programs:
            if yesterday in program.days and _spills_into(program, minute_of_day):
                logger.debug(
                    "Station %s: %s carried over from %s", station_id, program.name, yesterday.value
                )
                return program

    return None

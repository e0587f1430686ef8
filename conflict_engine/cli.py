# File: conflict_engine/cli.py
"""
Command line entry point.

    conflict-engine layout day.json
    conflict-engine conflicts day.json
    conflict-engine suggest day.json --id 2
    conflict-engine slots day.json --date 2025-11-18 --granularity 30

The input file holds a JSON list of appointments, or an object with an
"appointments" list and an optional "date".
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from conflict_engine.core.config_manager import Config
from conflict_engine.core.engine import CalendarEngine
from conflict_engine.models import (
    Appointment, ConfigurationError, Diagnostic, EngineError, MalformedTimeError,
    DAY_VIEW, WEEK_VIEW, appointment_from_dict,
)
from conflict_engine.utils.logger import setup_logger

logger = setup_logger(__name__)

VIEWS = {'day': DAY_VIEW, 'week': WEEK_VIEW}


def load_appointments(path: Path, diagnostics: Optional[List[Diagnostic]] = None) -> tuple:
    """
    Read (appointments, date) from a JSON file.

    Rows that cannot be turned into an appointment are skipped, logged, and
    appended to `diagnostics` when a list is given.
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    day = None
    if isinstance(data, dict):
        day = data.get('date')
        rows = data.get('appointments', [])
    else:
        rows = data

    appointments: List[Appointment] = []
    for row in rows:
        if day and 'date' not in row:
            row = dict(row, date=day)
        try:
            appointments.append(appointment_from_dict(row))
        except MalformedTimeError as e:
            logger.warning(f"Skipping appointment {e.appointment_id}: {e}")
            if diagnostics is not None:
                diagnostics.append(Diagnostic.from_error(e))
    return appointments, day


def _find(appointments: List[Appointment], raw_id: str) -> Appointment:
    for appointment in appointments:
        if str(appointment.id) == raw_id:
            return appointment
    raise KeyError(raw_id)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='conflict-engine',
        description='Detect and resolve overlapping appointments for one day.',
    )
    parser.add_argument('--config', type=Path, help='Engine config JSON (default: config/engine.json)')
    parser.add_argument('--view', choices=sorted(VIEWS), default='day', help='Timeline scale')

    sub = parser.add_subparsers(dest='command', required=True)

    layout = sub.add_parser('layout', help='Column layout for the day')
    layout.add_argument('file', type=Path)

    conflicts = sub.add_parser('conflicts', help='List conflicted appointments')
    conflicts.add_argument('file', type=Path)

    suggest = sub.add_parser('suggest', help='Alternative times for one appointment')
    suggest.add_argument('file', type=Path)
    suggest.add_argument('--id', required=True, help='Appointment id')

    slots = sub.add_parser('slots', help='Slot availability for the day')
    slots.add_argument('file', type=Path)
    slots.add_argument('--date', help='YYYY-MM-DD (default: date in file)')
    slots.add_argument('--granularity', type=int, help='Slot size in minutes')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        engine = CalendarEngine(Config.load_engine_config(args.config), VIEWS[args.view])
        skipped: List[Diagnostic] = []
        appointments, file_date = load_appointments(args.file, skipped)

        if args.command == 'layout':
            day_layout = engine.layout_day(appointments)
            day_layout.diagnostics = skipped + day_layout.diagnostics
            result = day_layout.to_dict()
        elif args.command == 'conflicts':
            result = [group.to_dict() for group in engine.conflicts(appointments)]
        elif args.command == 'suggest':
            appointment = _find(appointments, args.id)
            result = {
                'appointment_id': appointment.id,
                'suggestions': engine.suggest_times(appointment, appointments),
            }
        else:
            slots = engine.available_slots(args.date or file_date, appointments, args.granularity)
            result = [slot.to_dict() for slot in slots]

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 2
    except FileNotFoundError as e:
        logger.error(f"File not found: {e.filename}")
        return 1
    except KeyError as e:
        logger.error(f"Unknown appointment id: {e}")
        return 1
    except (EngineError, json.JSONDecodeError) as e:
        logger.error(str(e))
        return 1

    print(json.dumps(result, indent=2, default=str))
    return 0


if __name__ == '__main__':
    sys.exit(main())

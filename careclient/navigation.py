"""
Client routing and the voice command vocabulary.
"""
from __future__ import annotations

import re

PAGES = {
    '/': 'Dashboard',
    '/appointments': 'Appointments',
    '/doctors': 'Doctors',
    '/hospitals': 'Hospitals',
    '/medical-records': 'Medical Records',
    '/bring-doctor': 'Bring a Doctor Home',
    '/first-aid': 'First Aid',
    '/diet-routine': 'Diet Routine',
    '/medication-tracker': 'Medication Tracker',
    '/settings': 'Settings',
}

HELP = 'help'
CLOSE_HELP = 'close-help'

# phrases -> route path, or HELP / CLOSE_HELP
VOICE_COMMANDS: list[tuple[tuple[str, ...], str]] = [
    (('Go to home', 'Dashboard', 'Show dashboard'), '/'),
    (('Go to appointments', 'Show appointments', 'Appointments', 'My appointments'), '/appointments'),
    (('Show doctors', 'Find doctors', 'Search doctors', 'Doctors'), '/doctors'),
    (('Show hospitals', 'Find hospitals', 'Search hospitals', 'Hospitals'), '/hospitals'),
    (('Show medical records', 'My records', 'Medical records'), '/medical-records'),
    (('Call doctor', 'Doctor visit', 'Home doctor', 'Book doctor visit'), '/bring-doctor'),
    (('First aid', 'Show first aid', 'First aid guide'), '/first-aid'),
    (('Diet', 'Diet routine', 'Food plan', 'Show diet'), '/diet-routine'),
    (('Medications', 'Show medications', 'My medications', 'Medicine tracker'), '/medication-tracker'),
    (('Settings', 'Open settings', 'Show settings', 'My settings'), '/settings'),
    (('Help', 'What can I say', 'Show commands', 'Available commands'), HELP),
    (('Close help', 'Hide commands', 'Hide help'), CLOSE_HELP),
]


def normalize_phrase(phrase: str) -> str:
    return re.sub(r'\s+', ' ', (phrase or '').strip().lower())


class Router:
    def __init__(self, start: str = '/'):
        if start not in PAGES:
            raise ValueError(f"unknown page: {start}")
        self.current = start
        self.history: list[str] = [start]

    def navigate(self, path: str) -> str:
        if path not in PAGES:
            raise ValueError(f"unknown page: {path}")
        self.current = path
        self.history.append(path)
        return path

    @property
    def title(self) -> str:
        return PAGES[self.current]


class VoiceCommands:
    """Maps recognised phrases to router navigation and the help toggle."""

    def __init__(self, router: Router):
        self.router = router
        self.show_help = False
        self._table = {
            normalize_phrase(p): target for phrases, target in VOICE_COMMANDS for p in phrases
        }

    def handle(self, phrase: str) -> str | None:
        """Run the command for ``phrase``; return its target or ``None`` when unknown."""
        target = self._table.get(normalize_phrase(phrase))
        if target is None:
            return None
        if target == HELP:
            self.show_help = True
        elif target == CLOSE_HELP:
            self.show_help = False
        else:
            self.router.navigate(target)
        return target

    def descriptions(self) -> list[tuple[str, str]]:
        return [(phrases[0], target) for phrases, target in VOICE_COMMANDS]

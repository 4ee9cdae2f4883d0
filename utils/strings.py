"""
Display strings for the fixed keys the UI asks for.

Lookups are opaque to the rest of the application; an unknown key is
returned unchanged so a missing translation shows up as its key.
"""
from typing import Dict

STRINGS: Dict[str, str] = {
    "app-title": "Svger",
    "about": "About",
    "view": "View",
    "welcome": "Welcome to Svger",
}


def tr(key: str) -> str:
    return STRINGS.get(key, key)

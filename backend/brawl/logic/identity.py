"""
Identity resolution for roll events.

Chat lines name players the way the game client displays them: "First Last",
sometimes with the home world glued to the end ("Na'talee RiverspearGilgamesh")
and with arbitrary capitalisation or punctuation. Everything in the engine is
keyed by the identity key produced here.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

# World names that the client appends to cross-world player names.
KNOWN_WORLDS: Final[tuple[str, ...]] = (
    # Aether
    "Adamantoise", "Cactuar", "Faerie", "Gilgamesh", "Jenova", "Midgardsormr", "Sargatanas", "Siren",
    # Primal
    "Behemoth", "Excalibur", "Exodus", "Famfrit", "Hyperion", "Lamia", "Leviathan", "Ultros",
    # Crystal
    "Balmung", "Brynhildr", "Coeurl", "Diabolos", "Goblin", "Malboro", "Mateus", "Zalera",
    # Dynamis
    "Halicarnassus", "Maduin", "Marilith", "Seraph", "Cuchulainn", "Golem", "Kraken", "Rafflesia",
    # Mana
    "Anima", "Asura", "Chocobo", "Hades", "Ixion", "Masamune", "Pandaemonium", "Titan",
    # Meteor
    "Belias", "Mandragora", "Ramuh", "Shinryu", "Unicorn", "Valefor", "Yojimbo", "Zeromus",
    # Gaia
    "Alexander", "Bahamut", "Durandal", "Fenrir", "Ifrit", "Ridill", "Tiamat", "Ultima",
    # Elemental
    "Aegis", "Atomos", "Carbuncle", "Garuda", "Gungnir", "Kujata", "Tonberry", "Typhon",
    # European
    "Cerberus", "Louisoix", "Moogle", "Omega", "Phantom", "Ragnarok", "Raiden", "Spriggan",
    "Shiva", "Twintania", "Lich", "Odin", "Zodiark",
    # Oceanian
    "Bismarck", "Ravana", "Sephirot", "Sophia", "Zurvan",
)  # fmt: skip

_TWO_TOKEN_NAME = re.compile(r"^([A-Za-z'\-]+)\s+([A-Za-z'\-]+)")


def normalize(name: str) -> str:
    """Return the identity key for ``name``: lower-cased, letters and digits only."""
    return "".join(ch for ch in name.lower() if ch.isalnum())


def strip_suffix_token(full_name: str, known_suffixes: Iterable[str] = KNOWN_WORLDS) -> str:
    """
    Remove a world suffix appended to a display name without a separator.

    The first known suffix that ends ``full_name`` (case-insensitive) is cut
    off and the remainder trimmed. Without a known suffix, the first two
    name tokens are kept. Anything else is returned unchanged.
    """
    if not full_name or full_name.isspace():
        return full_name

    for suffix in known_suffixes:
        if suffix and full_name[-len(suffix) :].lower() == suffix.lower():
            return full_name[: -len(suffix)].strip()

    match = _TWO_TOKEN_NAME.match(full_name)
    if match is None:
        return full_name
    return f"{match.group(1)} {match.group(2)}"


def resolve_identity(raw_name: str, known_suffixes: Iterable[str] = KNOWN_WORLDS) -> str:
    """Map a raw chat name to its identity key."""
    return normalize(strip_suffix_token(raw_name.strip(), known_suffixes))

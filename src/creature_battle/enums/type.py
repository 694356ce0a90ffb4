from enum import Enum


class Type(str, Enum):
    """The fixed 18-type set used for creature and move type tags"""

    NORMAL = "normal"
    FIRE = "fire"
    WATER = "water"
    ELECTRIC = "electric"
    GRASS = "grass"
    ICE = "ice"
    FIGHTING = "fighting"
    POISON = "poison"
    GROUND = "ground"
    FLYING = "flying"
    PSYCHIC = "psychic"
    BUG = "bug"
    ROCK = "rock"
    GHOST = "ghost"
    DRAGON = "dragon"
    DARK = "dark"
    STEEL = "steel"
    FAIRY = "fairy"

    @classmethod
    def parse(cls, value: "str | Type") -> "Type":
        """Parse a type tag case-insensitively ("Fire", "FIRE" and "fire" are all FIRE)"""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())

"""
Standard Cluedo board definition.

The board is a 24x25 grid (columns x rows) written as strings, one per row.

Legend:
  # = void (impassable)
  . = corridor
  + = door (opens into the single room interior next to it)
  1-6 = starting squares for each suspect (corridor)
  lowercase letters = room interiors (impassable, see ROOM_CODES)
"""

from enum import Enum


class Suspect(Enum):
    MISS_SCARLETT = "Miss Scarlett"
    COLONEL_MUSTARD = "Colonel Mustard"
    MRS_WHITE = "Mrs. White"
    REVEREND_GREEN = "The Reverend Green"
    MRS_PEACOCK = "Mrs. Peacock"
    PROFESSOR_PLUM = "Professor Plum"


class Weapon(Enum):
    CANDLESTICK = "Candlestick"
    DAGGER = "Dagger"
    LEAD_PIPE = "Lead Pipe"
    REVOLVER = "Revolver"
    ROPE = "Rope"
    SPANNER = "Spanner"


class RoomName(Enum):
    KITCHEN = "Kitchen"
    BALLROOM = "Ballroom"
    CONSERVATORY = "Conservatory"
    BILLIARD_ROOM = "Billiard Room"
    LIBRARY = "Library"
    STUDY = "Study"
    HALL = "Hall"
    LOUNGE = "Lounge"
    DINING_ROOM = "Dining Room"


CHARACTERS = [s.value for s in Suspect]
WEAPONS = [w.value for w in Weapon]
ROOMS = [r.value for r in RoomName]

# Room interior codes used in the layout
ROOM_CODES = {
    'k': RoomName.KITCHEN.value,
    'b': RoomName.BALLROOM.value,
    'c': RoomName.CONSERVATORY.value,
    'i': RoomName.BILLIARD_ROOM.value,
    'l': RoomName.LIBRARY.value,
    's': RoomName.STUDY.value,
    'h': RoomName.HALL.value,
    'o': RoomName.LOUNGE.value,
    'd': RoomName.DINING_ROOM.value,
}

# Starting square codes map to suspects
START_CODES = {
    '1': Suspect.MISS_SCARLETT.value,     # Bottom, beside the Lounge
    '2': Suspect.COLONEL_MUSTARD.value,   # Bottom, beside the Study
    '3': Suspect.MRS_WHITE.value,         # Top, left of the Ballroom
    '4': Suspect.REVEREND_GREEN.value,    # Top, right of the Ballroom
    '5': Suspect.MRS_PEACOCK.value,       # Right edge, below the Conservatory
    '6': Suspect.PROFESSOR_PLUM.value,    # Left edge, below the Dining Room
}

# Glyphs drawn on the text board
CHARACTER_GLYPHS = {
    Suspect.MISS_SCARLETT.value: 'R',
    Suspect.COLONEL_MUSTARD.value: 'Y',
    Suspect.MRS_WHITE.value: 'W',
    Suspect.REVEREND_GREEN.value: 'G',
    Suspect.MRS_PEACOCK.value: 'B',
    Suspect.PROFESSOR_PLUM.value: 'P',
}

# Secret passages connect diagonal corner rooms
SECRET_PASSAGES = {
    RoomName.KITCHEN.value: RoomName.STUDY.value,
    RoomName.STUDY.value: RoomName.KITCHEN.value,
    RoomName.CONSERVATORY.value: RoomName.LOUNGE.value,
    RoomName.LOUNGE.value: RoomName.CONSERVATORY.value,
}

STANDARD_LAYOUT = [
    "#########3####4#########",  # Row 0
    "kkkkkk....bbbb....cccccc",  # Row 1
    "kkkkkk....bbbb....cccccc",  # Row 2
    "kkkkkk....+bbb....cccccc",  # Row 3
    "kkkkkk....bbb+....cccccc",  # Row 4
    "kkkkkk....bbbb....+ccccc",  # Row 5
    "kkkk+k....bbbb.........5",  # Row 6
    "..........b+bb..........",  # Row 7
    "..................iiiiii",  # Row 8
    "dddddd+d..........iiiiii",  # Row 9
    "dddddddd..#####...+iiiii",  # Row 10
    "ddddddd+..#####...iiiiii",  # Row 11
    "dddddddd..#####...iii+ii",  # Row 12
    "dddddddd..#####.........",  # Row 13
    "dddddddd..#####..l+lllll",  # Row 14
    "ddd+dddd..#####..lllllll",  # Row 15
    "6.........#####..+llllll",  # Row 16
    ".................lllllll",  # Row 17
    ".........hh+hhh..lll+lll",  # Row 18
    "oooooo+..hhhhhh.........",  # Row 19
    "ooooooo..+hhhhh.........",  # Row 20
    "ooooooo..hhhhh+..+ssssss",  # Row 21
    "ooooooo..hhhhhh..sssssss",  # Row 22
    "ooooooo..hhhhhh..sssssss",  # Row 23
    "ooooooo1#hhhhhh#2sssssss",  # Row 24
]

BOARD_WIDTH = 24
BOARD_HEIGHT = 25

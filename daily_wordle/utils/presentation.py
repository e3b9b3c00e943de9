"""
Presentation Tokens

Maps engine values to the class names a front end styles. Nothing here
changes game state.
"""

from typing import Dict, List, Mapping, Optional

from ..models.game import Hint, Key, Tile

HINT_CLASSES: Dict[Hint, str] = {
    Hint.CORRECT: "correct",
    Hint.PRESENT: "present",
    Hint.ABSENT: "absent",
}

UNREVEALED_CLASS = "initial"

KEYBOARD_LAYOUT: List[List[Key]] = [
    [Key.letter(c) for c in "qwertyuiop"],
    [Key.letter(c) for c in "asdfghjkl"],
    [Key.enter()] + [Key.letter(c) for c in "zxcvbnm"] + [Key.backspace()],
]


def hint_class(hint: Optional[Hint]) -> str:
    if hint is None:
        return UNREVEALED_CLASS
    return HINT_CLASSES[hint]


def tile_classes(tile: Tile) -> List[str]:
    classes = ["tile"]
    if not tile.is_blank:
        classes.append("filled")
    if tile.hint is not None:
        classes.append("revealed")
    return classes


def serialize_rows(rows: List[List[Tile]]) -> List[List[Dict[str, Optional[str]]]]:
    """Board rows as JSON-ready tiles with their class tokens."""
    return [
        [
            {
                'char': tile.char,
                'hint': tile.hint.value if tile.hint else None,
                'state_class': hint_class(tile.hint),
                'classes': ' '.join(tile_classes(tile)),
            }
            for tile in row
        ]
        for row in rows
    ]


def keyboard_rows(knowledge: Mapping[str, Optional[Hint]]) -> List[List[Dict[str, str]]]:
    """Keyboard keys with labels and classes colored by letter knowledge."""
    rows = []
    for layout_row in KEYBOARD_LAYOUT:
        row = []
        for key in layout_row:
            classes = []
            if key.kind != Key.LETTER:
                classes.append("big")
            elif knowledge.get(key.char) is not None:
                classes.append(HINT_CLASSES[knowledge[key.char]])
            row.append({'key': key.label, 'classes': ' '.join(classes)})
        rows.append(row)
    return rows

"""Project boards: categories of items, stored as JSON in a ``.project`` file."""

from __future__ import annotations

import itertools
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

PLACEHOLDER_NAME = "+"
NEW_CATEGORY_NAME = "untitled"
DEFAULT_DESCRIPTION = "// Hello there"

_ids = itertools.count(1)


class Direction(Enum):
    """An arrow key used to move the selection or the selected item."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


def _field(obj: dict, key: str, kind: type) -> Any:
    value = obj[key]
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise TypeError(f"{key!r} has the wrong type")
    return value


@dataclass
class Item:
    """A card on the board."""

    name: str
    description: str
    id: int

    @classmethod
    def new(cls, name: str) -> "Item":
        """A fresh item with a default description and a new id."""
        return cls(name, DEFAULT_DESCRIPTION, next(_ids))

    def to_json(self) -> dict:
        return {"name": self.name, "description": self.description, "id": self.id}

    @classmethod
    def from_json(cls, data: Any) -> "Item":
        if not isinstance(data, dict):
            raise TypeError("item must be an object")
        item_id = _field(data, "id", int)
        if item_id < 0:
            raise ValueError("item id must not be negative")
        return cls(_field(data, "name", str), _field(data, "description", str), item_id)


@dataclass
class Category:
    """A column of items; the column named ``+`` only adds new columns."""

    name: str = PLACEHOLDER_NAME
    content: list[Item] = field(default_factory=list)

    @classmethod
    def create(cls) -> "Category":
        return cls(PLACEHOLDER_NAME, [])

    def initialize(self) -> None:
        """Turn the placeholder into a real, named column."""
        self.name = NEW_CATEGORY_NAME

    def to_json(self) -> dict:
        return {"name": self.name, "content": [item.to_json() for item in self.content]}

    @classmethod
    def from_json(cls, data: Any) -> "Category":
        if not isinstance(data, dict):
            raise TypeError("category must be an object")
        content = _field(data, "content", list)
        return cls(_field(data, "name", str), [Item.from_json(item) for item in content])


@dataclass
class Location:
    """The position of an item: its column and its row."""

    category: int = 0
    row: int = 0


@dataclass
class Project:
    """The board being edited, with its current selection."""

    categories: list[Category] = field(default_factory=lambda: [Category.create()])
    selected_item: Location = field(default_factory=Location)
    item_window_visible: bool = False
    _was_moving: bool = field(default=False, init=False, repr=False, compare=False)

    def update_from_code(self, json_text: str) -> None:
        """Load the categories from JSON; invalid text gives an empty board."""
        try:
            data = json.loads(json_text)
            if not isinstance(data, dict):
                raise TypeError("project must be an object")
            raw = _field(data, "categories", list)
            self.categories = [Category.from_json(category) for category in raw]
        except (ValueError, KeyError, TypeError):
            self.categories = [Category.create()]

    def save_to_code(self) -> str:
        """The categories as compact JSON."""
        data = {"categories": [category.to_json() for category in self.categories]}
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    def add_category(self) -> None:
        """Name the placeholder column and add a new placeholder after it."""
        self.categories[-1].initialize()
        self.categories.append(Category.create())

    def delete_category(self, index: int) -> None:
        """Remove a column, keeping a placeholder column at the end."""
        del self.categories[index]
        if not self.categories or self.categories[-1].name != PLACEHOLDER_NAME:
            self.categories.append(Category.create())

    def add_item(self, category_index: int) -> Item:
        """Append a new item to a column and return it."""
        category = self.categories[category_index]
        if category.name == PLACEHOLDER_NAME:
            raise ValueError("cannot add an item to the placeholder column")
        item = Item.new("item")
        category.content.append(item)
        return item

    def _move_across(self, source: int, row: int, target: int) -> None:
        content = self.categories[source].content
        item = content.pop(row)
        self.categories[target].content.append(item)
        self.selected_item = Location(target, len(self.categories[target].content) - 1)

    def _step(self, direction: Optional[Direction], move_item: bool) -> bool:
        category = self.selected_item.category
        row = self.selected_item.row
        content = self.categories[category].content
        act = not self._was_moving

        if direction is Direction.LEFT and category > 0:
            if act:
                if move_item:
                    if row < len(content):
                        self._move_across(category, row, category - 1)
                elif self.categories[category - 1].content:
                    self.selected_item.category -= 1
            return True
        if direction is Direction.RIGHT and category < len(self.categories) - 2:
            if act:
                if move_item:
                    if row < len(content):
                        self._move_across(category, row, category + 1)
                elif self.categories[category + 1].content:
                    self.selected_item.category += 1
            return True
        if direction is Direction.UP and row > 0:
            if act:
                if move_item and row < len(content):
                    content[row - 1], content[row] = content[row], content[row - 1]
                self.selected_item.row -= 1
            return True
        if direction is Direction.DOWN and row + 1 < len(content):
            if act:
                if move_item:
                    content[row + 1], content[row] = content[row], content[row + 1]
                self.selected_item.row += 1
            return True
        return False

    def navigate(self, direction: Optional[Direction], move_item: bool = False) -> bool:
        """Move the selection, or the selected item with ``move_item``.

        A held key acts once: after a call that moved, the next moving call
        does nothing until a call with no possible move (or ``None``).
        Returns whether the key counted as a move.
        """
        moved = self._step(direction, move_item)
        self._was_moving = moved
        return moved

    def clamp_selection(self) -> None:
        """Keep the selection on an existing item, or at row 0 of a column."""
        selected = self.selected_item
        selected.category = max(0, min(len(self.categories) - 2, selected.category))
        while not self.categories[selected.category].content and selected.category > 0:
            selected.category -= 1
        content = self.categories[selected.category].content
        selected.row = min(len(content) - 1, selected.row) if content else 0

    def delete_selected(self) -> Optional[Item]:
        """Remove the selected item and hide the item window.

        Returns the removed item, or ``None`` when nothing is selected.
        """
        selected = self.selected_item
        if len(self.categories) <= 1:
            return None
        content = self.categories[selected.category].content
        if not content or selected.row >= len(content):
            return None
        self.item_window_visible = False
        item = content.pop(selected.row)
        if selected.row >= len(content) and selected.row > 0:
            selected.row -= 1
        return item
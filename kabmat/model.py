"""Boards, columns, cards and checklist items."""

from dataclasses import dataclass, field

from .text import trim_spaces


def _swap(items, first, second):
    items[first], items[second] = items[second], items[first]


@dataclass
class ChecklistItem:
    """One entry of a card's checklist."""

    content: str = ""
    done: bool = False


@dataclass
class Card:
    """A card with a one-line content, a free description and a checklist."""

    content: str = ""
    description: str = ""
    checklist: list = field(default_factory=list)

    def __post_init__(self):
        self.content = trim_spaces(self.content)

    def add_checklist_item(self, item):
        self.checklist.append(item)

    def update_checklist_item(self, item_index, item):
        self.checklist[item_index] = item

    def delete_checklist_item(self, item_index):
        del self.checklist[item_index]

    def move_checklist_item_up(self, item_index):
        """Swap the item with the one above; return whether it moved."""
        if item_index > 0:
            _swap(self.checklist, item_index, item_index - 1)
            return True
        return False

    def move_checklist_item_down(self, item_index):
        """Swap the item with the one below; return whether it moved."""
        if item_index < len(self.checklist) - 1:
            _swap(self.checklist, item_index, item_index + 1)
            return True
        return False


@dataclass
class Column:
    """A titled list of cards."""

    title: str = ""
    cards: list = field(default_factory=list)

    def add_card(self, card, put_at_bottom=True):
        if put_at_bottom:
            self.cards.append(card)
        else:
            self.cards.insert(0, card)

    def update_card(self, card_index, card):
        self.cards[card_index] = card

    def delete_card(self, card_index):
        del self.cards[card_index]

    def move_card_up(self, card_index):
        """Swap the card with the one above; return whether it moved."""
        if card_index > 0:
            _swap(self.cards, card_index, card_index - 1)
            return True
        return False

    def move_card_down(self, card_index):
        """Swap the card with the one below; return whether it moved."""
        if card_index < len(self.cards) - 1:
            _swap(self.cards, card_index, card_index + 1)
            return True
        return False


@dataclass
class Board:
    """A named kanban board made of columns."""

    name: str = ""
    columns: list = field(default_factory=list)

    def add_column(self, title):
        self.columns.append(Column(trim_spaces(title)))

    def rename_column(self, column_index, new_title):
        self.columns[column_index].title = trim_spaces(new_title)

    def delete_column(self, column_index):
        del self.columns[column_index]

    def move_column_left(self, column_index):
        """Swap the column with its left neighbour; return whether it moved."""
        if column_index > 0:
            _swap(self.columns, column_index, column_index - 1)
            return True
        return False

    def move_column_right(self, column_index):
        """Swap the column with its right neighbour; return whether it moved."""
        if column_index < len(self.columns) - 1:
            _swap(self.columns, column_index, column_index + 1)
            return True
        return False

    def _transfer_card(self, card_index, src_column_index, dist_column_index, config):
        source = self.columns[src_column_index]
        card = source.cards[card_index]
        source.delete_card(card_index)
        self.columns[dist_column_index].add_card(
            card, config.move_card_to_column_bottom
        )

    def move_card_to_prev_column(
        self, card_index, src_column_index, dist_column_index, config
    ):
        """Move a card out of a column that has one to its left."""
        if src_column_index > 0:
            self._transfer_card(card_index, src_column_index, dist_column_index, config)
            return True
        return False

    def move_card_to_next_column(
        self, card_index, src_column_index, dist_column_index, config
    ):
        """Move a card out of a column that has one to its right."""
        if src_column_index < len(self.columns) - 1:
            self._transfer_card(card_index, src_column_index, dist_column_index, config)
            return True
        return False
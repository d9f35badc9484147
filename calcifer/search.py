"""Find and replace across one or all open documents."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from calcifer.tabs import Tab

_SCROLL_MARGIN_ROWS = 5


@dataclass
class Selection:
    """A match: the tab it is in and its character range."""

    tab: int = 0
    start: int = 0
    end: int = 0


@dataclass
class SearchWindow:
    """State of the search dialog and the matches it found."""

    visible: bool = False
    search_text: str = ""
    searched_text: str = ""
    replace_text: str = ""
    initialized: bool = False
    across_documents: bool = False
    results: list[Selection] = field(default_factory=list)
    current_result: int = 0
    result_selected: bool = True
    row_height: float = 0.0

    def cursor_start(self) -> int:
        return self.results[self.current_result].start

    def cursor_end(self) -> int:
        return self.results[self.current_result].end

    def status(self) -> tuple[str, bool]:
        """The position label, and whether it reports that nothing matched."""
        if (
            self.search_text == self.searched_text
            and self.search_text
            and not self.results
        ):
            return " 0/0 ", True
        shown = min(self.current_result + 1, len(self.results))
        return f" {shown}/{len(self.results)} ", False

    def set_across_documents(self, value: bool) -> None:
        """Switch the scope; a change forces a fresh search."""
        if value != self.across_documents:
            self.searched_text = ""
        self.across_documents = value

    def match_text(self, text: str, tab_number: int) -> list[Selection]:
        """Non-overlapping matches of the search text in ``text``."""
        length = len(self.search_text)
        return [
            Selection(tab_number, match.start(), match.start() + length)
            for match in re.finditer(re.escape(self.search_text), text)
        ]

    def search(self, tabs: list[Tab], selected_tab: int) -> int:
        """Search again and jump to the first match; returns the selected tab."""
        if not self.search_text:
            return selected_tab
        if self.across_documents:
            results = [
                selection
                for index, tab in enumerate(tabs)
                for selection in self.match_text(tab.code, index)
            ]
        else:
            results = self.match_text(tabs[selected_tab].code, selected_tab)
        self.searched_text = self.search_text
        self.results = results
        self.current_result = 0
        if self.results:
            selected_tab = self.find_result(tabs, selected_tab, 0)
        return selected_tab

    def find_result(self, tabs: list[Tab], selected_tab: int, direction: int) -> int:
        """Step through the matches, scrolling to the one reached.

        Searches first if the search text changed. Returns the selected tab.
        """
        if self.searched_text != self.search_text:
            return self.search(tabs, selected_tab)
        if not self.results:
            return selected_tab
        self.current_result = (self.current_result + direction) % len(self.results)
        self.result_selected = False
        result = self.results[self.current_result]
        selected_tab = result.tab
        tab = tabs[selected_tab]
        row = tab.code[:result.start].count("\n")
        tab.scroll_offset = self.row_height * max(row - _SCROLL_MARGIN_ROWS, 0)
        return selected_tab

    def replace(self, tabs: list[Tab], selected_tab: int) -> int:
        """Replace every match in each tab that has one; returns the selected tab."""
        selected_tab = self.search(tabs, selected_tab)
        for index in dict.fromkeys(result.tab for result in self.results):
            tab = tabs[index]
            tab.code = tab.code.replace(self.search_text, self.replace_text)
            tab.saved = False
        return selected_tab
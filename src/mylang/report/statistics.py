# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Running counters over the events of one scan."""

from mylang.scanner.tokens import Token, TokenCategory

# ###############
# Public Interface
# ###############


class Statistics:
    """Monotonic scan statistics.

    Counters only ever grow: per-category token tallies, comments removed,
    lexical errors and the highest line number touched by any event.
    """

    def __init__(self) -> None:
        self._counts: dict[TokenCategory, int] = {category: 0 for category in TokenCategory}
        self._max_line = 1
        self._comments_removed = 0
        self._error_count = 0

    def observe_token(self, token: Token) -> None:
        self._counts[token.category] += 1
        self.touch_line(token.line)

    def observe_comment(self, end_line: int) -> None:
        self._comments_removed += 1
        self.touch_line(end_line)

    def observe_error(self, line: int) -> None:
        self._error_count += 1
        self.touch_line(line)

    def touch_line(self, line: int) -> None:
        if line > self._max_line:
            self._max_line = line

    @property
    def counts(self) -> dict[TokenCategory, int]:
        """A copy of the per-category tallies, in taxonomy order."""
        return dict(self._counts)

    def nonzero_counts(self) -> dict[TokenCategory, int]:
        """Categories seen at least once. END_OF_INPUT only counts toward the total."""
        return {
            category: count
            for category, count in self._counts.items()
            if count > 0 and category is not TokenCategory.END_OF_INPUT
        }

    @property
    def total_tokens(self) -> int:
        """Number of emittable tokens observed, END_OF_INPUT included."""
        return sum(count for category, count in self._counts.items() if category.emittable)

    @property
    def lines_processed(self) -> int:
        return self._max_line

    @property
    def comments_removed(self) -> int:
        return self._comments_removed

    @property
    def error_count(self) -> int:
        return self._error_count

    def format_for_report(self) -> str:
        lines = [
            "STATISTICS",
            "----------",
            f"Total tokens:     {self.total_tokens}",
            f"Lines processed:  {self.lines_processed}",
            f"Comments removed: {self.comments_removed}",
            "",
            "Token counts by type:",
        ]
        for category, count in self.nonzero_counts().items():
            lines.append(f"  {category.value:<18}: {count}")
        return "\n".join(lines) + "\n"

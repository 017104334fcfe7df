"""Line counting driven by Unicode line-break segmentation."""
from __future__ import annotations

from typing import Iterator

from uniseg.linebreak import line_break_boundaries

LINE_FEED = "\n"


class LineCounter:
    """Counts lines by walking the line-break opportunities of a text.

    Segmentation follows the Unicode line breaking algorithm (UAX #14) with a
    single fixed rule set, so results never depend on the process locale.
    Break opportunities that are merely word-wrap points are skipped: only a
    boundary immediately preceded by a line feed ends a line. A trailing
    fragment without a line feed is therefore not counted.
    """

    def boundaries(self, text: str) -> Iterator[int]:
        """Yield break positions after the start of ``text``, strictly increasing."""

        last = 0
        for position in line_break_boundaries(text):
            if position <= last:
                continue
            last = position
            yield position

    def count(self, text: str) -> int:
        line_count = 0
        for end in self.boundaries(text):
            if text[end - 1] == LINE_FEED:
                line_count += 1
        return line_count


def count_lines(text: str) -> int:
    return LineCounter().count(text)

"""Physical key geometry of the supported split keyboard."""

from collections.abc import Iterator

from pydantic import ConfigDict, Field

from zmkview.models.base import ZmkViewBaseModel


class KeyboardGeometry(ZmkViewBaseModel):
    """Row/column addressing for a split keyboard with a short thumb row.

    Bindings are consumed in row-major order. On ``thumb_row`` the first
    ``thumb_split`` keys sit in the left columns and the rest are shifted
    right by ``thumb_column_offset``; the skipped columns never hold a key.
    """

    model_config = ConfigDict(frozen=True)

    rows: int = 4
    columns: int = 12
    row_key_counts: tuple[int, ...] = (12, 12, 12, 6)
    thumb_row: int = 3
    thumb_split: int = 3
    thumb_column_offset: int = Field(default=6, ge=0)

    @property
    def total_keys(self) -> int:
        return sum(self.row_key_counts)

    def positions(self) -> Iterator[tuple[int, int]]:
        """Yield (row, col) pairs in binding consumption order."""
        for row in range(self.rows):
            for index in range(self.row_key_counts[row]):
                col = index
                if row == self.thumb_row and index >= self.thumb_split:
                    col = index + self.thumb_column_offset
                yield row, col


CORNE_42 = KeyboardGeometry()

TOTAL_KEYS = CORNE_42.total_keys

"""
Stateless pagination of a flat item list onto fixed-size grid pages
"""
import math

import pydantic


class PageOutOfRangeError(ValueError):
    pass


class Position(pydantic.BaseModel):
    page: int
    row: int
    col: int


class GridPaginator(pydantic.BaseModel):
    """
    Represent page numbers and cell coordinates in a paginated, row-major grid

     page 0        page 1
    ┌────┬────┐  ┌────┬────┐
    │ 0  │ 1  │  │ 4  │ 5  │
    ├────┼────┤  ├────┼────┤
    │ 2  │ 3  │  │ 6  │ 7  │
    └────┴────┘  └────┴────┘

    Given the page size (rows * cols) and an absolute index i:

    [page] p = i // (rows * cols)
    [col]  c = (i % (rows * cols)) % cols
    [row]  r = (i % (rows * cols)) // cols

    and the inverse i = p * (rows * cols) + r * cols + c.

    cols is the number of cells across a page (cellCountX) and rows the number
    of cells down (cellCountY).
    """

    cols: int = pydantic.Field(gt=0)
    rows: int = pydantic.Field(gt=0)

    @property
    def page_size(self) -> int:
        return self.rows * self.cols

    def n_pages(self, n_items: int) -> int:
        return math.ceil(n_items / self.page_size)

    def item_to_page(self, abs_idx: int) -> int:
        return abs_idx // self.page_size

    def locate(self, abs_idx: int) -> Position:
        rel_idx = abs_idx % self.page_size
        return Position(
            page=abs_idx // self.page_size,
            row=rel_idx // self.cols,
            col=rel_idx % self.cols,
        )

    def locate_rel(self, page: int, rel_idx: int) -> Position:
        return Position(page=page, row=rel_idx // self.cols, col=rel_idx % self.cols)

    def invert(self, position: Position) -> int:
        return position.page * self.page_size + position.row * self.cols + position.col

    def check_page(self, page: int, n_items: int) -> None:
        n_pages = self.n_pages(n_items)
        if page < 0:
            raise PageOutOfRangeError("Page {} < 0 out of range".format(page))
        elif page > n_pages - 1:
            raise PageOutOfRangeError("Page {} > {} out of range".format(page, n_pages - 1))

    def items_on_page(self, page: int, n_items: int) -> range:
        self.check_page(page, n_items)
        start = page * self.page_size
        return range(start, min(start + self.page_size, n_items))

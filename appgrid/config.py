import pydantic

from appgrid.defaults import DEFAULT_CELL_COUNT_X, DEFAULT_CELL_COUNT_Y
from appgrid.filtering import ALL_APPS
from appgrid.paginate import GridPaginator


class GridConfig(pydantic.BaseModel):
    cell_count_x: int = pydantic.Field(default=DEFAULT_CELL_COUNT_X, gt=0)
    cell_count_y: int = pydantic.Field(default=DEFAULT_CELL_COUNT_Y, gt=0)
    app_filter: int = ALL_APPS

    class Config:
        frozen = True

    @property
    def capacity(self) -> int:
        return self.cell_count_x * self.cell_count_y

    def paginator(self) -> GridPaginator:
        return GridPaginator(cols=self.cell_count_x, rows=self.cell_count_y)

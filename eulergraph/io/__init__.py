from .vertex_form import parse_vertex_form, read_vertex_form, save_vertex_form, to_vertex_form
from .edgelist import from_dataframe, save_edgelist, to_dataframe

__all__ = [
    "parse_vertex_form", "read_vertex_form", "save_vertex_form", "to_vertex_form",
    "from_dataframe", "save_edgelist", "to_dataframe",
]

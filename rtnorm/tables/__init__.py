from .chopin_table import ChopinTable, build_chopin_table, load_chopin_table

__all__ = ["ChopinTable", "build_chopin_table", "load_chopin_table"]

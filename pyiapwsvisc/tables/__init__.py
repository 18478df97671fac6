from .tables import viscosity_table, print_table, TABLE_COLUMNS

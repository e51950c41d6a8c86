from db2mb.writers.csv_writer import write_manabox_csv, write_rows, write_unconvertible_csv

__all__ = [
    "write_manabox_csv",
    "write_rows",
    "write_unconvertible_csv",
]

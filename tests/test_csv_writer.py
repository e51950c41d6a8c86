import csv
from pathlib import Path

import pytest

from db2mb.models.failure import FailureKind, OutputUnwritableError
from db2mb.models.output import ManaBoxRow, UnconvertibleRow
from db2mb.writers.csv_writer import write_manabox_csv, write_rows, write_unconvertible_csv


def _read(path: Path) -> list[list[str]]:
    with open(path, encoding="utf-8", newline="") as f:
        return list(csv.reader(f))


class TestWriteManaBoxCsv:
    def test_writes_header_and_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "manabox.csv"
        rows = [
            ManaBoxRow(quantity=3, foil="", scryfall_id="abc-123"),
            ManaBoxRow(quantity=1, foil="1", scryfall_id="abc-123"),
        ]

        write_manabox_csv(path, rows)

        assert _read(path) == [
            ["quantity", "foil", "scryfall id"],
            ["3", "", "abc-123"],
            ["1", "1", "abc-123"],
        ]

    def test_header_written_for_empty_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "manabox.csv"

        write_manabox_csv(path, [])

        assert _read(path) == [["quantity", "foil", "scryfall id"]]


class TestWriteUnconvertibleCsv:
    def test_writes_header_and_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "fail.csv"
        rows = [UnconvertibleRow(quantity=2, card_name="Foo", set_name="BAR", foil="")]

        write_unconvertible_csv(path, rows)

        assert _read(path) == [
            ["quantity", "card name", "set name", "foil"],
            ["2", "Foo", "BAR", ""],
        ]

    def test_quotes_values_with_commas_and_quotes(self, tmp_path: Path) -> None:
        path = tmp_path / "fail.csv"
        rows = [
            UnconvertibleRow(
                quantity=1,
                card_name="Sheoldred, the Apocalypse",
                set_name='Time Spiral "Timeshifted"',
                foil="1",
            )
        ]

        write_unconvertible_csv(path, rows)

        assert _read(path)[1] == ["1", "Sheoldred, the Apocalypse", 'Time Spiral "Timeshifted"', "1"]

    def test_header_written_for_empty_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "fail.csv"

        write_unconvertible_csv(path, [])

        assert _read(path) == [["quantity", "card name", "set name", "foil"]]


class TestWriteRows:
    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "deeper" / "out.csv"

        write_manabox_csv(path, [])

        assert path.exists()

    def test_existing_directory_is_fine(self, tmp_path: Path) -> None:
        (tmp_path / "out").mkdir()

        write_manabox_csv(tmp_path / "out" / "a.csv", [])
        write_unconvertible_csv(tmp_path / "out" / "b.csv", [])

        assert sorted(p.name for p in (tmp_path / "out").iterdir()) == ["a.csv", "b.csv"]

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "manabox.csv"
        path.write_text("stale,content\n1,2\n3,4\n", encoding="utf-8")

        write_manabox_csv(path, [ManaBoxRow(quantity=1, foil="", scryfall_id="x")])

        assert _read(path) == [["quantity", "foil", "scryfall id"], ["1", "", "x"]]

    def test_returns_path(self, tmp_path: Path) -> None:
        path = tmp_path / "out.csv"
        assert write_rows(path, ManaBoxRow.FIELDNAMES, []) == path

    def test_unwritable_path_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(OutputUnwritableError, match="Cannot write") as exc_info:
            write_manabox_csv(blocker / "out.csv", [])

        assert exc_info.value.kind == FailureKind.OUTPUT_UNWRITABLE

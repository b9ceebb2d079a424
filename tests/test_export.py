"""Tests for JSON and CSV export."""

import json

import pytest

from src.config import Settings
from src.ledger import CSV_HEADER, LedgerStore, entries_to_csv, entries_to_json
from src.models.entry import Entry, ExportFormat
from src.services.storage import InMemoryKeyValueStore


def loaded_store(records):
    storage = InMemoryKeyValueStore({"transactions": json.dumps(records)})
    ledger = LedgerStore(storage, settings=Settings())
    ledger.load()
    return ledger


class TestJsonExport:
    """Tests for export_json."""

    def test_empty_ledger_exports_empty_array(self, store):
        """Test an empty ledger still yields valid JSON."""
        assert store.export_json() == "[]"
        assert json.loads(store.export_json()) == []

    def test_single_entry_exact_output(self):
        """Test pretty-printed output for one entry."""
        ledger = loaded_store(
            [{"id": 1, "description": "Salary", "amount": 1000, "kind": "income"}]
        )
        assert ledger.export_json() == (
            "[\n"
            "  {\n"
            '    "id": 1,\n'
            '    "description": "Salary",\n'
            '    "amount": 1000,\n'
            '    "kind": "income"\n'
            "  }\n"
            "]"
        )

    def test_preserves_order_and_fields(self, store):
        """Test export keeps insertion order and field names."""
        store.add("Salary", 1000, "income")
        store.add("Coffee", 3.5, "expense")
        records = json.loads(store.export_json())
        assert [list(r) for r in records] == [["id", "description", "amount", "kind"]] * 2
        assert [r["description"] for r in records] == ["Salary", "Coffee"]
        assert records[1]["amount"] == 3.5

    def test_non_ascii_written_as_is(self, store):
        """Test unicode descriptions are not escaped."""
        store.add("Café", 4, "expense")
        assert "Café" in store.export_json()

    def test_indent_is_configurable(self, monkeypatch):
        """Test the JSON indentation follows settings."""
        monkeypatch.setenv("LEDGER_JSON_INDENT", "4")
        ledger = loaded_store(
            [{"id": 1, "description": "Salary", "amount": 1000, "kind": "income"}]
        )
        assert '\n    {\n        "id": 1' in ledger.export_json()


class TestCsvExport:
    """Tests for export_csv."""

    def test_empty_ledger_has_nothing_to_export(self, store):
        """Test an empty ledger yields None."""
        assert store.export_csv() is None

    def test_single_entry_exact_output(self, store):
        """Test the exact CSV text for one expense."""
        store.add("Coffee", 50, "expense")
        assert store.export_csv() == "Description,Amount,Type\nCoffee,50,expense\n"

    def test_multiple_entries_in_order(self, store):
        """Test one line per entry in insertion order."""
        store.add("Salary", "1000", "income")
        store.add("Book", 12.5, "expense")
        lines = store.export_csv().split("\n")
        assert lines == [CSV_HEADER, "Salary,1000,income", "Book,12.5,expense", ""]

    def test_embedded_comma_is_not_escaped(self, store):
        """Test the known limitation: commas in descriptions break the row."""
        store.add("Dinner, drinks", 30, "expense")
        csv_text = store.export_csv()
        row = csv_text.splitlines()[1]
        assert row == "Dinner, drinks,30,expense"
        # The row now has one field more than the header
        assert len(row.split(",")) == len(CSV_HEADER.split(",")) + 1

    def test_embedded_newline_is_not_escaped(self, store):
        """Test the known limitation: newlines in descriptions split the row."""
        store.add("Line one\nline two", 5, "expense")
        assert store.export_csv() == (
            "Description,Amount,Type\nLine one\nline two,5,expense\n"
        )


class TestExportHelpers:
    """Tests for the module-level export functions."""

    def test_entries_to_csv_empty(self):
        """Test no entries yields None."""
        assert entries_to_csv([]) is None

    def test_entries_to_json_compact_shape(self):
        """Test the JSON helper on plain entries."""
        entries = [Entry(id=2, description="Fuel", amount=40.25, kind="expense")]
        assert json.loads(entries_to_json(entries)) == [
            {"id": 2, "description": "Fuel", "amount": 40.25, "kind": "expense"}
        ]


class TestExportToFile:
    """Tests for export_to_file."""

    def test_json_file_written(self, store, tmp_path):
        """Test JSON export lands in transactions.json."""
        store.add("Salary", 1000, "income")
        path = store.export_to_file(ExportFormat.JSON, tmp_path)
        assert path == tmp_path / "transactions.json"
        assert path.read_text(encoding="utf-8") == store.export_json()

    def test_json_file_written_for_empty_ledger(self, store, tmp_path):
        """Test an empty ledger still exports an empty JSON array."""
        path = store.export_to_file("json", tmp_path)
        assert path.read_text(encoding="utf-8") == "[]"

    def test_csv_file_written(self, store, tmp_path):
        """Test CSV export lands in transactions.csv with LF endings."""
        store.add("Coffee", 50, "expense")
        path = store.export_to_file("csv", tmp_path)
        assert path == tmp_path / "transactions.csv"
        assert path.read_bytes() == b"Description,Amount,Type\nCoffee,50,expense\n"

    def test_csv_skipped_for_empty_ledger(self, store, tmp_path):
        """Test no file is written when there is nothing to export."""
        assert store.export_to_file("csv", tmp_path) is None
        assert list(tmp_path.iterdir()) == []

    def test_default_directory_from_settings(self, tmp_path, monkeypatch):
        """Test the export directory and file names follow settings."""
        monkeypatch.setenv("LEDGER_EXPORT_DIRECTORY", str(tmp_path / "exports"))
        monkeypatch.setenv("LEDGER_EXPORT_CSV_FILENAME", "history.csv")
        ledger = loaded_store(
            [{"id": 1, "description": "Coffee", "amount": 50, "kind": "expense"}]
        )
        path = ledger.export_to_file(ExportFormat.CSV)
        assert path == tmp_path / "exports" / "history.csv"
        assert path.exists()

    def test_unknown_format_rejected(self, store, tmp_path):
        """Test only json and csv are accepted."""
        with pytest.raises(ValueError):
            store.export_to_file("xml", tmp_path)

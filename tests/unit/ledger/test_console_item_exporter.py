import json

from ledger.exporters.console_item_exporter import ConsoleItemExporter, export_all
from ledger.models.cursor import CursorBounds


def test_export_all_prints_labelled_items(capsys):
    exporter = ConsoleItemExporter(item_label="bounds", indent=None)

    count = export_all(exporter, [CursorBounds(until_tx=1, until_block=2), {"plain": "dict"}])

    assert count == 2
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("[BOUNDS]: ")
    assert json.loads(lines[0][len("[BOUNDS]: "):])["untilBlock"] == 2
    assert json.loads(lines[1][len("[BOUNDS]: "):]) == {"plain": "dict"}


def test_open_resets_count(capsys):
    exporter = ConsoleItemExporter()
    exporter.export_item({"a": 1})
    exporter.open()

    assert exporter.exported_count == 0

import json
from typing import Any, Iterable, List

from pydantic import BaseModel


class ConsoleItemExporter(object):
    """Prints canonical items as JSON, one block per item, for debugging and piping."""

    def __init__(self, item_label: str = "item", indent: int | None = 2):
        self.item_label = item_label
        self.indent = indent
        self.exported_count = 0

    def open(self):
        self.exported_count = 0

    def export_items(self, items: Iterable[Any]):
        for item in items:
            self.export_item(item)

    def export_item(self, item: Any):
        print(f"[{self.item_label.upper()}]: {self.serialize(item)}")
        self.exported_count += 1

    def serialize(self, item: Any) -> str:
        if isinstance(item, BaseModel):
            item_dict = item.model_dump(mode="json", by_alias=True)
            return json.dumps(item_dict, indent=self.indent, default=str)
        try:
            return json.dumps(item, indent=self.indent, default=str)
        except TypeError:
            return str(item)

    def close(self):
        pass


def export_all(exporter: ConsoleItemExporter, items: List[Any]) -> int:
    exporter.open()
    try:
        exporter.export_items(items)
    finally:
        exporter.close()
    return exporter.exported_count

"""Test helpers: node records and a measurer with scripted boxes."""

from typing import Dict, Optional, Tuple

from layout import LayoutConfig, TextMeasurement

# Plain spacing, no floors, so boxes come out exactly as scripted
PLAIN_CONFIG = LayoutConfig(node_spacing=30, horizontal_gap=100, min_width=0, min_height=0)


def record(node_id: str, *children: dict, **fields) -> dict:
    """Nested node record; text defaults to the id."""
    data = {"id": node_id, "text": fields.pop("text", node_id), "children": list(children)}
    data.update(fields)
    return data


class StubMeasurer:
    """Returns boxes by text; counts calls."""

    def __init__(
        self,
        sizes: Optional[Dict[str, Tuple[float, float]]] = None,
        default: Tuple[float, float] = (100, 40),
        table: Tuple[float, float] = (300, 100),
        code: Tuple[float, float] = (250, 80),
    ):
        self.sizes = sizes or {}
        self.default = default
        self.table = table
        self.code = code
        self.calls = 0
        self.texts = []

    def measure_text(self, text, icons=None, font_size=None):
        self.calls += 1
        self.texts.append(text)
        return TextMeasurement(*self.sizes.get(text, self.default))

    def measure_table(self, table):
        self.calls += 1
        return TextMeasurement(*self.table)

    def measure_code_block(self, code_block):
        self.calls += 1
        return TextMeasurement(*self.code)


class FailingMeasurer:
    """Any measurement is a test failure."""

    def measure_text(self, text, icons=None, font_size=None):
        raise AssertionError("measure_text called")

    def measure_table(self, table):
        raise AssertionError("measure_table called")

    def measure_code_block(self, code_block):
        raise AssertionError("measure_code_block called")

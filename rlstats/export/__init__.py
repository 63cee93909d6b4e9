"""Report export to files."""

from .excel import reports_to_excel
from .jsonio import dump_json, reports_to_json

__all__ = ["dump_json", "reports_to_excel", "reports_to_json"]

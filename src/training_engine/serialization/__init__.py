"""Serialization module — export engine results as dashboard report JSON."""

from training_engine.serialization.report import to_report_dict, to_report_json

__all__ = ["to_report_dict", "to_report_json"]

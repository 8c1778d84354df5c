"""
Serialization of parsed reports.
"""

from diplomacy_report.io.yaml_writer import ReportWriter

__all__ = ['ReportWriter']

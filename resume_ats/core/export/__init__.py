"""
Export formatters for parsed resumes.
"""

from .ats_exporter import (
    ATSExportData,
    export_as_ats_plain_text,
    export_as_ats_xml,
    export_as_enhanced_json,
    find_ats_keywords,
    generate_optimization_suggestions,
)
from .csv_exporter import export_as_csv, export_as_csv_preview, export_skills_csv

__all__ = [
    "ATSExportData",
    "export_as_ats_plain_text",
    "export_as_ats_xml",
    "export_as_enhanced_json",
    "find_ats_keywords",
    "generate_optimization_suggestions",
    "export_as_csv",
    "export_as_csv_preview",
    "export_skills_csv",
]

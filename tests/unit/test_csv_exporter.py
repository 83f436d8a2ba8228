"""
Tests for resume_ats.core.export.csv_exporter.
"""

import csv
import io

from resume_ats.core.export.csv_exporter import (
    export_as_csv,
    export_as_csv_preview,
    export_skills_csv,
)
from resume_ats.nlp import parse_resume


class TestFullCsv:
    def test_empty_record_has_contact_block_only(self, empty_resume):
        assert export_as_csv(empty_resume) == (
            '"Personal Information",""\n'
            '"Full Name",""\n'
            '"Email",""\n'
            '"Phone",""\n'
            '"Location",""\n'
            '"LinkedIn",""\n'
            '"GitHub",""\n'
            '"Portfolio",""\n'
            '""'
        )

    def test_sections_in_order(self, make_parsed_resume):
        resume = make_parsed_resume(certifications=[{"name": "PMP", "organization": "PMI", "date": "2020"}])
        rows = list(csv.reader(io.StringIO(export_as_csv(resume))))
        section_rows = [
            rows.index(["Personal Information", ""]),
            rows.index(["Professional Summary", ""]),
            rows.index(["Skills", "Category"]),
            rows.index(["Work Experience", ""]),
            rows.index(["Education", ""]),
            rows.index(["Certifications", ""]),
        ]

        assert section_rows == sorted(section_rows)
        assert rows[section_rows[1] + 1] == [resume.summary, ""]
        assert rows.count([""]) == 5
        assert ["Company", "Job Title", "Start Date", "End Date", "Location"] in rows
        assert ["TechCorp", "Senior Software Engineer", "2018-01", "2020-01", "San Francisco, CA"] in rows
        assert ["MIT", "Bachelor of Science", "", "2017", ""] in rows
        assert rows[-1] == ["PMP", "PMI", "2020"]

    def test_current_job_end_date(self, jane_doe_text):
        rows = list(csv.reader(io.StringIO(export_as_csv(parse_resume(jane_doe_text)))))
        assert ["Acme Corp", "Software Engineer", "2020-01", "Present", ""] in rows

    def test_every_cell_quoted(self, make_parsed_resume):
        content = export_as_csv(make_parsed_resume())
        for line in content.split("\n"):
            assert line.startswith('"')
            assert line.endswith('"')

    def test_embedded_quotes_doubled(self, make_parsed_resume):
        resume = make_parsed_resume(summary='Known as "the fixer" on every team I joined.')
        assert '"Known as ""the fixer"" on every team I joined.",""' in export_as_csv(resume)


class TestCsvPreview:
    def test_jane_doe_preview(self, jane_doe_text):
        assert export_as_csv_preview(parse_resume(jane_doe_text)) == (
            "Section,Value\n"
            "Name,Jane Doe\n"
            "Email,jane@x.com\n"
            "Phone,555-123-4567\n"
            "Location,\n"
            "Skills,Python; SQL; Docker\n"
            "Experience,Software Engineer at Acme Corp"
        )

    def test_empty_record(self, empty_resume):
        lines = export_as_csv_preview(empty_resume).split("\n")
        assert lines[1:] == ["Name,", "Email,", "Phone,", "Location,", "Skills,", "Experience,"]


class TestSkillsCsv:
    def test_category_then_name(self, jane_doe_text):
        assert export_skills_csv(parse_resume(jane_doe_text)) == (
            "Category,Skill\nGeneral,Python\nGeneral,SQL\nGeneral,Docker"
        )

    def test_inferred_skills_tagged_technical(self, full_resume_text):
        lines = export_skills_csv(parse_resume(full_resume_text)).split("\n")
        assert lines[1:] == [
            "Technical,Aws",
            "Technical,Kubernetes",
            "Technical,Git",
            "Technical,Api",
            "Technical,Ai",
        ]

"""
Tests for resume_ats.core.export.ats_exporter: plain text, XML and enhanced JSON.
"""

import json
from datetime import datetime, timezone

from resume_ats.core.export.ats_exporter import (
    ATSExportData,
    export_as_ats_plain_text,
    export_as_ats_xml,
    export_as_enhanced_json,
    find_ats_keywords,
    generate_optimization_suggestions,
)
from resume_ats.nlp import parse_resume

EXPORT_DATE = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


class TestPlainText:
    def test_jane_doe_layout(self, jane_doe_text):
        text = export_as_ats_plain_text(parse_resume(jane_doe_text), "jane")
        assert text == (
            "Jane Doe\n"
            "jane@x.com\n"
            "555-123-4567\n"
            "\n"
            "WORK EXPERIENCE\n"
            "Software Engineer\n"
            "Acme Corp\n"
            "2020-01 - Present\n"
            "Built things.\n"
            "\n"
            "EDUCATION\n"
            "Bachelor of Science\n"
            "State University\n"
            "Start Date Not Provided - 2019\n"
            "\n"
            "SKILLS\n"
            "General: Python, SQL, Docker"
        )

    def test_placeholders_for_empty_record(self, empty_resume):
        assert export_as_ats_plain_text(empty_resume) == (
            "Name Not Provided\nEmail Not Provided\nPhone Not Provided"
        )

    def test_skills_grouped_by_category(self, make_parsed_resume):
        resume = make_parsed_resume(skills=[
            {"name": "Python", "category": "General"},
            {"name": "Docker", "category": "Technical"},
            {"name": "Leadership", "category": "General"},
        ])
        text = export_as_ats_plain_text(resume)
        assert "General: Python, Leadership\nTechnical: Docker" in text

    def test_summary_and_certifications(self, make_parsed_resume):
        resume = make_parsed_resume(certifications=[
            {"name": "PMP", "organization": "PMI", "date": "2020"},
            {"name": "CKA"},
        ])
        text = export_as_ats_plain_text(resume)
        assert "PROFESSIONAL SUMMARY\nExperienced engineer" in text
        assert text.endswith("CERTIFICATIONS\nPMP - PMI (2020)\nCKA")

    def test_missing_job_dates(self, make_parsed_resume):
        resume = make_parsed_resume(work_experience=[{"company_name": "A", "job_title": "B"}])
        assert "Start Date Not Provided - End Date Not Provided" in export_as_ats_plain_text(resume)


class TestXml:
    def test_metadata_and_fields(self, jane_doe_text):
        xml = export_as_ats_xml(parse_resume(jane_doe_text), "jane.pdf", export_date=EXPORT_DATE)
        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<resume>')
        assert "<fileName>jane.pdf</fileName>" in xml
        assert "<exportDate>2024-01-02T03:04:05.678Z</exportDate>" in xml
        assert "<format>ATS-XML</format>" in xml
        assert "<fullName>Jane Doe</fullName>" in xml
        assert "<location></location>" in xml
        assert "<isCurrent>true</isCurrent>" in xml
        assert "<category>General</category>" in xml
        assert xml.endswith("</resume>")

    def test_one_element_per_entry(self, full_resume_text):
        xml = export_as_ats_xml(parse_resume(full_resume_text), export_date=EXPORT_DATE)
        assert xml.count("<position>") == 2
        assert xml.count("<certification>") == 2
        assert "<isCurrent>false</isCurrent>" in xml

    def test_values_not_escaped_by_default(self, make_parsed_resume):
        resume = make_parsed_resume(work_experience=[{"company_name": "Smith & Sons <LLC>", "job_title": "Dev"}])
        xml = export_as_ats_xml(resume, export_date=EXPORT_DATE)
        assert "<companyName>Smith & Sons <LLC></companyName>" in xml

    def test_escaping_opt_in(self, make_parsed_resume):
        resume = make_parsed_resume(work_experience=[{"company_name": "Smith & Sons <LLC>", "job_title": "Dev"}])
        xml = export_as_ats_xml(resume, export_date=EXPORT_DATE, escape_values=True)
        assert "<companyName>Smith &amp; Sons &lt;LLC&gt;</companyName>" in xml

    def test_export_date_defaults_to_now(self, empty_resume):
        xml = export_as_ats_xml(empty_resume)
        stamp = xml.split("<exportDate>")[1].split("</exportDate>")[0]
        assert stamp.endswith("Z")
        assert len(stamp) == len("2024-01-02T03:04:05.678Z")


class TestKeywordsAndSuggestions:
    def test_keywords_in_vocabulary_order(self, make_parsed_resume):
        assert find_ats_keywords(make_parsed_resume()) == ["python", "docker", "api", "rest"]

    def test_duplicated_vocabulary_terms_repeat(self, make_parsed_resume):
        resume = make_parsed_resume(summary="Ran lead generation campaigns through the CRM.")
        found = find_ats_keywords(resume)
        assert found.count("crm") == 2
        assert found.count("lead generation") == 2

    def test_only_keyword_suggestion_for_factory_record(self, make_parsed_resume):
        resume = make_parsed_resume()
        found = find_ats_keywords(resume)
        assert generate_optimization_suggestions(resume, found) == [
            "Include more industry-specific keywords to improve ATS matching",
        ]

    def test_all_suggestions_for_empty_record(self, empty_resume):
        suggestions = generate_optimization_suggestions(empty_resume, [])
        assert suggestions == [
            "Add a full name to improve ATS compatibility",
            "Include an email address for contact",
            "Add a phone number for better contact options",
            "Add a skills section with relevant technical and soft skills",
            "Include work experience to show career progression",
            "Add education information to complete your profile",
            "Add a compelling professional summary (50+ characters)",
            "Use action verbs (achieved, improved, increased) to describe accomplishments",
            "Include quantifiable achievements with numbers and percentages",
            "Add LinkedIn, GitHub, or portfolio URL to enhance online presence",
            "Include more industry-specific keywords to improve ATS matching",
        ]

    def test_enough_keywords_suppresses_suggestion(self, make_parsed_resume):
        resume = make_parsed_resume()
        assert "Include more industry-specific keywords to improve ATS matching" not in (
            generate_optimization_suggestions(resume, ["kw"] * 9)
        )


class TestEnhancedJson:
    def test_wraps_record(self, make_parsed_resume):
        resume = make_parsed_resume(summary="Ran lead generation campaigns through the CRM.")
        data = export_as_enhanced_json(resume, "cv.pdf", export_date=EXPORT_DATE)

        assert isinstance(data, ATSExportData)
        assert data.resume == resume
        assert data.file_name == "cv.pdf"
        assert data.export_date == "2024-01-02T03:04:05.678Z"
        assert data.ats_keywords.count("crm") == 1
        assert data.ats_keywords.count("lead generation") == 1

    def test_json_uses_camel_case(self, jane_doe_text):
        data = export_as_enhanced_json(parse_resume(jane_doe_text), "jane", export_date=EXPORT_DATE)
        payload = json.loads(data.to_json())

        assert set(payload) == {"resume", "fileName", "atsKeywords", "optimizationSuggestions", "exportDate"}
        assert payload["resume"]["personalInfo"]["fullName"] == "Jane Doe"
        assert payload["resume"]["workExperience"][0]["isCurrent"] is True

    def test_json_indent(self, empty_resume):
        data = export_as_enhanced_json(empty_resume, export_date=EXPORT_DATE)
        assert data.to_json(indent=4).startswith('{\n    "resume"')

    def test_default_indent_from_settings(self, empty_resume):
        data = export_as_enhanced_json(empty_resume, export_date=EXPORT_DATE)
        assert data.to_json().startswith('{\n  "resume"')

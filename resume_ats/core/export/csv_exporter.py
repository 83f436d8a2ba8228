"""
Spreadsheet-style exports of a parsed resume.
"""

import csv
import io

from resume_ats.data.models import ParsedResume


def export_as_csv(resume: ParsedResume) -> str:
    """
    Full CSV export with one block per section.

    Every cell is quoted and rows are joined with bare newlines. Rows have
    varying widths; blank separator rows hold a single empty cell.
    """
    info = resume.personal_info
    rows: list[list[str]] = [
        ["Personal Information", ""],
        ["Full Name", info.full_name or ""],
        ["Email", info.email or ""],
        ["Phone", info.phone or ""],
        ["Location", info.location or ""],
        ["LinkedIn", info.linkedin_url or ""],
        ["GitHub", info.github_url or ""],
        ["Portfolio", info.portfolio_url or ""],
        [""],
    ]

    if resume.summary:
        rows += [["Professional Summary", ""], [resume.summary, ""], [""]]

    if resume.skills:
        rows.append(["Skills", "Category"])
        rows += [[skill.name, skill.category] for skill in resume.skills]
        rows.append([""])

    if resume.work_experience:
        rows.append(["Work Experience", ""])
        rows.append(["Company", "Job Title", "Start Date", "End Date", "Location"])
        for job in resume.work_experience:
            rows.append([
                job.company_name,
                job.job_title,
                job.start_date or "",
                "Present" if job.is_current else job.end_date or "",
                job.location or "",
            ])
        rows.append([""])

    if resume.education:
        rows.append(["Education", ""])
        rows.append(["Institution", "Degree", "Field of Study", "End Date", "GPA"])
        for entry in resume.education:
            rows.append([
                entry.institution_name,
                entry.degree,
                entry.field_of_study or "",
                entry.end_date or "",
                entry.gpa or "",
            ])
        rows.append([""])

    if resume.certifications:
        rows.append(["Certifications", ""])
        rows.append(["Name", "Organization", "Date"])
        rows += [[cert.name, cert.organization or "", cert.date or ""] for cert in resume.certifications]

    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue().rstrip("\n")


def export_as_csv_preview(resume: ParsedResume) -> str:
    """Two-column summary; cells are joined with commas and not quoted."""
    info = resume.personal_info
    rows = [
        ["Section", "Value"],
        ["Name", info.full_name or ""],
        ["Email", info.email or ""],
        ["Phone", info.phone or ""],
        ["Location", info.location or ""],
        ["Skills", "; ".join(skill.name for skill in resume.skills)],
        ["Experience", "; ".join(f"{job.job_title} at {job.company_name}" for job in resume.work_experience)],
    ]
    return "\n".join(",".join(row) for row in rows)


def export_skills_csv(resume: ParsedResume) -> str:
    """Category,Skill listing in extraction order."""
    rows = [["Category", "Skill"]]
    rows += [[skill.category or "General", skill.name] for skill in resume.skills]
    return "\n".join(",".join(row) for row in rows)

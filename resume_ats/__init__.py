"""
resume-ats: heuristic resume extraction and ATS scoring.
"""

__version__ = "0.1.0"
__app_name__ = "resume-ats"

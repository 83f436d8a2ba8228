"""
Core scoring and export logic for resume-ats.
"""

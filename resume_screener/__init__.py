"""
Resume Screener - Heuristic bulk screening of candidate resumes

This application:
1. Reads plain text from PDF, DOCX and text resumes (directly or inside ZIP archives)
2. Extracts candidate contact details, skills, experience and education
3. Scores each resume against a job description with configurable weights
4. Produces strengths, weaknesses and a recommendation tier per candidate
5. Ranks candidates and exports the results as CSV or JSON
"""

__version__ = "1.0.0"
__author__ = "Resume Screener"

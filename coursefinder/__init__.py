"""Course Finder - branching questionnaire that recommends a course"""

__version__ = "0.1.0"

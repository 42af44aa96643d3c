"""
Vacation calculator: solves the start date, end date or duration of a leave
period while skipping holidays.
"""

__version__ = "0.1.0"

"""
Workforce portal: employee records, daily attendance and leave requests.
"""

__version__ = "1.0.0"

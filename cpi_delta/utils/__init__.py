"""
Utility functions module.

Month arithmetic shared by the loader, the rebaser and the calculator.

Month Semantics:
- A month is represented by a datetime.date
- The start of a range is the first day of its month
- The end of a range is the last day of its month, so the whole end month is included
"""

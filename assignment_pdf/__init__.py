"""
Paginated PDF export and answer drafting for student assignments.

License: MIT
"""

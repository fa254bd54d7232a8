"""
Interfaces between the pagination core and its collaborators.
"""

"""
Sample database configuration.
Stores username/password records.
"""

DB_NAME = "sample"


class Collections:
    """Collection names in sample."""
    DATASET = "dataset"

"""
MusicDB: a small music catalog on top of SQLAlchemy.
"""

__version__ = "0.1.0"

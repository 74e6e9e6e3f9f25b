"""
Student Registry - Permissioned Key-Value Registry for Student Records.

A single owner registers and renames students by numeric id; anyone may
read. Every mutation is validated in full before it touches the store
and reports the events it emitted.
"""

__version__ = "0.1.0"

# Hosts are importable explicitly:
#   from student_registry.api import create_app
#   from student_registry.cli import app

__all__ = ["__version__"]

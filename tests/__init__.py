"""
Genealogy Filename Test Suite
File: tests/__init__.py

Test modules for sub-template parsing and formatting.
"""

__all__ = [
    'test_modifiers',
    'test_template_engine',
    'test_parsers',
    'test_subtemplate_processor',
    'test_people_formatter',
    'test_cli'
]

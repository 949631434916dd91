"""
Validation Layer - Post-Generation Sanitization

    result_validator.py → ResultValidator (drops unrequested/duplicate notes)

Author: Shubham Singh
Date: December 2025
"""

from clinical_documentation.validation.result_validator import ResultValidator

__all__ = ["ResultValidator"]

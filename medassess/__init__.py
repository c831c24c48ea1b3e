"""MedAssess Workbench: clinical assessments, protocols and reference tools."""

__version__ = "0.1.0"

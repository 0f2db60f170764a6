"""
Finance Chat Backend - Source Package

A small HTTP backend that serves a mock household financial record and
answers natural-language questions about it through Gemini, showing the
model only the categories the caller has granted.

DESIGN PRINCIPLES:
1. The server does the arithmetic, the model only explains it
2. The model sees permitted data and nothing else
3. Fail early, fail visibly
4. Every request is auditable
"""

__version__ = "1.0.0"
__author__ = "Finance Chat Team"

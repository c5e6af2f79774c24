"""
EShift back-office service.

Customers request relocation jobs made of loads and products; administrators
assign transport units to loads and drive job status to completion.
"""

__version__ = '0.1.0'

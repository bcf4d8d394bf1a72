"""
Core Infrastructure.

Configuration, logging, and exceptions shared by the console modules.
"""

"""
EC2 Demo Dashboard API
"""

__version__ = "0.1.0"

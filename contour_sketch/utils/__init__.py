"""
Performance helpers
"""

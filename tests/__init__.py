"""
Test suite for teleopdash
"""

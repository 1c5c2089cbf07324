"""Tele-operation dashboard with a dual-stick camera navigation engine."""

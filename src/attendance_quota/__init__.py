"""Attendance Quota package.

This package is organized by feature modules (schedules, quota, ...) with a
thin Flask controller layer on top of a pure calculation engine.
"""

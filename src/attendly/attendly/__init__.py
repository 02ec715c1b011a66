"""Attendly package.

Attendance math for a personal class-attendance tracker, organized by feature
modules (attendance, subjects, reports) around a pure calculation core.
Storage and presentation stay outside and are reached through repository
protocols.
"""

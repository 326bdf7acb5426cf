"""Attendance Portal package.

Faculty dashboard for the college attendance backend. Organized by feature
modules (auth, students, attendance, ...) with a thin Flask controller layer
over services that talk to the backend REST API.
"""

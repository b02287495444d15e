"""Payroll Portal package.

Server-rendered HR and payroll front end for a separate REST backend,
organized by feature modules (employees, attendance, payroll, payslips, ...)
with thin Flask controllers over service and API repository layers.
"""

"""Time Tracker package.

Feature modules (timesheets, payroll, users) each carry their own model,
repository protocol, storage adapters, service and a thin Flask JSON controller.
"""

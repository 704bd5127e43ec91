"""chronolog package.

Attendance log reconstruction, timeline lanes, timesheet aggregation and leave
balances. Organized by feature modules (attendance, timeline, timesheets,
leave, ...) with a thin Flask controller layer over service/repository layers.
"""

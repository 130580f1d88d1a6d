"""
Migrations Package - One-off data scripts run against the application database
"""

"""
Routes package for the task list client.

This package contains route blueprints:
- views: HTML login and task list pages
"""

"""
Screens of the Recipe Dashboard.

- landing: login form shown to logged-out users
- dashboard: recipe creation form and published recipe grid
"""

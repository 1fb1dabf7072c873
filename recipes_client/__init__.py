"""
Recipe Dashboard core package.

This package contains the UI-free parts of the dashboard:
- config: environment-driven backend configuration
- models: record schemas for users and recipes
- backend: HTTP client for the hosted backend
- shell: application state and the operations the UI triggers
- forms: recipe creation form state
- cards: view models for the recipe card grid
"""
